"""
Example: comparing one-dimensional minimizers

Runs every search method on the catalog objectives and on a custom formula,
then prints the first rows of one trace the way a front-end would tabulate it.
"""

from scalaropt import Objective, Status, build_function, resolve_objective, run_search, sample

BOUNDS = (-2.0, 5.0)


def compare_on(key):
    objective = resolve_objective(key)
    label = objective.label
    print("=" * 60)
    print(f"Objective: {label}")
    print("=" * 60)
    derivatives = objective.derivatives
    for method in ("golden", "fibonacci", "sequential", "dichotomous"):
        res = run_search(method, objective.fun, bounds=BOUNDS)
        print(f"{method:<12} x = {res.x:.6f}  f = {res.fun:.6f}  iterations = {res.nit}")
    first = derivatives[0]
    if first(BOUNDS[0]) * first(BOUNDS[1]) <= 0:
        res = run_search("bisection", objective.fun, derivatives, bounds=BOUNDS)
        print(f"{'bisection':<12} x = {res.x:.6f}  f = {res.fun:.6f}  iterations = {res.nit}")
    res = run_search("newton", objective.fun, derivatives, x0=0.0)
    note = "" if res.status is Status.CONVERGED else f"  ({res.status.value})"
    print(f"{'newton':<12} x = {res.x:.6f}  f = {res.fun:.6f}  iterations = {res.nit}{note}")
    print()


def print_trace():
    f = build_function("x^2 - 4*x + 3")
    res = run_search("golden", f, bounds=BOUNDS, tol=1e-6)
    print("Golden-section trace for x^2 - 4*x + 3")
    for row in res.table()[:5]:
        print(
            f"{row['iteration']:>3}  [{row['a']:.4f}, {row['b']:.4f}]"
            f"  fc = {row['fc']:.4f}  fd = {row['fd']:.4f}"
        )
    print(f"Plot samples: {len(sample(f, BOUNDS))}")
    print(f"Final estimate: x = {res.x:.6f}")


if __name__ == "__main__":
    for member in Objective:
        compare_on(member)
    compare_on("x^2 - 4*x + 3")
    print_trace()
