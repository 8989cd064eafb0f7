"""Exception types raised by scalaropt.

Both concrete errors derive from :class:`ValueError` so callers that only
guard against bad input keep working.
"""

from __future__ import annotations


class ScalarOptError(Exception):
    """Base class for all scalaropt errors."""


class InvalidExpression(ScalarOptError, ValueError):
    """A custom formula is malformed, uses disallowed symbols or fails to evaluate."""


class PreconditionViolation(ScalarOptError, ValueError):
    """Search inputs violate a method precondition; no search is attempted."""


__all__ = ["ScalarOptError", "InvalidExpression", "PreconditionViolation"]
