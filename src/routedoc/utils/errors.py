"""Exceptions raised while generating a document."""
from __future__ import annotations

from typing import Sequence


class RouteDocError(Exception):
    """Base class for routedoc failures."""


class RouteAnalysisError(RouteDocError):
    """Raised when a documented route does not lead to exactly one HTTP method."""

    def __init__(self, route: object, methods: Sequence[str], message: str | None = None):
        if message is None:
            if methods:
                message = (
                    f"route {route!r} has {len(methods)} HTTP method selectors "
                    f"({', '.join(methods)}), expected exactly one"
                )
            else:
                message = f"route {route!r} has no HTTP method selector"
        super().__init__(message)
        self.route = route
        self.methods = tuple(methods)


class AssemblerStateError(RouteDocError):
    """Raised when the assembler is used outside the state an operation needs."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"assembler is {actual}, operation requires {expected}")
        self.expected = expected
        self.actual = actual


class TargetLoadError(RouteDocError):
    """Raised when a ``module:attribute`` target cannot be loaded."""


__all__ = [
    "AssemblerStateError",
    "RouteAnalysisError",
    "RouteDocError",
    "TargetLoadError",
]
