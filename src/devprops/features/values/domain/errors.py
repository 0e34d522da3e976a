"""
Summary: Failure types raised by typed attribute accessors.
Why: Give callers one catchable incompatibility error that still carries the request context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .declared_type import DeclaredType


class IncompatibleTypeError(ValueError):
    """Raised when a value cannot be read as the requested type.

    Covers both a declared type that does not match the accessor and raw text that
    does not parse under a matching declared type. In the latter case the parse
    failure is available as ``__cause__``.
    """

    def __init__(
        self,
        reason: str,
        *,
        declared_type: DeclaredType,
        requested: str,
        raw_value: str | None,
    ) -> None:
        super().__init__(reason)
        self.reason: str = reason
        self.declared_type: DeclaredType = declared_type
        self.requested: str = requested
        self.raw_value: str | None = raw_value


class NegativeValueError(IncompatibleTypeError):
    """Raised when a non-negative integer value parses to a negative number."""

    def __init__(
        self,
        reason: str,
        *,
        declared_type: DeclaredType,
        requested: str,
        raw_value: str | None,
        value: int,
    ) -> None:
        super().__init__(
            reason,
            declared_type=declared_type,
            requested=requested,
            raw_value=raw_value,
        )
        self.value: int = value


__all__ = ["IncompatibleTypeError", "NegativeValueError"]
