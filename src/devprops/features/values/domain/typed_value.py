"""
Summary: Immutable typed accessor over a raw attribute string and its declared schema type.
Why: Convert loosely typed attribute text on demand with a strict absent/wrong-type/malformed contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ._literal_utils import (
    INT32_BITS,
    INT64_BITS,
    parse_bounded_int,
    parse_decimal,
    parse_permissive_boolean,
    parse_single_precision,
    split_enumeration,
)
from .declared_type import DeclaredType
from .errors import IncompatibleTypeError, NegativeValueError

ABSENT_SENTINEL: Final[str] = "-"

_DOUBLE_TYPES: Final[frozenset[DeclaredType]] = frozenset({DeclaredType.DOUBLE, DeclaredType.FLOAT})
_LONG_TYPES: Final[frozenset[DeclaredType]] = frozenset({DeclaredType.LONG, DeclaredType.INTEGER})


@dataclass(frozen=True, slots=True)
class TypedValue:
    """A single attribute value with its declared type and attribute reference.

    Absent values (``None``, ``""`` or the ``"-"`` sentinel) read as the zero value
    of every accessor. Requesting a type other than the declared one raises
    ``IncompatibleTypeError``, as does malformed text under a matching type.
    """

    raw_value: str | None
    declared_type: DeclaredType
    attribute_ref: object = None

    @classmethod
    def from_tag(
        cls, raw_value: str | None, tag: str | None, attribute_ref: object = None
    ) -> TypedValue:
        """Build a value from a wire identifier such as ``xs:long``."""
        return cls(raw_value, DeclaredType.from_tag(tag), attribute_ref)

    def exists(self) -> bool:
        """Return whether a real value is present."""
        return bool(self.raw_value) and self.raw_value != ABSENT_SENTINEL

    def get_double(self) -> float:
        """Read the value as a double.

        Returns:
            float: Parsed value, or ``0.0`` when absent.

        Raises:
            IncompatibleTypeError: If the declared type is not double or float, or the
                text is not a decimal literal.
        """
        if not self.exists():
            return 0.0

        if self.declared_type in _DOUBLE_TYPES:
            try:
                return parse_decimal(self._text())
            except ValueError as exc:
                raise self._incompatible(DeclaredType.DOUBLE, str(exc)) from exc

        raise self._incompatible(DeclaredType.DOUBLE)

    def get_float(self) -> float:
        """Read the value as a single-precision float (``0.0`` when absent)."""
        if not self.exists():
            return 0.0

        if self.declared_type is DeclaredType.FLOAT:
            try:
                return parse_single_precision(self._text())
            except ValueError as exc:
                raise self._incompatible(DeclaredType.FLOAT, str(exc)) from exc

        raise self._incompatible(DeclaredType.FLOAT)

    def get_long(self) -> int:
        """Read the value as a signed 64-bit integer (``0`` when absent)."""
        if not self.exists():
            return 0

        if self.declared_type in _LONG_TYPES:
            try:
                return parse_bounded_int(self._text(), INT64_BITS)
            except ValueError as exc:
                raise self._incompatible(DeclaredType.LONG, str(exc)) from exc

        raise self._incompatible(DeclaredType.LONG)

    def get_integer(self) -> int:
        """Read the value as a signed 32-bit integer.

        Non-negative integer values are accepted when they parse to zero or more.
        A negative one ends in the same terminal failure as a wrong declared type,
        raised as ``NegativeValueError``.

        Returns:
            int: Parsed value, or ``0`` when absent.

        Raises:
            IncompatibleTypeError: On a wrong declared type, malformed or out of
                range text, or a negative non-negative integer.
        """
        if not self.exists():
            return 0

        if self.declared_type is DeclaredType.INTEGER:
            try:
                return parse_bounded_int(self._text(), INT32_BITS)
            except ValueError as exc:
                raise self._incompatible(DeclaredType.INTEGER, str(exc)) from exc

        if self.declared_type is DeclaredType.NON_NEGATIVE_INTEGER:
            try:
                number = parse_bounded_int(self._text(), INT32_BITS)
            except ValueError as exc:
                raise self._incompatible(DeclaredType.INTEGER, str(exc)) from exc
            if number >= 0:
                return number
            raise NegativeValueError(
                _not_a(DeclaredType.INTEGER),
                declared_type=self.declared_type,
                requested=DeclaredType.INTEGER.value,
                raw_value=self.raw_value,
                value=number,
            )

        raise self._incompatible(DeclaredType.INTEGER)

    def get_boolean(self) -> bool:
        """Read the value as a boolean; only ``true`` in any case is True."""
        if not self.exists():
            return False

        if self.declared_type is DeclaredType.BOOLEAN:
            return parse_permissive_boolean(self._text())

        raise self._incompatible(DeclaredType.BOOLEAN)

    def get_enumeration(self) -> list[str] | None:
        """Read the value as a list of comma-separated members.

        Returns:
            list[str] | None: Trimmed members in order, or None when absent.
        """
        if not self.exists():
            return None

        if self.declared_type is DeclaredType.ENUMERATION:
            return split_enumeration(self._text())

        raise self._incompatible(DeclaredType.ENUMERATION)

    def get_string(self) -> str:
        if not self.exists():
            return ""
        return self._text()

    def get_attribute_ref(self) -> object:
        return self.attribute_ref

    def _text(self) -> str:
        # Only reached after exists() confirmed a non-empty string.
        assert self.raw_value is not None
        return self.raw_value

    def _incompatible(
        self, requested: DeclaredType, reason: str | None = None
    ) -> IncompatibleTypeError:
        return IncompatibleTypeError(
            reason or _not_a(requested),
            declared_type=self.declared_type,
            requested=str(requested.value),
            raw_value=self.raw_value,
        )


def _not_a(requested: DeclaredType) -> str:
    return f"Not {requested.value} value"


__all__ = ["ABSENT_SENTINEL", "TypedValue"]
