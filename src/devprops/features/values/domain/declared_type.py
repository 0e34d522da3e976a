"""
Summary: Closed enumeration of the schema types an attribute value may declare.
Why: Make wrong-type checks membership tests over enum members instead of string comparisons.
"""

from __future__ import annotations

from enum import Enum

from devprops.platform.logging import logger


class DeclaredType(Enum):
    """Schema type tag attached to a raw attribute value."""

    BOOLEAN = "xs:boolean"
    DOUBLE = "xs:double"
    FLOAT = "xs:float"
    INTEGER = "xs:integer"
    NON_NEGATIVE_INTEGER = "xs:nonNegativeInteger"
    LONG = "xs:long"
    ENUMERATION = "xs:enumeration"
    UNKNOWN = None

    @property
    def tag(self) -> str | None:
        """Identifier string used on the wire, or None for ``UNKNOWN``."""
        return self.value

    @classmethod
    def from_tag(cls, tag: str | None) -> DeclaredType:
        """Resolve an identifier string such as ``xs:integer``.

        Args:
            tag: Identifier supplied by the schema resolver.

        Returns:
            DeclaredType: Matching member, or ``UNKNOWN`` for anything unrecognised.
        """
        if tag is not None:
            for member in cls:
                if member.value == tag:
                    return member

        logger.debug(
            "Unrecognised declared type tag %r; treating as unknown",
            tag,
            extra={"value_event": "value.type.unknown", "type_tag": tag},
        )
        return cls.UNKNOWN


__all__ = ["DeclaredType"]
