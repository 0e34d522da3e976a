# Where: devprops.features.values.__init__
# What: Expose the typed attribute value and its declared type tags.
# Why: Provide a cohesive import surface for callers holding resolved attributes.

from .domain import (
    ABSENT_SENTINEL,
    DeclaredType,
    IncompatibleTypeError,
    NegativeValueError,
    TypedValue,
)

__all__ = [
    "ABSENT_SENTINEL",
    "DeclaredType",
    "IncompatibleTypeError",
    "NegativeValueError",
    "TypedValue",
]
