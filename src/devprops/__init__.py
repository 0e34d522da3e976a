"""
devprops: typed access to loosely typed device property values.

Each value is a raw string paired with a declared schema type tag such as
``xs:integer`` or ``xs:enumeration``. ``TypedValue`` converts it on demand:
absent values read as zero, a wrong declared type or malformed text raises
``IncompatibleTypeError``.
"""

from devprops.features.values import (
    ABSENT_SENTINEL,
    DeclaredType,
    IncompatibleTypeError,
    NegativeValueError,
    TypedValue,
)
from devprops.shared import PropertyRef

__version__ = "0.1.0"

__all__ = [
    "ABSENT_SENTINEL",
    "DeclaredType",
    "IncompatibleTypeError",
    "NegativeValueError",
    "PropertyRef",
    "TypedValue",
    "__version__",
]
