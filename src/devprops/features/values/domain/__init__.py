"""
Summary: Export typed value domain objects and their failure types.
Why: Provide a stable import surface for the value feature.
"""

from .declared_type import DeclaredType
from .errors import IncompatibleTypeError, NegativeValueError
from .typed_value import ABSENT_SENTINEL, TypedValue

__all__ = [
    "ABSENT_SENTINEL",
    "DeclaredType",
    "IncompatibleTypeError",
    "NegativeValueError",
    "TypedValue",
]
