# Where: devprops.shared.property_ref
# What: Reference handle naming the vocabulary property a value instantiates.
# Why: Offer a ready-made handle for callers without their own schema reference type.

from dataclasses import dataclass
from typing import Final

DEFAULT_ASPECT: Final[str] = "device"


@dataclass(frozen=True, slots=True)
class PropertyRef:
    """Property name qualified by its aspect and vocabulary namespace."""

    local_property_name: str
    aspect_name: str = DEFAULT_ASPECT
    namespace: str = ""

    @property
    def qualified_name(self) -> str:
        if not self.namespace:
            return self.local_property_name
        return f"{self.namespace}:{self.local_property_name}"


__all__ = ["DEFAULT_ASPECT", "PropertyRef"]
