# Where: devprops.shared.__init__
# What: Provide a concise import surface for shared value objects.
# Why: Encourage consistent reuse of shared handles across features.

"""Shared cross-cutting value objects exposed at the package level."""

from .property_ref import DEFAULT_ASPECT, PropertyRef

__all__ = ["DEFAULT_ASPECT", "PropertyRef"]
