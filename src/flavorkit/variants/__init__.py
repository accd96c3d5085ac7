"""Build variant resolution."""

from .resolver import VariantResolver

__all__ = ["VariantResolver"]
