"""Signing credential sources and resolution."""

from .filesystem import FileSystem, LocalFileSystem
from .injected import (
    InjectedSigningProperties,
    collect_injected_properties,
    parse_property_assignments,
)
from .properties import KeyProperties, parse_properties
from .resolver import SigningConfigResolver

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "InjectedSigningProperties",
    "KeyProperties",
    "SigningConfigResolver",
    "collect_injected_properties",
    "parse_properties",
    "parse_property_assignments",
]
