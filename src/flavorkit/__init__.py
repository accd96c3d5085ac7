"""flavorkit - build-variant and signing-credential resolution."""

from .app import App, create_app
from .domain import (
    ArtifactType,
    BuildType,
    BuildTypeName,
    BuildVariant,
    Environment,
    EnvironmentName,
    FlavorkitError,
    IncompleteSigningPropertiesError,
    NoSigningConfigError,
    SigningConfig,
    SigningSource,
    UnknownVariantError,
)
from .signing import SigningConfigResolver, collect_injected_properties
from .variants import VariantResolver

__all__ = [
    "App",
    "create_app",
    "ArtifactType",
    "BuildType",
    "BuildTypeName",
    "BuildVariant",
    "Environment",
    "EnvironmentName",
    "FlavorkitError",
    "IncompleteSigningPropertiesError",
    "NoSigningConfigError",
    "SigningConfig",
    "SigningConfigResolver",
    "SigningSource",
    "UnknownVariantError",
    "VariantResolver",
    "collect_injected_properties",
]
