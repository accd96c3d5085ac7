"""Domain layer - build variant models and exceptions."""

from .build_types import BUILD_TYPES, ArtifactType, BuildType, BuildTypeName
from .environments import ENVIRONMENTS, Environment, EnvironmentName
from .exceptions import (
    FlavorkitError,
    IncompleteSigningPropertiesError,
    NoSigningConfigError,
    PropertiesFileError,
    SigningError,
    UnknownVariantError,
    UnusableSigningConfigError,
)
from .signing import SigningConfig, SigningSource
from .variants import BuildVariant

__all__ = [
    # Variant Models
    "ArtifactType",
    "BuildType",
    "BuildTypeName",
    "BuildVariant",
    "Environment",
    "EnvironmentName",
    "BUILD_TYPES",
    "ENVIRONMENTS",
    # Signing Models
    "SigningConfig",
    "SigningSource",
    # Exceptions
    "FlavorkitError",
    "IncompleteSigningPropertiesError",
    "NoSigningConfigError",
    "PropertiesFileError",
    "SigningError",
    "UnknownVariantError",
    "UnusableSigningConfigError",
]
