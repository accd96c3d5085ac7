"""Build variant resolution.

Maps an ``(environment, build type)`` request onto the static catalogs and
derives the application identity and compile-time constants.
"""

import enum
import typing as t

from ..domain.build_types import BUILD_TYPES, BuildType, BuildTypeName
from ..domain.environments import ENVIRONMENTS, Environment, EnvironmentName
from ..domain.exceptions import UnknownVariantError
from ..domain.variants import BuildVariant
from ..infrastructure.logging import get_logger
from ..signing.resolver import SigningConfigResolver

if t.TYPE_CHECKING:
    import loguru

_E = t.TypeVar("_E", bound=enum.StrEnum)


def _lookup(kind: str, value: str, enum_type: type[_E]) -> _E:
    try:
        return enum_type(value)
    except ValueError:
        raise UnknownVariantError(
            kind=kind, value=value, allowed=[member.value for member in enum_type]
        ) from None


class VariantResolver:
    """Resolve build variants from environment and build type names.

    ``resolve_variant`` is a pure lookup over the catalogs. ``resolve_build``
    additionally consults the signing resolver for build types that need
    real credentials.
    """

    def __init__(
        self,
        base_application_id: str,
        signing_resolver: SigningConfigResolver | None = None,
        environments: t.Mapping[EnvironmentName, Environment] = ENVIRONMENTS,
        build_types: t.Mapping[BuildTypeName, BuildType] = BUILD_TYPES,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            base_application_id: Application id shared by every flavor
            signing_resolver: Used by ``resolve_build`` for signed build types
            environments: Environment catalog, defaults to the built-in one
            build_types: Build type catalog, defaults to the built-in one
            logger: Logger instance. If None, a default logger is created.
        """
        self._base_application_id = base_application_id
        self._signing_resolver = signing_resolver
        self._environments = environments
        self._build_types = build_types
        self._logger = logger or get_logger(__name__)

    def resolve_variant(
        self, environment_name: str, build_type_name: str
    ) -> BuildVariant:
        """Compose the variant for an environment and build type.

        Raises:
            UnknownVariantError: Either name is outside its closed set
        """
        environment = self._environments[
            _lookup("environment", environment_name, EnvironmentName)
        ]
        build_type = self._build_types[
            _lookup("build type", build_type_name, BuildTypeName)
        ]

        return BuildVariant(
            environment=environment,
            build_type=build_type,
            application_id=self._base_application_id
            + environment.application_id_suffix,
            version_name_suffix=environment.version_name_suffix,
            display_name=environment.display_name,
            constants={
                "API_BASE_URL": environment.api_base_url,
                "ENVIRONMENT": str(environment.name),
            },
        )

    def list_variants(self) -> list[BuildVariant]:
        """Every environment crossed with every build type, in catalog order."""
        return [
            self.resolve_variant(environment, build_type)
            for environment in self._environments
            for build_type in self._build_types
        ]

    def resolve_build(self, environment_name: str, build_type_name: str) -> BuildVariant:
        """Resolve the variant together with its signing config.

        Debug builds use the build tool's developer identity and come back
        with ``signing=None``; they never fail on signing. Release builds
        propagate every signing error.

        Raises:
            UnknownVariantError: Either name is outside its closed set
            SigningError: Signing resolution failed for a signed build type
        """
        variant = self.resolve_variant(environment_name, build_type_name)
        if not variant.build_type.requires_signing:
            self._logger.debug(f"{variant.name}: using debug signing identity")
            return variant

        if self._signing_resolver is None:
            raise ValueError("resolve_build needs a signing resolver for signed builds")

        signing = self._signing_resolver.resolve_signing_config()
        if not signing.is_usable:
            self._logger.warning(
                f"{variant.name}: signing config from {signing.source} is missing "
                f"{', '.join(signing.missing_fields)}"
            )
        return variant.model_copy(update={"signing": signing})
