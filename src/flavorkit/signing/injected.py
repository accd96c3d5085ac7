"""Signing properties injected by CI pipelines.

Pipelines pass these as Gradle project properties, either on the command line
(``-Pname=value``) or through ``ORG_GRADLE_PROJECT_<name>`` environment
variables. Command-line values win over the environment.
"""

import typing as t

from pydantic import BaseModel, ConfigDict

from ..domain.signing import SigningConfig, SigningSource

STORE_FILE_PROPERTY: t.Final = "android.injected.signing.store.file"
STORE_PASSWORD_PROPERTY: t.Final = "android.injected.signing.store.password"
KEY_ALIAS_PROPERTY: t.Final = "android.injected.signing.key.alias"
KEY_PASSWORD_PROPERTY: t.Final = "android.injected.signing.key.password"

GRADLE_ENV_PREFIX: t.Final = "ORG_GRADLE_PROJECT_"

# Field name -> Gradle property name
PROPERTY_NAMES: t.Final[t.Mapping[str, str]] = {
    "store_file": STORE_FILE_PROPERTY,
    "store_password": STORE_PASSWORD_PROPERTY,
    "key_alias": KEY_ALIAS_PROPERTY,
    "key_password": KEY_PASSWORD_PROPERTY,
}


class InjectedSigningProperties(BaseModel):
    """The four injected signing values; each may be absent."""

    model_config = ConfigDict(frozen=True)

    store_file: str | None = None
    store_password: str | None = None
    key_alias: str | None = None
    key_password: str | None = None

    def _is_present(self, field: str) -> bool:
        value = getattr(self, field)
        return value is not None and value.strip() != ""

    @property
    def present(self) -> list[str]:
        """Gradle names of the properties that carry a non-blank value."""
        return [name for field, name in PROPERTY_NAMES.items() if self._is_present(field)]

    @property
    def missing(self) -> list[str]:
        """Gradle names of the properties that are absent or blank."""
        return [
            name for field, name in PROPERTY_NAMES.items() if not self._is_present(field)
        ]

    @property
    def is_empty(self) -> bool:
        return not self.present

    @property
    def is_complete(self) -> bool:
        return not self.missing

    def to_signing_config(self) -> SigningConfig:
        return SigningConfig(
            source=SigningSource.CI_PROPERTIES,
            store_file=self.store_file,
            store_password=self.store_password,
            key_alias=self.key_alias,
            key_password=self.key_password,
        )


def parse_property_assignments(assignments: t.Iterable[str]) -> dict[str, str]:
    """Parse ``name=value`` strings such as those given to ``-P``.

    Raises:
        ValueError: If an assignment has no ``=`` or an empty name.
    """
    parsed: dict[str, str] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Expected 'name=value', got '{assignment}'")
        parsed[name] = value
    return parsed


def collect_injected_properties(
    overrides: t.Mapping[str, str] | None = None,
    environ: t.Mapping[str, str] | None = None,
) -> InjectedSigningProperties:
    """Gather injected signing properties from the environment and overrides.

    Args:
        overrides: Explicit Gradle project properties (``-P`` values)
        environ: Environment mapping searched for ``ORG_GRADLE_PROJECT_*``

    Returns:
        Typed properties; unrelated keys are ignored
    """
    overrides = overrides or {}
    environ = environ or {}

    values: dict[str, str] = {}
    for field, name in PROPERTY_NAMES.items():
        if name in overrides:
            values[field] = overrides[name]
        elif f"{GRADLE_ENV_PREFIX}{name}" in environ:
            values[field] = environ[f"{GRADLE_ENV_PREFIX}{name}"]
    return InjectedSigningProperties(**values)
