"""Signing configuration domain models."""

import enum
import typing as t
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from .exceptions import UnusableSigningConfigError

_CREDENTIAL_FIELDS: t.Final = (
    "store_file",
    "store_password",
    "key_alias",
    "key_password",
)


def _is_unset(value: t.Any) -> bool:
    if value is None:
        return True
    if isinstance(value, SecretStr):
        return not value.get_secret_value()
    return not str(value)


class SigningSource(enum.StrEnum):
    """Where a signing config was resolved from, in precedence order."""

    CI_PROPERTIES = "ci_properties"
    PROPERTIES_FILE = "properties_file"
    DEFAULT_KEYSTORE = "default_keystore"


class SigningConfig(BaseModel):
    """Credential set used to sign a release artifact.

    Every credential is independently optional. A config missing any of
    them is still returned as-is so callers can see exactly what is absent;
    nothing fills in default aliases or passwords.
    """

    model_config = ConfigDict(frozen=True)

    source: SigningSource = Field(description="Source this config came from")
    store_file: Path | None = Field(default=None, description="Keystore path")
    store_password: SecretStr | None = Field(default=None)
    key_alias: str | None = Field(default=None)
    key_password: SecretStr | None = Field(default=None)

    @field_validator(*_CREDENTIAL_FIELDS, mode="before")
    @classmethod
    def _blank_to_none(cls, value: t.Any) -> t.Any:
        if isinstance(value, (str, Path)) and not str(value).strip():
            return None
        return value

    @property
    def missing_fields(self) -> list[str]:
        """Names of credential fields that are unset or empty."""
        return [name for name in _CREDENTIAL_FIELDS if _is_unset(getattr(self, name))]

    @property
    def is_usable(self) -> bool:
        """True only when all four credentials are present and non-empty."""
        return not self.missing_fields

    def require_usable(self) -> "SigningConfig":
        """Return self, or raise if any credential is missing."""
        if not self.is_usable:
            raise UnusableSigningConfigError(
                source=str(self.source), missing=self.missing_fields
            )
        return self
