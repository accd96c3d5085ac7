"""Signing config resolution across CI, local file and default keystore."""

import typing as t
from pathlib import Path

from ..config.settings import Settings
from ..domain.exceptions import (
    IncompleteSigningPropertiesError,
    NoSigningConfigError,
    PropertiesFileError,
)
from ..domain.signing import SigningConfig, SigningSource
from ..infrastructure.logging import get_logger
from .filesystem import FileSystem, LocalFileSystem
from .injected import InjectedSigningProperties
from .properties import PROPERTIES_ENCODING, KeyProperties

if t.TYPE_CHECKING:
    import loguru


class SigningConfigResolver:
    """Pick the signing config for a release build.

    Sources are tried in order and the first available one wins:

    1. CI-injected properties, all four required; a partial set is an error
    2. The local ``key.properties`` file, if present
    3. The conventional default keystore, if present (store file only)

    Pipelines always take priority over anything in the working tree, so a
    stale local keystore can never shadow a CI-supplied signing identity.

    The resolver holds no mutable state; calling it again with the same
    inputs and filesystem contents returns an equal result.
    """

    def __init__(
        self,
        injected: InjectedSigningProperties,
        key_properties_path: Path,
        default_keystore_path: Path,
        filesystem: FileSystem | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            injected: Signing properties supplied by the pipeline
            key_properties_path: Location of the local properties file
            default_keystore_path: Location of the fallback keystore
            filesystem: Filesystem capability. Defaults to the local disk.
            logger: Logger instance. If None, a default logger is created.
        """
        self._injected = injected
        self._key_properties_path = key_properties_path
        self._default_keystore_path = default_keystore_path
        self._filesystem = filesystem or LocalFileSystem()
        self._logger = logger or get_logger(__name__)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        injected: InjectedSigningProperties,
        filesystem: FileSystem | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> "SigningConfigResolver":
        """Create a resolver using the paths configured in ``settings``."""
        return cls(
            injected=injected,
            key_properties_path=settings.key_properties_path,
            default_keystore_path=settings.default_keystore_path,
            filesystem=filesystem,
            logger=logger,
        )

    def resolve_signing_config(self) -> SigningConfig:
        """Resolve the signing config by precedence.

        Returns:
            The config from the first available source. It may still be
            unusable (see ``SigningConfig.is_usable``).

        Raises:
            IncompleteSigningPropertiesError: CI injected only some properties
            PropertiesFileError: The properties file exists but is unreadable
            NoSigningConfigError: No source is available
        """
        if not self._injected.is_empty:
            if not self._injected.is_complete:
                raise IncompleteSigningPropertiesError(missing=self._injected.missing)
            self._logger.info("Using CI-injected signing properties")
            return self._injected.to_signing_config()

        if self._filesystem.is_file(self._key_properties_path):
            self._logger.info(f"Using signing properties from {self._key_properties_path}")
            return self._load_properties_file().to_signing_config()

        if self._filesystem.is_file(self._default_keystore_path):
            self._logger.warning(
                f"Falling back to default keystore {self._default_keystore_path}; "
                "passwords and key alias are not set"
            )
            return SigningConfig(
                source=SigningSource.DEFAULT_KEYSTORE,
                store_file=self._default_keystore_path,
            )

        raise NoSigningConfigError(
            checked=[
                "CI-injected signing properties",
                str(self._key_properties_path),
                str(self._default_keystore_path),
            ]
        )

    def _load_properties_file(self) -> KeyProperties:
        path = self._key_properties_path
        try:
            text = self._filesystem.read_text(path, encoding=PROPERTIES_ENCODING)
        except OSError as e:
            raise PropertiesFileError(path=path, reason=str(e)) from e

        properties = KeyProperties.from_text(text)
        present = [
            key for key, value in properties.model_dump(by_alias=True).items() if value
        ]
        self._logger.debug(f"Parsed {path}, keys present: {present}")
        return properties
