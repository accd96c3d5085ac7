"""Runtime settings for flavorkit.

Values come from defaults, ``FLAVORKIT_*`` environment variables, or explicit
overrides passed by the CLI layer through :func:`build_settings`.
"""

import enum
import typing as t
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeEnvironment(enum.StrEnum):
    """Runtime environment for the tool itself (not a build flavor).

    Only drives logging output shape.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels accepted by the logging layer."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Settings container shared by the resolvers and the CLI."""

    model_config = SettingsConfigDict(env_prefix="FLAVORKIT_", frozen=True)

    runtime_environment: RuntimeEnvironment = RuntimeEnvironment.DEVELOPMENT
    log_level: LogLevel = LogLevel.WARNING

    # Android project layout
    android_dir: Path = Path("android")
    app_module: str = "app"
    key_properties_name: str = "key.properties"
    default_keystore_name: str = "keystore.jks"

    base_application_id: str = "com.example.mini_coding_challenges"

    @property
    def key_properties_path(self) -> Path:
        """Local signing properties file, at the Android root project."""
        return self.android_dir / self.key_properties_name

    @property
    def default_keystore_path(self) -> Path:
        """Conventional keystore location inside the application module."""
        return self.android_dir / self.app_module / self.default_keystore_name


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    CLI options that were not supplied arrive as None and must not shadow
    environment variables or defaults.
    """
    applied = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**applied)
