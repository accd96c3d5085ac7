"""Pytest configuration and fixtures for flavorkit tests."""

from pathlib import Path

import loguru
import pytest
from typer.testing import CliRunner

from flavorkit.app import create_app
from flavorkit.config.settings import LogLevel, RuntimeEnvironment, Settings
from flavorkit.infrastructure.logging import reset_logging
from flavorkit.signing.injected import InjectedSigningProperties

COMPLETE_KEY_PROPERTIES = """\
storePassword=file-store-pass
keyPassword=file-key-pass
keyAlias=upload
storeFile=/keys/upload-keystore.jks
"""


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def android_dir(tmp_path: Path) -> Path:
    """Provide an empty Android project layout (android/app)."""
    root = tmp_path / "android"
    (root / "app").mkdir(parents=True)
    return root


@pytest.fixture
def test_settings(android_dir):
    """Provide test-specific settings pointing at the temporary project."""
    return Settings(
        runtime_environment=RuntimeEnvironment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        android_dir=android_dir,
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def ci_properties():
    """Provide a complete set of CI-injected signing properties."""
    return InjectedSigningProperties(
        store_file="/ci/release.jks",
        store_password="ci-store-pass",
        key_alias="ci-release",
        key_password="ci-key-pass",
    )


@pytest.fixture
def write_key_properties(test_settings):
    """Write key.properties content into the temporary Android project."""

    def _write(content: str = COMPLETE_KEY_PROPERTIES) -> Path:
        path = test_settings.key_properties_path
        path.write_text(content, encoding="latin-1")
        return path

    return _write


@pytest.fixture
def write_default_keystore(test_settings):
    """Create the conventional keystore.jks in the app module."""

    def _write() -> Path:
        path = test_settings.default_keystore_path
        path.write_bytes(b"\xfe\xed\xfe\xed")
        return path

    return _write


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()
