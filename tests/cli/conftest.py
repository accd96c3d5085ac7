"""Shared fixtures for CLI tests."""

import pytest

from flavorkit.app import create_app
from flavorkit.cli.app import create_cli_app
from flavorkit.cli.state import CLIState
from flavorkit.signing.resolver import SigningConfigResolver
from flavorkit.variants.resolver import VariantResolver


@pytest.fixture
def make_cli_app(test_settings):
    """Build a CLI app over the temporary project with a controlled environment."""

    def _make(environ=None):
        return create_cli_app(settings=test_settings, environ=environ or {})

    return _make


@pytest.fixture
def cli_app(make_cli_app):
    """CLI app with test settings and no injected properties."""
    return make_cli_app()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app(environ={})


@pytest.fixture
def mock_variant_resolver(mocker):
    return mocker.Mock(spec=VariantResolver)


@pytest.fixture
def mock_signing_resolver(mocker):
    return mocker.Mock(spec=SigningConfigResolver)


@pytest.fixture
def cli_state_with_mocks(test_settings, mock_variant_resolver, mock_signing_resolver):
    """CLIState whose resolver factories return mocks."""
    state = CLIState(create_app(test_settings))
    state.create_variant_resolver = lambda: mock_variant_resolver
    state.create_signing_resolver = lambda: mock_signing_resolver
    return state


@pytest.fixture
def app_with_mocks(cli_state_with_mocks):
    """CLI app with mocked resolvers for testing."""
    return create_cli_app(state=cli_state_with_mocks)
