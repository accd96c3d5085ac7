"""CLI state container."""

from ..app import App
from ..config.settings import Settings
from ..signing.resolver import SigningConfigResolver
from ..variants.resolver import VariantResolver


class CLIState:
    """Application state container for CLI commands.

    Wraps the wired App so commands create resolvers through one place,
    and tests can swap the factories for mocks.
    """

    def __init__(self, app: App):
        self.app = app

    @property
    def settings(self) -> Settings:
        return self.app.settings

    def create_variant_resolver(self) -> VariantResolver:
        return self.app.create_variant_resolver()

    def create_signing_resolver(self) -> SigningConfigResolver:
        return self.app.create_signing_resolver()
