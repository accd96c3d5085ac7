from dataclasses import dataclass

from .config.settings import Settings
from .infrastructure.logging import setup_logging
from .signing.filesystem import FileSystem
from .signing.injected import InjectedSigningProperties
from .signing.resolver import SigningConfigResolver
from .variants.resolver import VariantResolver


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the settings and the inputs captured at invocation time, and
    builds resolvers from them. Tests pass explicit values instead of
    relying on the process environment.
    """

    settings: Settings
    injected: InjectedSigningProperties
    filesystem: FileSystem | None = None

    def create_signing_resolver(self) -> SigningConfigResolver:
        return SigningConfigResolver.from_settings(
            self.settings, self.injected, filesystem=self.filesystem
        )

    def create_variant_resolver(self) -> VariantResolver:
        return VariantResolver(
            base_application_id=self.settings.base_application_id,
            signing_resolver=self.create_signing_resolver(),
        )


def create_app(
    settings: Settings | None = None,
    injected: InjectedSigningProperties | None = None,
    filesystem: FileSystem | None = None,
) -> App:
    """Create an `App` with provided settings or defaults and configure logging."""
    settings = settings or Settings()
    setup_logging(settings)
    return App(
        settings=settings,
        injected=injected or InjectedSigningProperties(),
        filesystem=filesystem,
    )
