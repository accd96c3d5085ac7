"""CLI application factory."""

import os
import typing as t
from pathlib import Path
from typing import Optional

import typer

from ..app import create_app
from ..config.settings import LogLevel, Settings, build_settings
from ..signing.injected import collect_injected_properties, parse_property_assignments
from .commands.resolve import resolve
from .commands.signing import signing
from .commands.variants import variants
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
    environ: t.Mapping[str, str] | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional fully wired CLIState, takes precedence over settings
        environ: Environment searched for ORG_GRADLE_PROJECT_* signing
                 properties. Defaults to os.environ.

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="flavorkit",
        help="Resolve Android build variants and their signing configuration",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        android_dir: Optional[Path] = typer.Option(
            None,
            "--android-dir",
            "-d",
            help="Android project directory holding key.properties",
        ),
        base_application_id: Optional[str] = typer.Option(
            None,
            "--base-application-id",
            help="Application id shared by all flavors",
        ),
        properties: Optional[list[str]] = typer.Option(
            None,
            "--property",
            "-P",
            help="Gradle project property (name=value), repeatable",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            ctx.obj = state
            return

        try:
            overrides = parse_property_assignments(properties or [])
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--property")

        resolved_settings = settings or build_settings(
            android_dir=android_dir,
            base_application_id=base_application_id,
            log_level=LogLevel.DEBUG if verbose else None,
        )
        injected = collect_injected_properties(
            overrides, os.environ if environ is None else environ
        )
        ctx.obj = CLIState(create_app(resolved_settings, injected))

    app.command()(variants)
    app.command()(resolve)
    app.command()(signing)

    return app
