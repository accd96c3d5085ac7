"""Signing command implementation."""

import typer

from ...domain.exceptions import SigningError
from ..output.display import display_error, display_signing
from ..state import CLIState


def signing(ctx: typer.Context) -> None:
    """Show which signing source a release build would use.

    Passwords are never printed.
    """
    state: CLIState = ctx.obj
    try:
        config = state.create_signing_resolver().resolve_signing_config()
    except SigningError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_signing(config)
