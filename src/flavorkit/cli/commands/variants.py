"""Variants command implementation."""

import typer

from ..output.display import display_variant_row
from ..state import CLIState


def variants(ctx: typer.Context) -> None:
    """List every flavor and build type combination."""
    state: CLIState = ctx.obj
    for variant in state.create_variant_resolver().list_variants():
        display_variant_row(variant)
