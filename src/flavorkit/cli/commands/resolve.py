"""Resolve command implementation."""

import enum

import typer

from ...domain.build_types import ArtifactType, BuildTypeName
from ...domain.exceptions import FlavorkitError
from ...domain.variants import BuildVariant
from ...variants.resolver import VariantResolver
from ..output.display import (
    display_dart_defines,
    display_error,
    display_variant_json,
    display_variant_text,
)
from ..state import CLIState


class OutputFormat(enum.StrEnum):
    JSON = "json"
    TEXT = "text"
    DART_DEFINE = "dart-define"


def resolve_variant_for_build(
    resolver: VariantResolver,
    flavor: str,
    build_type: BuildTypeName,
    strict: bool,
) -> BuildVariant:
    """Core resolve logic with the resolver injected.

    Raises:
        FlavorkitError: Unknown variant, or signing failure for a signed build
    """
    variant = resolver.resolve_build(flavor, build_type)
    if strict and variant.signing is not None:
        variant.signing.require_usable()
    return variant


def resolve(
    ctx: typer.Context,
    flavor: str = typer.Option(
        ..., "--flavor", "-f", help="Environment: dev, staging or production"
    ),
    release: bool = typer.Option(
        True, "--release/--debug", help="Build type (default: release)"
    ),
    artifact: ArtifactType = typer.Option(
        ArtifactType.APK, "--artifact", "-a", help="Artifact the build produces"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON, "--format", help="Output format"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail when release signing is incomplete"
    ),
) -> None:
    """Resolve a build variant and its signing config.

    Examples:
        flavorkit resolve --flavor dev --debug
        flavorkit resolve --flavor production --release --artifact appbundle
        flavorkit resolve --flavor staging --format dart-define
    """
    state: CLIState = ctx.obj
    build_type = BuildTypeName.RELEASE if release else BuildTypeName.DEBUG

    try:
        variant = resolve_variant_for_build(
            state.create_variant_resolver(), flavor, build_type, strict
        )
    except FlavorkitError as e:
        display_error(e)
        raise typer.Exit(code=1)

    if output_format == OutputFormat.TEXT:
        display_variant_text(variant, artifact)
    elif output_format == OutputFormat.DART_DEFINE:
        display_dart_defines(variant)
    else:
        display_variant_json(variant, artifact)
