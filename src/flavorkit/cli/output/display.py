"""Display functions for CLI output.

Results go to stdout; errors and warnings are styled and go to stderr so
that JSON output can be piped to other tools.
"""

import json
import typing as t

import typer

from ...domain.build_types import ArtifactType
from ...domain.exceptions import FlavorkitError
from ...domain.signing import SigningConfig
from ...domain.variants import BuildVariant


def variant_document(
    variant: BuildVariant, artifact: ArtifactType = ArtifactType.APK
) -> dict[str, t.Any]:
    """JSON-ready descriptor for the build orchestrator. Secrets are masked."""
    document = variant.model_dump(mode="json")
    document["name"] = variant.name
    document["gradle_task"] = variant.gradle_task(artifact)
    document["install_task"] = variant.install_task()
    document["flutter_command"] = " ".join(
        ["flutter", *variant.flutter_args("build", artifact)]
    )
    if variant.signing is not None:
        document["signing"]["usable"] = variant.signing.is_usable
    return document


def display_variant_json(variant: BuildVariant, artifact: ArtifactType) -> None:
    typer.echo(json.dumps(variant_document(variant, artifact), indent=2))


def display_variant_text(variant: BuildVariant, artifact: ArtifactType) -> None:
    """Display a human-readable summary of a resolved variant."""
    typer.secho(f"Variant: {variant.name}", bold=True)
    typer.echo(f"  Application id: {variant.application_id}")
    typer.echo(f"  Display name:   {variant.display_name}")
    typer.echo(f"  Gradle task:    {variant.gradle_task(artifact)}")
    typer.echo(f"  Install task:   {variant.install_task()}")
    for key, value in variant.constants.items():
        typer.echo(f"  {key}: {value}")
    if variant.signing is None:
        typer.echo("  Signing: debug identity")
    else:
        display_signing(variant.signing, indent="  ")


def display_dart_defines(variant: BuildVariant) -> None:
    typer.echo(" ".join(variant.dart_defines()))


def display_variant_row(variant: BuildVariant) -> None:
    typer.echo(
        f"{variant.name:<18} {variant.application_id:<45} "
        f"{variant.gradle_task():<26} {variant.install_task():<26} "
        f"{variant.display_name}"
    )


def display_signing(signing: SigningConfig, indent: str = "") -> None:
    """Display a signing config without revealing passwords.

    Args:
        signing: Resolved signing config
        indent: Prefix for every line
    """
    typer.echo(f"{indent}Signing source: {signing.source}")
    typer.echo(f"{indent}  Store file:     {signing.store_file or '(unset)'}")
    typer.echo(f"{indent}  Key alias:      {signing.key_alias or '(unset)'}")
    typer.echo(
        f"{indent}  Store password: {'set' if signing.store_password else '(unset)'}"
    )
    typer.echo(
        f"{indent}  Key password:   {'set' if signing.key_password else '(unset)'}"
    )
    if signing.is_usable:
        typer.secho(f"{indent}  ✓ Usable", fg=typer.colors.GREEN)
    else:
        typer.secho(
            f"{indent}  ✗ Not usable, missing: {', '.join(signing.missing_fields)}",
            fg=typer.colors.YELLOW,
        )


def display_error(error: FlavorkitError) -> None:
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
