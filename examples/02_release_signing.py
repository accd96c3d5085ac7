#!/usr/bin/env python3
"""
02_release_signing.py - Resolve a signed release build

Demonstrates: CI-injected properties taking precedence over local files,
and the failure modes for partial or missing credentials.
"""
import tempfile
from pathlib import Path

from flavorkit import FlavorkitError, collect_injected_properties, create_app
from flavorkit.config.settings import Settings

CI_PROPERTIES = {
    "android.injected.signing.store.file": "/ci/release.jks",
    "android.injected.signing.store.password": "s",
    "android.injected.signing.key.alias": "release",
    "android.injected.signing.key.password": "k",
}


def resolve(settings: Settings, overrides: dict[str, str]) -> None:
    app = create_app(settings, injected=collect_injected_properties(overrides))
    try:
        variant = app.create_variant_resolver().resolve_build("production", "release")
    except FlavorkitError as e:
        print(f"  ✗ {e}")
        return

    assert variant.signing is not None
    print(
        f"  ✓ {variant.name}: {variant.signing.source}, "
        f"usable={variant.signing.is_usable}"
    )


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        android_dir = Path(tmp) / "android"
        (android_dir / "app").mkdir(parents=True)
        settings = Settings(android_dir=android_dir)

        print("No credentials anywhere:")
        resolve(settings, {})

        print("Default keystore only:")
        (android_dir / "app" / "keystore.jks").write_bytes(b"")
        resolve(settings, {})

        print("Local key.properties:")
        (android_dir / "key.properties").write_text(
            "storeFile=/keys/upload.jks\n"
            "storePassword=s\n"
            "keyAlias=upload\n"
            "keyPassword=k\n"
        )
        resolve(settings, {})

        print("Partial CI properties:")
        resolve(settings, {"android.injected.signing.store.file": "/ci/release.jks"})

        print("Complete CI properties:")
        resolve(settings, CI_PROPERTIES)


if __name__ == "__main__":
    main()
