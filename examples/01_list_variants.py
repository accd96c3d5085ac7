#!/usr/bin/env python3
"""
01_list_variants.py - Print the full flavor x build type matrix

Demonstrates: VariantResolver.list_variants without any signing inputs
"""
from flavorkit import VariantResolver


def main() -> None:
    resolver = VariantResolver(base_application_id="com.example.mini_coding_challenges")

    for variant in resolver.list_variants():
        print(f"{variant.name:<18} {variant.application_id}")
        print(f"  task:      {variant.gradle_task()}")
        print(f"  version:   {variant.version_name('1.0.0')}")
        print(f"  constants: {' '.join(variant.dart_defines())}")


if __name__ == "__main__":
    main()
