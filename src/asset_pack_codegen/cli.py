"""Command-line interface for the asset pack generator.

This module provides the CLI entry point that prints the generated
Elm module for the game's asset manifest to stdout.
"""

import argparse
import sys

from .core.types import AssetKind, Manifest
from .core.validator import validate_manifest_with_error_details
from .generator import build_module
from .manifests import DEFAULT_MANIFEST
from .renderer import render_module


def list_assets(manifest: Manifest) -> str:
    """Format the manifest as a kind / name / load path table."""
    if not len(manifest):
        return ""
    name_width = max(len(asset.name) for asset in manifest)
    return "\n".join(
        f"{asset.kind.value:<7} {asset.name:<{name_width}} {asset.load_path}" for asset in manifest
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the generator."""
    parser = argparse.ArgumentParser(
        description="Generate the Gen.AssetPack Elm module for the game's assets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Regenerate the module
  asset-pack-codegen > src/Gen/AssetPack.elm

  # Show which files the module will load
  asset-pack-codegen --list-assets
        """,
    )

    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Generate even if asset names would collide in the generated module",
    )

    parser.add_argument(
        "--list-assets",
        action="store_true",
        help="Print kind, name and load path of every asset instead of generating code",
    )

    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only report errors on stderr"
    )

    args = parser.parse_args(argv)

    def info(message: str) -> None:
        if not args.quiet:
            print(message, file=sys.stderr)

    manifest = DEFAULT_MANIFEST

    if args.list_assets:
        print(list_assets(manifest))
        return

    if not args.skip_validation:
        info("Validating manifest...")
        is_valid, error_msg = validate_manifest_with_error_details(manifest)

        if not is_valid:
            print("Error: Manifest validation failed:", file=sys.stderr)
            print(error_msg, file=sys.stderr)
            sys.exit(1)

    try:
        module = build_module(manifest)
        output = render_module(module)
    except Exception as e:
        print(f"Error: Failed to generate module: {e}", file=sys.stderr)
        sys.exit(1)

    summary = ", ".join(f"{manifest.count(kind)} {kind.value}s" for kind in AssetKind)
    info(f"Generated {len(module.declarations())} declarations for {summary}")

    sys.stdout.write(output)


if __name__ == "__main__":
    main()
