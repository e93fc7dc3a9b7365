"""Asset Pack Codegen.

This package generates the ``Gen.AssetPack`` Elm module for a game's
textures and sounds: closed key types, a builder that fills up as assets
load, and exhaustive accessors over the finished pack.
"""

# Core library interface
from .generator import build_module, generate
from .renderer import render_module

# Core utilities
from .core import Asset, AssetKind, Manifest, make_asset, to_camel_case
from .core import ManifestValidationError, validate_manifest, validate_manifest_with_error_details

# Game manifest and CLI
from .manifests import DEFAULT_MANIFEST
from .cli import main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "generate",
    "build_module",
    "render_module",
    # Core utilities
    "Asset",
    "AssetKind",
    "Manifest",
    "make_asset",
    "to_camel_case",
    "ManifestValidationError",
    "validate_manifest",
    "validate_manifest_with_error_details",
    # Game manifest and CLI
    "DEFAULT_MANIFEST",
    "main",
]
