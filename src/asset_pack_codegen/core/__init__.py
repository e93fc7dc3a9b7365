"""Core manifest model and utilities.

This package contains the manifest types, the naming transform and
schema validation used by the generator and the CLI.
"""

from .naming import split_words, to_camel_case
from .types import Asset, AssetKind, AssetRecord, Manifest, ManifestDocument, make_asset
from .validator import (
    ManifestValidationError,
    validate_manifest,
    validate_manifest_with_error_details,
)

__all__ = [
    "Asset",
    "AssetKind",
    "AssetRecord",
    "Manifest",
    "ManifestDocument",
    "ManifestValidationError",
    "make_asset",
    "split_words",
    "to_camel_case",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
