"""Manifest validation run before code generation.

This module loads the formal JSON Schema and checks a manifest against it,
then applies the naming rules the schema cannot express: names must be
unique across the whole manifest and must not collide with the
declarations or keywords of the generated Elm module.
"""

import json
from collections import Counter
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from .naming import to_camel_case
from .types import Manifest

# Path to the schema file shipped inside the package
SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "manifest.schema.json"

# Words Elm reserves; a field name derived from an asset name must avoid them
ELM_KEYWORDS = frozenset(
    {
        "if", "then", "else", "case", "of", "let", "in", "type", "module",
        "where", "import", "exposing", "as", "port", "infix", "alias", "effect",
    }
)

# Names already taken inside the generated module or its implicit imports
RESERVED_NAMES = frozenset(
    {
        "TextureKey", "SoundKey", "LoadTexture", "LoadAudio",
        "AssetPackContainer", "AssetPack", "AssetPackBuilder", "Texture", "Audio", "Maybe",
        "Just", "Nothing", "True", "False", "Ok", "Err", "Never",
    }
)


class ManifestValidationError(ValueError):
    """Raised when a manifest would produce an invalid Elm module.

    Attributes:
        problems: One human-readable message per offending entry
    """

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("\n".join(problems))


def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def schema_problems(manifest: Manifest) -> list[str]:
    """Check the manifest's document form against the JSON Schema."""
    validator = Draft202012Validator(load_schema())
    problems = []
    for error in sorted(validator.iter_errors(manifest.to_document()), key=lambda e: list(e.path)):
        error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
        problems.append(f"Validation error at {error_path}: {error.message}")
    return problems


def naming_problems(manifest: Manifest) -> list[str]:
    """Find names that would collide in the generated module."""
    problems = []

    name_counts = Counter(asset.name for asset in manifest)
    for name, count in name_counts.items():
        if count > 1:
            problems.append(f"Duplicate asset name: {name} (used {count} times)")

    fields: dict[str, str] = {}
    for asset in manifest:
        if name_counts[asset.name] > 1:
            continue
        field = to_camel_case(asset.name)
        if field in ELM_KEYWORDS:
            problems.append(f"Asset name {asset.name} becomes the Elm keyword '{field}'")
        elif field in fields:
            problems.append(
                f"Asset names {fields[field]} and {asset.name} both become field '{field}'"
            )
        else:
            fields[field] = asset.name

        if asset.name in RESERVED_NAMES:
            problems.append(f"Asset name {asset.name} is reserved by the generated module")

    return problems


def validate_manifest(manifest: Manifest) -> None:
    """Validate a manifest before generation.

    Args:
        manifest: The manifest to validate

    Raises:
        ManifestValidationError: If the manifest would generate invalid code
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    problems = schema_problems(manifest) + naming_problems(manifest)
    if problems:
        raise ManifestValidationError(problems)


def validate_manifest_with_error_details(manifest: Manifest) -> tuple[bool, str | None]:
    """Validate a manifest and return detailed error information.

    This is a convenience wrapper that catches validation errors and
    returns user-friendly error messages.

    Args:
        manifest: The manifest to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(manifest)
        return True, None
    except ManifestValidationError as e:
        return False, str(e)
    except (FileNotFoundError, json.JSONDecodeError, SchemaError) as e:
        return False, f"Schema error: {e}"
