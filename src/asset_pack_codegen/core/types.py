"""Type definitions for asset pack manifests.

This module defines the in-memory manifest model consumed by the generator,
and TypedDict classes that mirror the JSON schema structure defined in
schemas/manifest.schema.json.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TypedDict


class AssetKind(str, Enum):
    """Closed set of asset categories the generated module can load."""

    TEXTURE = "texture"
    SOUND = "sound"

    @property
    def subdir(self) -> str:
        """Directory under the asset root holding files of this kind."""
        return KIND_SUBDIRS[self]

    @property
    def extension(self) -> str:
        """File extension appended to every path of this kind."""
        return KIND_EXTENSIONS[self]


# Root that every generated load path is relative to
ASSET_ROOT = "./assets"

KIND_SUBDIRS = {
    AssetKind.TEXTURE: "img",
    AssetKind.SOUND: "sound",
}

KIND_EXTENSIONS = {
    AssetKind.TEXTURE: "png",
    AssetKind.SOUND: "mp3",
}


@dataclass(frozen=True)
class Asset:
    """A single texture or sound the game loads at startup.

    Attributes:
        kind: Category of the asset
        name: PascalCase identifier seed, e.g. "ZombieDie"
        path: Storage path relative to the kind's directory, without extension
    """

    kind: AssetKind
    name: str
    path: str

    @property
    def load_path(self) -> str:
        """Path the consuming runtime loads this asset from.

        Example:
            texture "monster/zombie_1" -> "./assets/img/monster/zombie_1.png"
        """
        return f"{ASSET_ROOT}/{self.kind.subdir}/{self.path}.{self.kind.extension}"


def make_asset(path: str, name: str, kind: AssetKind) -> Asset:
    """Shorthand used by literal manifests."""
    return Asset(kind=kind, name=name, path=path)


class Manifest:
    """Ordered, immutable collection of assets driving code generation.

    Order is preserved exactly as given; it decides the order of emitted
    variants, fields and case branches.
    """

    __slots__ = ("_assets",)

    def __init__(self, assets: Iterable[Asset] = ()):
        self._assets: tuple[Asset, ...] = tuple(assets)

    @property
    def assets(self) -> tuple[Asset, ...]:
        return self._assets

    def of_kind(self, kind: AssetKind) -> tuple[Asset, ...]:
        """Assets of one kind, in manifest order."""
        return tuple(asset for asset in self._assets if asset.kind is kind)

    def count(self, kind: AssetKind) -> int:
        return len(self.of_kind(kind))

    def to_document(self) -> "ManifestDocument":
        """Serialize to the JSON shape checked by the schema validator."""
        return ManifestDocument(
            assets=[
                AssetRecord(kind=asset.kind.value, name=asset.name, path=asset.path)
                for asset in self._assets
            ]
        )

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Manifest):
            return NotImplemented
        return self._assets == other._assets

    def __hash__(self) -> int:
        return hash(self._assets)

    def __repr__(self) -> str:
        return f"Manifest({list(self._assets)!r})"


class AssetRecord(TypedDict):
    """Individual asset entry within a manifest document."""

    kind: str  # "texture" or "sound"
    name: str  # PascalCase identifier seed
    path: str  # Relative storage path without extension


class ManifestDocument(TypedDict):
    """Complete manifest in its JSON-compatible form."""

    assets: list[AssetRecord]
