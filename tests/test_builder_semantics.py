"""Tests for the behavior of the generated builder functions.

The generated declarations are evaluated with the small IR model in
elm_model, so these tests check what the Elm code computes rather than
how it is spelled.
"""

import random

import pytest

from asset_pack_codegen import DEFAULT_MANIFEST
from asset_pack_codegen.core.naming import to_camel_case
from asset_pack_codegen.core.types import Asset, AssetKind, Manifest, make_asset
from asset_pack_codegen.generator import build_module
from elm_model import NOTHING, Ctor, call, evaluate, just


INSERT_FUNCTIONS = {
    AssetKind.TEXTURE: "insertTexture",
    AssetKind.SOUND: "insertSound",
}

GETTERS = {
    AssetKind.TEXTURE: "getTexture",
    AssetKind.SOUND: "getSound",
}


class GeneratedPack:
    """Python handle on the generated module's functions."""

    def __init__(self, manifest: Manifest):
        self.module = build_module(manifest)

    def initial(self) -> dict:
        return evaluate(self.module.find("initialAssetPackBuilder").body, {})

    def insert(self, builder: dict, asset: Asset, value: object) -> dict:
        function = self.module.find(INSERT_FUNCTIONS[asset.kind])
        return call(function, Ctor(asset.name), value, builder)

    def try_build(self, builder: dict) -> Ctor:
        return call(self.module.find("tryBuildAssetPack"), builder)

    def get(self, pack: dict, asset: Asset) -> object:
        function = self.module.find(GETTERS[asset.kind])
        if asset.kind is AssetKind.TEXTURE:
            return call(function, pack, Ctor(asset.name))
        return call(function, Ctor(asset.name), pack)


def _value(asset: Asset) -> str:
    return f"loaded:{asset.path}"


def _fill(generated: GeneratedPack, assets: list[Asset]) -> dict:
    builder = generated.initial()
    for asset in assets:
        builder = generated.insert(builder, asset, _value(asset))
    return builder


class TestInitialBuilder:
    """Test the empty builder."""

    def test_every_slot_absent(self) -> None:
        """Test that every field starts as Nothing."""
        builder = GeneratedPack(DEFAULT_MANIFEST).initial()
        assert len(builder) == len(DEFAULT_MANIFEST)
        assert all(slot == NOTHING for slot in builder.values())

    def test_initial_builder_is_incomplete(self) -> None:
        """Test that tryBuild on the initial builder gives Nothing."""
        generated = GeneratedPack(DEFAULT_MANIFEST)
        assert generated.try_build(generated.initial()) == NOTHING


class TestInsert:
    """Test the insertion functions."""

    def test_insert_sets_only_matching_slot(self) -> None:
        """Test that inserting one key fills exactly its field."""
        generated = GeneratedPack(DEFAULT_MANIFEST)
        for asset in DEFAULT_MANIFEST:
            builder = generated.insert(generated.initial(), asset, "value")
            field = to_camel_case(asset.name)
            assert builder[field] == just("value")
            assert all(slot == NOTHING for name, slot in builder.items() if name != field)

    def test_insert_does_not_modify_input(self) -> None:
        """Test that insertion returns a new builder."""
        generated = GeneratedPack(DEFAULT_MANIFEST)
        initial = generated.initial()
        generated.insert(initial, DEFAULT_MANIFEST.assets[0], "value")
        assert all(slot == NOTHING for slot in initial.values())


class TestCompletion:
    """Test that tryBuild succeeds exactly when every slot is filled."""

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_all_inserted_in_any_order(self, seed: int) -> None:
        """Test that inserting every key in any order completes the pack."""
        generated = GeneratedPack(DEFAULT_MANIFEST)
        assets = list(DEFAULT_MANIFEST)
        random.Random(seed).shuffle(assets)

        result = generated.try_build(_fill(generated, assets))

        assert result.name == "Just"
        pack = result.args[0]
        for asset in DEFAULT_MANIFEST:
            assert pack[to_camel_case(asset.name)] == _value(asset)
            assert generated.get(pack, asset) == _value(asset)

    @pytest.mark.parametrize("missing", range(len(DEFAULT_MANIFEST)))
    def test_any_missing_asset_is_incomplete(self, missing: int) -> None:
        """Test that omitting a single insertion gives Nothing."""
        generated = GeneratedPack(DEFAULT_MANIFEST)
        assets = [a for i, a in enumerate(DEFAULT_MANIFEST) if i != missing]
        assert generated.try_build(_fill(generated, assets)) == NOTHING

    def test_two_asset_scenario(self) -> None:
        """Test that the pack completes only once both assets are inserted."""
        troll = make_asset("monster/zombie_1", "Troll", AssetKind.TEXTURE)
        zombie_die = make_asset("zombie_die", "ZombieDie", AssetKind.SOUND)
        generated = GeneratedPack(Manifest([troll, zombie_die]))

        builder = generated.insert(generated.initial(), troll, "troll.png")
        assert generated.try_build(builder) == NOTHING

        builder = generated.insert(builder, zombie_die, "die.mp3")
        assert generated.try_build(builder) == just({"troll": "troll.png", "zombieDie": "die.mp3"})

    def test_textures_only_completes_on_textures(self) -> None:
        """Test that a manifest without sounds completes from textures alone."""
        manifest = Manifest(
            [
                make_asset("map/map1", "Map1", AssetKind.TEXTURE),
                make_asset("map/map2", "Map2", AssetKind.TEXTURE),
            ]
        )
        generated = GeneratedPack(manifest)
        result = generated.try_build(_fill(generated, list(manifest)))
        assert result == just({"map1": "loaded:map/map1", "map2": "loaded:map/map2"})

    def test_reinserting_replaces_value(self) -> None:
        """Test that inserting a key twice keeps the latest value."""
        asset = make_asset("wakka", "MainMenuBgSound", AssetKind.SOUND)
        generated = GeneratedPack(Manifest([asset]))
        builder = generated.insert(generated.initial(), asset, "first")
        builder = generated.insert(builder, asset, "second")
        assert generated.try_build(builder) == just({"mainMenuBgSound": "second"})
