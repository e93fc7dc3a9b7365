"""Elm asset pack module generation.

This module maps a manifest to the declarations of the generated
``Gen.AssetPack`` module. Each section builder reads the manifest and
returns its declarations; nothing here mutates the manifest or performs
I/O, so the same manifest always yields the same module.

Example:
    >>> from asset_pack_codegen import generate, Manifest, make_asset, AssetKind
    >>> manifest = Manifest([make_asset("monster/zombie_1", "Troll", AssetKind.TEXTURE)])
    >>> print(generate(manifest))
"""

from dataclasses import dataclass

from .core.naming import to_camel_case
from .core.types import AssetKind, Manifest
from .ir import (
    Access,
    Branch,
    Call,
    Case,
    Declaration,
    Function,
    Import,
    ListExpr,
    Module,
    RecordAlias,
    RecordExpr,
    RecordUpdate,
    Str,
    SumType,
    TupleExpr,
    TypeAlias,
    Var,
    Variant,
    Wildcard,
)
from .renderer import render_module

MODULE_NAME = "Gen.AssetPack"

CONTAINER_TYPE = "AssetPackContainer"
PACK_TYPE = "AssetPack"
BUILDER_TYPE = "AssetPackBuilder"


@dataclass(frozen=True)
class KindTypes:
    """Elm names tied to one asset kind."""

    key_type: str  # Closed sum type of this kind's asset names
    runtime_type: str  # Value the consuming runtime loads for the kind
    type_var: str  # Container type variable standing for runtime_type


KIND_TYPES = {
    AssetKind.TEXTURE: KindTypes("TextureKey", "Texture", "textureType"),
    AssetKind.SOUND: KindTypes("SoundKey", "Audio.Source", "soundType"),
}


def imports() -> tuple[Import, ...]:
    """Static imports of the runtime capability types."""
    return (
        Import("Audio"),
        Import("Canvas.Texture", exposing=("Texture",)),
    )


def key_type_declarations(manifest: Manifest) -> tuple[Declaration, ...]:
    """One closed key type per kind, variants in manifest order."""
    return tuple(
        SumType(
            KIND_TYPES[kind].key_type,
            tuple(Variant(asset.name) for asset in manifest.of_kind(kind)),
        )
        for kind in AssetKind
    )


def _container_kinds(manifest: Manifest) -> list[AssetKind]:
    # Elm rejects alias type variables that no field uses
    return [kind for kind in AssetKind if manifest.count(kind)]


def container_types(manifest: Manifest) -> tuple[Declaration, ...]:
    """Generic container plus its complete and builder instantiations.

    Both instantiations share the container's field list, so a field
    present in one is present in the other.
    """
    kinds = _container_kinds(manifest)
    container = RecordAlias(
        CONTAINER_TYPE,
        tuple(KIND_TYPES[kind].type_var for kind in kinds),
        tuple((to_camel_case(asset.name), KIND_TYPES[asset.kind].type_var) for asset in manifest),
    )
    complete_args = [KIND_TYPES[kind].runtime_type for kind in kinds]
    builder_args = [f"(Maybe {KIND_TYPES[kind].runtime_type})" for kind in kinds]
    return (
        container,
        TypeAlias(PACK_TYPE, " ".join([CONTAINER_TYPE] + complete_args)),
        TypeAlias(BUILDER_TYPE, " ".join([CONTAINER_TYPE] + builder_args)),
    )


def initial_builder(manifest: Manifest) -> tuple[Declaration, ...]:
    """Builder with every slot absent."""
    return (
        Function(
            "initialAssetPackBuilder",
            BUILDER_TYPE,
            (),
            RecordExpr(tuple((to_camel_case(asset.name), Var("Nothing")) for asset in manifest)),
        ),
    )


def try_build(manifest: Manifest) -> tuple[Declaration, ...]:
    """Completion check: ``Just`` the complete pack once every slot is filled.

    Slots are grouped per kind into lists so the check stays a single
    pattern however many assets there are. Captured values are numbered
    in slot order and each field takes the value from its own slot.
    """
    slot_vars: dict[str, str] = {}
    subject_lists = []
    pattern_lists = []
    for kind in AssetKind:
        slots = []
        captures = []
        for asset in manifest.of_kind(kind):
            field = to_camel_case(asset.name)
            slot_vars[field] = f"t{len(slot_vars)}"
            slots.append(Access("builder", field))
            captures.append(Call("Just", (Var(slot_vars[field]),)))
        subject_lists.append(ListExpr(tuple(slots)))
        pattern_lists.append(ListExpr(tuple(captures)))

    complete = RecordExpr(
        tuple((field, Var(slot_vars[field])) for field in (to_camel_case(a.name) for a in manifest))
    )
    # List patterns are never exhaustive by type, even when every list is empty
    branches = (
        Branch(TupleExpr(tuple(pattern_lists)), Call("Just", (complete,))),
        Branch(Wildcard(), Var("Nothing")),
    )

    return (
        Function(
            "tryBuildAssetPack",
            f"{BUILDER_TYPE} -> Maybe {PACK_TYPE}",
            ("builder",),
            Case(TupleExpr(tuple(subject_lists)), branches),
        ),
    )


def _insert_function(manifest: Manifest, kind: AssetKind, name: str, value: str) -> Function:
    types = KIND_TYPES[kind]
    return Function(
        name,
        f"{types.key_type} -> {types.runtime_type} -> {BUILDER_TYPE} -> {BUILDER_TYPE}",
        ("key", value, "builder"),
        Case(
            Var("key"),
            tuple(
                Branch(
                    Var(asset.name),
                    RecordUpdate(
                        "builder",
                        ((to_camel_case(asset.name), Call("Just", (Var(value),))),),
                    ),
                )
                for asset in manifest.of_kind(kind)
            ),
            subject_type=types.key_type,
        ),
    )


def insert_functions(manifest: Manifest) -> tuple[Declaration, ...]:
    """``insertTexture`` and ``insertSound``, one branch per key."""
    return (
        _insert_function(manifest, AssetKind.TEXTURE, "insertTexture", "texture"),
        _insert_function(manifest, AssetKind.SOUND, "insertSound", "sound"),
    )


def load_lists(manifest: Manifest) -> tuple[Declaration, ...]:
    """Static (path, key) load requests for every asset.

    Textures pair path then key and sounds key then path, matching the
    argument order of the runtime's texture and audio loaders.
    """
    textures = KIND_TYPES[AssetKind.TEXTURE]
    sounds = KIND_TYPES[AssetKind.SOUND]
    return (
        SumType("LoadTexture", (Variant("LoadTexture", ("String", textures.key_type)),)),
        Function(
            "loadAllTextures",
            "List LoadTexture",
            (),
            ListExpr(
                tuple(
                    Call("LoadTexture", (Str(asset.load_path), Var(asset.name)))
                    for asset in manifest.of_kind(AssetKind.TEXTURE)
                )
            ),
        ),
        SumType("LoadAudio", (Variant("LoadAudio", (sounds.key_type, "String")),)),
        Function(
            "loadAllSounds",
            "List LoadAudio",
            (),
            ListExpr(
                tuple(
                    Call("LoadAudio", (Var(asset.name), Str(asset.load_path)))
                    for asset in manifest.of_kind(AssetKind.SOUND)
                )
            ),
        ),
    )


def _getter_cases(manifest: Manifest, kind: AssetKind, pack: str) -> Case:
    return Case(
        Var("key"),
        tuple(
            Branch(Var(asset.name), Access(pack, to_camel_case(asset.name)))
            for asset in manifest.of_kind(kind)
        ),
        subject_type=KIND_TYPES[kind].key_type,
    )


def getters(manifest: Manifest) -> tuple[Declaration, ...]:
    """``getTexture`` and ``getSound`` over the complete pack."""
    textures = KIND_TYPES[AssetKind.TEXTURE]
    sounds = KIND_TYPES[AssetKind.SOUND]
    return (
        Function(
            "getTexture",
            f"{PACK_TYPE} -> {textures.key_type} -> {textures.runtime_type}",
            ("pack", "key"),
            _getter_cases(manifest, AssetKind.TEXTURE, "pack"),
        ),
        Function(
            "getSound",
            f"{sounds.key_type} -> {PACK_TYPE} -> {sounds.runtime_type}",
            ("key", "pack"),
            _getter_cases(manifest, AssetKind.SOUND, "pack"),
        ),
    )


# Declaration sections in output order; the header precedes them
SECTIONS = (
    key_type_declarations,
    container_types,
    initial_builder,
    try_build,
    insert_functions,
    load_lists,
    getters,
)


def build_module(manifest: Manifest) -> Module:
    """Map a manifest to the full module description."""
    return Module(
        MODULE_NAME,
        imports(),
        tuple(section(manifest) for section in SECTIONS),
    )


def generate(manifest: Manifest) -> str:
    """Generate the Elm source text of the asset pack module.

    Args:
        manifest: Assets to generate declarations for

    Returns:
        Complete module text, ending with a newline
    """
    return render_module(build_module(manifest))
