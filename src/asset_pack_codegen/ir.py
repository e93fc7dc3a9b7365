"""Structured description of the generated Elm module.

The generator maps a manifest to these declarations; the renderer turns
them into text. Keeping the two apart means properties such as "one case
branch per asset" can be checked on the declarations themselves.

Patterns reuse the expression classes: a lowercase ``Var`` binds, an
uppercase ``Var`` or a ``Call`` matches a constructor, ``ListExpr`` and
``TupleExpr`` destructure, and ``Wildcard`` matches anything.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class Access:
    """Record field access, ``record.field``."""

    record: str
    field: str


@dataclass(frozen=True)
class Str:
    value: str


@dataclass(frozen=True)
class Call:
    """Function or constructor application, ``func arg1 arg2``."""

    func: str
    args: tuple["Expr", ...]


@dataclass(frozen=True)
class ListExpr:
    items: tuple["Expr", ...]


@dataclass(frozen=True)
class TupleExpr:
    items: tuple["Expr", ...]


@dataclass(frozen=True)
class RecordExpr:
    fields: tuple[tuple[str, "Expr"], ...]


@dataclass(frozen=True)
class RecordUpdate:
    """``{ record | field = value }``."""

    record: str
    fields: tuple[tuple[str, "Expr"], ...]


@dataclass(frozen=True)
class Wildcard:
    pass


@dataclass(frozen=True)
class Branch:
    pattern: "Expr"
    body: "Expr"


@dataclass(frozen=True)
class Case:
    """``case subject of`` with one branch per pattern.

    ``subject_type`` names the scrutinee's type so that a case over an
    uninhabited key type (zero branches) can still be rendered.
    """

    subject: "Expr"
    branches: tuple[Branch, ...]
    subject_type: str | None = None


Expr = Union[
    Var, Access, Str, Call, ListExpr, TupleExpr, RecordExpr, RecordUpdate, Wildcard, Case
]


@dataclass(frozen=True)
class Variant:
    name: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class SumType:
    """``type Name = A | B``; zero variants renders as an uninhabited type."""

    name: str
    variants: tuple[Variant, ...]


@dataclass(frozen=True)
class RecordAlias:
    """``type alias Name params = { field : type, ... }``."""

    name: str
    params: tuple[str, ...]
    fields: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class TypeAlias:
    name: str
    target: str


@dataclass(frozen=True)
class Function:
    """Top-level value or function with its type annotation."""

    name: str
    signature: str
    params: tuple[str, ...]
    body: Expr


Declaration = Union[SumType, RecordAlias, TypeAlias, Function]


@dataclass(frozen=True)
class Import:
    module: str
    exposing: tuple[str, ...] = ()


@dataclass(frozen=True)
class Module:
    """A whole Elm module: header, imports and ordered declaration sections."""

    name: str
    imports: tuple[Import, ...]
    sections: tuple[tuple[Declaration, ...], ...] = field(default_factory=tuple)

    def declarations(self) -> list[Declaration]:
        return [decl for section in self.sections for decl in section]

    def find(self, name: str) -> Declaration:
        """Look up a top-level declaration by name.

        Raises:
            KeyError: If no declaration has that name
        """
        for decl in self.declarations():
            if decl.name == name:
                return decl
        raise KeyError(f"No declaration named: {name}")
