"""Elm source serializer for the module IR.

Output follows elm-format layout: two blank lines between top-level
declarations, leading-comma lists and records, and a blank line between
case branches. Rendering is a pure function of the IR.
"""

from .ir import (
    Access,
    Branch,
    Call,
    Case,
    Declaration,
    Expr,
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
    Wildcard,
)

# Separator between top-level sections and declarations
SEPARATOR = "\n\n\n"

INDENT = 4

# Binding used when casing over a type with no constructors
_IMPOSSIBLE = "impossible"

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class RenderError(TypeError):
    """Raised for IR nodes the serializer does not know."""


def render_module(module: Module) -> str:
    """Render a whole module to Elm source text, ending with a newline."""
    parts = [_render_header(module)]
    for section in module.sections:
        parts.extend(render_declaration(decl) for decl in section)
    return SEPARATOR.join(parts) + "\n"


def _render_header(module: Module) -> str:
    lines = [f"module {module.name} exposing (..)", ""]
    lines.extend(_render_import(imp) for imp in module.imports)
    return "\n".join(lines)


def _render_import(imp: Import) -> str:
    if imp.exposing:
        return f"import {imp.module} exposing ({', '.join(imp.exposing)})"
    return f"import {imp.module}"


def render_declaration(decl: Declaration) -> str:
    if isinstance(decl, SumType):
        return _render_sum_type(decl)
    if isinstance(decl, RecordAlias):
        return _render_record_alias(decl)
    if isinstance(decl, TypeAlias):
        return f"type alias {decl.name} =\n{_pad(INDENT)}{decl.target}"
    if isinstance(decl, Function):
        return _render_function(decl)
    raise RenderError(f"Unknown declaration: {decl!r}")


def _render_sum_type(decl: SumType) -> str:
    pad = _pad(INDENT)
    if not decl.variants:
        # Uninhabited: the only constructor needs a value of type Never
        return f"type {decl.name}\n{pad}= {decl.name} Never"
    lines = [f"type {decl.name}"]
    for i, variant in enumerate(decl.variants):
        lead = "=" if i == 0 else "|"
        args = "".join(" " + _type_arg(arg) for arg in variant.args)
        lines.append(f"{pad}{lead} {variant.name}{args}")
    return "\n".join(lines)


def _type_arg(type_text: str) -> str:
    if " " in type_text and not type_text.startswith(("(", "{")):
        return f"({type_text})"
    return type_text


def _render_record_alias(decl: RecordAlias) -> str:
    head = " ".join((decl.name,) + decl.params)
    pad = _pad(INDENT)
    if not decl.fields:
        return f"type alias {head} =\n{pad}{{}}"
    lines = [f"type alias {head} ="]
    for i, (name, type_text) in enumerate(decl.fields):
        lead = "{" if i == 0 else ","
        lines.append(f"{pad}{lead} {name} : {type_text}")
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def _render_function(decl: Function) -> str:
    head = " ".join((decl.name,) + decl.params)
    lines = [f"{decl.name} : {decl.signature}", f"{head} ="]
    lines.extend(_block(decl.body, INDENT))
    return "\n".join(lines)


def _pad(indent: int) -> str:
    return " " * indent


def _multiline(expr: Expr) -> bool:
    if isinstance(expr, Case):
        return True
    if isinstance(expr, ListExpr):
        return len(expr.items) > 1
    if isinstance(expr, RecordExpr):
        return len(expr.fields) > 1
    if isinstance(expr, Call):
        return bool(expr.args) and _multiline(expr.args[-1])
    return False


def _block(expr: Expr, indent: int) -> list[str]:
    """Render an expression as indented lines."""
    pad = _pad(indent)
    if not _multiline(expr):
        return [pad + _inline(expr)]

    if isinstance(expr, Case):
        return _case_block(expr, indent)

    if isinstance(expr, ListExpr):
        lines = [f"{pad}{'[' if i == 0 else ','} {_inline(item)}" for i, item in enumerate(expr.items)]
        return lines + [pad + "]"]

    if isinstance(expr, RecordExpr):
        lines = [
            f"{pad}{'{' if i == 0 else ','} {name} = {_inline(value)}"
            for i, (name, value) in enumerate(expr.fields)
        ]
        return lines + [pad + "}"]

    if isinstance(expr, Call):
        head = " ".join([expr.func] + [_arg(arg) for arg in expr.args[:-1]])
        return [pad + head] + _block(expr.args[-1], indent + INDENT)

    raise RenderError(f"Cannot render as block: {expr!r}")


def _case_block(expr: Case, indent: int) -> list[str]:
    branches = expr.branches
    if not branches:
        if expr.subject_type is None:
            raise RenderError("Empty case needs a subject type")
        impossible = Var(_IMPOSSIBLE)
        branches = (
            Branch(Call(expr.subject_type, (impossible,)), Call("never", (impossible,))),
        )

    lines = [f"{_pad(indent)}case {_inline(expr.subject)} of"]
    for i, branch in enumerate(branches):
        if i:
            lines.append("")
        lines.append(f"{_pad(indent + INDENT)}{_inline(branch.pattern)} ->")
        lines.extend(_block(branch.body, indent + 2 * INDENT))
    return lines


def _inline(expr: Expr) -> str:
    """Render an expression on a single line."""
    if isinstance(expr, Var):
        return expr.name
    if isinstance(expr, Access):
        return f"{expr.record}.{expr.field}"
    if isinstance(expr, Str):
        return _string_literal(expr.value)
    if isinstance(expr, Wildcard):
        return "_"
    if isinstance(expr, Call):
        return " ".join([expr.func] + [_arg(arg) for arg in expr.args])
    if isinstance(expr, ListExpr):
        return f"[ {', '.join(_inline(i) for i in expr.items)} ]" if expr.items else "[]"
    if isinstance(expr, TupleExpr):
        return f"( {', '.join(_inline(i) for i in expr.items)} )"
    if isinstance(expr, RecordExpr):
        if not expr.fields:
            return "{}"
        return "{ " + ", ".join(f"{n} = {_inline(v)}" for n, v in expr.fields) + " }"
    if isinstance(expr, RecordUpdate):
        updates = ", ".join(f"{n} = {_inline(v)}" for n, v in expr.fields)
        return f"{{ {expr.record} | {updates} }}"
    raise RenderError(f"Cannot render inline: {expr!r}")


def _arg(expr: Expr) -> str:
    """Render a function argument, parenthesized when it is an application."""
    text = _inline(expr)
    if isinstance(expr, Call) and expr.args:
        return f"({text})"
    return text


def _string_literal(value: str) -> str:
    escaped = "".join(_STRING_ESCAPES.get(char, char) for char in value)
    return f'"{escaped}"'
