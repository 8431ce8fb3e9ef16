"""Field declarations and the synthetic deferred-initializer method."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..ast_nodes import ClassDeclaration, FieldMember
from ..errors import InvariantError
from ..writer import CodeWriter

if TYPE_CHECKING:
    from .converter import CsConverter


# Reserved name of the method that runs deferred field initializers.
FIELD_INITIALIZER = "__internalInitializeFields"


def storage_qualifier(fld: FieldMember) -> str:
    """Pick exactly one of 'const', 'static' or '' for a field.

    C# only allows compile-time constants of primitive types, so a constant
    of a reference type is promoted to a static field.
    """
    if fld.is_const:
        if fld.type is not None and fld.type.is_primitive:
            return "const"
        return "static"
    if fld.is_static:
        return "static"
    return ""


def emit_fields(conv: CsConverter, out: CodeWriter, decl: ClassDeclaration):
    for fld in decl.fields:
        parts = [str(fld.visibility)]
        qualifier = storage_qualifier(fld)
        if qualifier == "const" and not fld.has_initializer:
            raise InvariantError("const field needs an initializer", decl.name, fld.identifier)
        if qualifier:
            parts.append(qualifier)
        parts.append(conv.type(fld.type))
        parts.append(conv.helper.identifier(fld.identifier))
        line = " ".join(parts)
        if fld.has_initializer and conv.context.is_safe_initialized(decl, fld):
            line += f" = {fld.initializer}"
        out.writeln(line + ";")


def emit_fields_initializer(conv: CsConverter, out: CodeWriter,
                            deferred: Sequence[FieldMember]):
    """One assignment per deferred field, in declaration order."""
    out.writeln(f"private void {FIELD_INITIALIZER}()")
    out.block_open()
    for fld in deferred:
        out.writeln(f"{conv.helper.identifier(fld.identifier)} = {fld.initializer};")
    out.block_close()
