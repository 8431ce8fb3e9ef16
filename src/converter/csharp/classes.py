"""Type-level emission: class header, inheritance clause, interface body."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..ast_nodes import ClassDeclaration, InterfaceDeclaration
from ..errors import InvariantError
from ..writer import CodeWriter
from .fields import FIELD_INITIALIZER, emit_fields, emit_fields_initializer
from .functions import emit_functions, function_name

if TYPE_CHECKING:
    from .converter import CsConverter


def inheritance_clause(conv: CsConverter, decl: ClassDeclaration) -> str:
    """' : Base, I1, I2' with the base type first, or '' when there is neither."""
    bases = []
    if decl.extends is not None:
        bases.append(conv.type(decl.extends))
    bases.extend(conv.type(iface) for iface in decl.implements)
    if not bases:
        return ""
    return " : " + ", ".join(bases)


def emit_interface(conv: CsConverter, out: CodeWriter, decl: InterfaceDeclaration):
    """Signatures only. Constructors declared on an interface are dropped."""
    _check_param_types(decl)
    out.writeln(f"public interface {conv.context.class_name(decl)}")
    out.block_open()
    for func in decl.functions:
        if func.is_constructor:
            continue
        ret = conv.type(func.return_type)
        out.writeln(f"{ret} {function_name(conv, func)}({conv.params_string(func.params)});")
    out.block_close()


def emit_class(conv: CsConverter, out: CodeWriter, decl: ClassDeclaration):
    """Emit a class: header, fields, deferred initializer, functions."""
    _check_class(decl)

    name = conv.context.class_name(decl)
    sealed = "sealed " if decl.is_final else ""
    out.writeln(f"public {sealed}class {name}{inheritance_clause(conv, decl)}")
    out.block_open()

    deferred = conv.context.deferred_fields(decl)
    if deferred and not decl.constructors:
        raise InvariantError(
            "fields with deferred initializers need a declared constructor "
            f"({', '.join(f.identifier for f in deferred)})", decl.name)

    emit_fields(conv, out, decl)
    if deferred:
        emit_fields_initializer(conv, out, deferred)
    emit_functions(conv, out, decl, needs_initializer=bool(deferred))

    out.block_close()


def _check_class(decl: ClassDeclaration):
    seen = set()
    for iface in decl.implements:
        if iface in seen:
            raise InvariantError(f"interface {iface.qualified_name} implemented twice", decl.name)
        seen.add(iface)

    for fld in decl.fields:
        if fld.type is None:
            raise InvariantError("field has no type", decl.name, fld.identifier)
    _check_param_types(decl)

    member_names = [f.identifier for f in decl.fields] + [f.name for f in decl.functions]
    if FIELD_INITIALIZER in member_names:
        raise InvariantError(f"'{FIELD_INITIALIZER}' is reserved", decl.name, FIELD_INITIALIZER)


def _check_param_types(decl):
    for func in decl.functions:
        for param in func.params:
            if param.type is None:
                raise InvariantError(f"parameter '{param.identifier}' has no type",
                                     decl.name, func.name)
