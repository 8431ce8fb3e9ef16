"""Function-type aliases, method modifiers and signatures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..ast_nodes import ClassDeclaration, FunctionMember, TypeDeclaration
from ..errors import InvariantError
from ..writer import CodeWriter
from .constructors import constructor_body, constructor_initializer

if TYPE_CHECKING:
    from .converter import CsConverter


def emit_function_types(conv: CsConverter, out: CodeWriter, decl: TypeDeclaration):
    for alias in decl.function_types:
        ret = conv.type(alias.return_type) if alias.has_return_type else "void"
        name = conv.helper.identifier(alias.name)
        out.writeln(f"public delegate {ret} {name}({conv.params_string(alias.params)});")


def function_name(conv: CsConverter, func: FunctionMember) -> str:
    name = conv.helper.identifier(func.name)
    if func.is_getter:
        return conv.helper.getter(name)
    if func.is_setter:
        return conv.helper.setter(name)
    return name


def function_modifier(func: FunctionMember, decl: ClassDeclaration) -> str:
    """Methods are virtual unless private, static, overriding or in a sealed class."""
    if func.is_constructor:
        return ""
    if func.is_static:
        return "static"
    if func.is_override:
        return "override"
    if not func.is_private and not decl.is_final:
        return "virtual"
    return ""


def emit_functions(conv: CsConverter, out: CodeWriter, decl: ClassDeclaration,
                   needs_initializer: bool):
    for func in decl.functions:
        if func.is_constructor:
            _emit_constructor(conv, out, decl, func, needs_initializer)
        else:
            _emit_method(conv, out, decl, func)


def _emit_method(conv: CsConverter, out: CodeWriter, decl: ClassDeclaration,
                 func: FunctionMember):
    parts = [str(func.visibility)]
    modifier = function_modifier(func, decl)
    if modifier:
        parts.append(modifier)
    parts.append(conv.type(func.return_type) if func.has_return_type else "void")
    parts.append(function_name(conv, func))
    out.writeln(f"{' '.join(parts)}({conv.params_string(func.params)})")
    out.block_open()
    out.write_lines(func.body)
    out.block_close()


def _emit_constructor(conv: CsConverter, out: CodeWriter, decl: ClassDeclaration,
                      func: FunctionMember, needs_initializer: bool):
    if func.has_return_type:
        raise InvariantError("constructor declares a return type", decl.name, func.name)
    if func.is_getter or func.is_setter:
        raise InvariantError("constructor flagged as accessor", decl.name, func.name)

    name = conv.context.class_name(decl)
    header = f"{func.visibility} {name}({conv.params_string(func.params)})"
    out.writeln(header + constructor_initializer(func.delegates_to))
    out.block_open()
    out.write_lines(constructor_body(func, needs_initializer))
    out.block_close()
