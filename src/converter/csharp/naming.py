"""C# spelling of types, identifiers and namespaces."""

from __future__ import annotations

from ..ast_nodes import TypeKind, TypeRef
from ..naming import CodeHelper


# ActionScript built-in type name -> C# type name
_BUILTIN_TYPES = {
    "int": "int",
    "uint": "uint",
    "Number": "float",
    "Boolean": "bool",
    "void": "void",
    "*": "Object",
    "Object": "Object",
}

_KEYWORDS = frozenset({
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char",
    "checked", "class", "const", "continue", "decimal", "default", "delegate",
    "do", "double", "else", "enum", "event", "explicit", "extern", "false",
    "finally", "fixed", "float", "for", "foreach", "goto", "if", "implicit",
    "in", "int", "interface", "internal", "is", "lock", "long", "namespace",
    "new", "null", "object", "operator", "out", "override", "params",
    "private", "protected", "public", "readonly", "ref", "return", "sbyte",
    "sealed", "short", "sizeof", "stackalloc", "static", "string", "struct",
    "switch", "this", "throw", "true", "try", "typeof", "uint", "ulong",
    "unchecked", "unsafe", "ushort", "using", "virtual", "void", "volatile",
    "while",
})


class CsCodeHelper(CodeHelper):
    def type_ref(self, ref: TypeRef | None) -> str:
        if ref is None or ref.kind == TypeKind.VOID:
            return "void"
        name = _BUILTIN_TYPES.get(ref.name) if not ref.package else None
        if name is None:
            name = self.identifier(ref.name)
        if ref.args:
            args = ", ".join(self.type_ref(a) for a in ref.args)
            name = f"{name}<{args}>"
        return name

    def identifier(self, name: str) -> str:
        # Verbatim identifier: `@base` is a legal C# name for `base`.
        if name in _KEYWORDS:
            return "@" + name
        return name
