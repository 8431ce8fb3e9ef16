"""Load resolved type declarations from a JSON document.

Format::

    {"types": [
      {"kind": "class", "name": "Foo", "package": "com.example",
       "metadata": ["ConvertOnce"], "final": false,
       "extends": "com.example.Base", "implements": ["IA", "IB"],
       "functionTypes": [{"name": "Callback", "returns": "void",
                          "params": [{"name": "code", "type": "int"}]}],
       "fields": [{"name": "count", "type": "int", "static": true,
                   "initializer": "computeDefault()"}],
       "functions": [{"name": "Foo", "constructor": true,
                      "delegates": {"kind": "super", "args": ["1"]},
                      "body": ["trace(count);"]}]}
    ]}

Type references are either dotted strings or objects with "name",
"package" and "args".
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .ast_nodes import (
    PRIMITIVE_TYPES, CallKind, ClassDeclaration, ConstructorCall, FieldMember,
    FunctionMember, FunctionTypeAlias, InterfaceDeclaration, Param,
    TypeDeclaration, TypeKind, TypeRef, Visibility,
)
from .errors import LoadError


class Loader:
    def __init__(self):
        # Names of the function-type aliases declared by the type being loaded.
        self._aliases: set[str] = set()

    def load_file(self, path: str) -> list[TypeDeclaration]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise LoadError(f"invalid JSON: {e.msg} (line {e.lineno})") from e
        return self.load(document)

    def load(self, document: Any) -> list[TypeDeclaration]:
        if not isinstance(document, dict) or not isinstance(document.get("types"), list):
            raise LoadError("expected an object with a 'types' list")
        return [self._type_decl(node, f"$.types[{i}]")
                for i, node in enumerate(document["types"])]

    # ---- Declarations ----

    def _type_decl(self, node: Any, path: str) -> TypeDeclaration:
        node = _expect_object(node, path)
        kind = node.get("kind", "class")
        name = _expect_str(node.get("name"), f"{path}.name")
        self._aliases = {_expect_str(a.get("name"), f"{path}.functionTypes")
                         for a in node.get("functionTypes", []) if isinstance(a, dict)}

        common = dict(
            name=name,
            package=_package(node.get("package", ""), f"{path}.package"),
            metadata=frozenset(_expect_str_list(node.get("metadata", []), f"{path}.metadata")),
            function_types=tuple(self._function_type(a, f"{path}.functionTypes[{i}]")
                                 for i, a in enumerate(node.get("functionTypes", []))),
            functions=tuple(self._function(f, f"{path}.functions[{i}]")
                            for i, f in enumerate(node.get("functions", []))),
        )
        if kind == "interface":
            return InterfaceDeclaration(**common)
        if kind != "class":
            raise LoadError(f"unknown declaration kind '{kind}'", f"{path}.kind")

        extends = node.get("extends")
        return ClassDeclaration(
            **common,
            fields=tuple(self._field(f, f"{path}.fields[{i}]")
                         for i, f in enumerate(node.get("fields", []))),
            is_final=bool(node.get("final", False)),
            extends=self._type(extends, f"{path}.extends") if extends else None,
            implements=tuple(self._type(t, f"{path}.implements[{i}]")
                             for i, t in enumerate(node.get("implements", []))),
        )

    def _field(self, node: Any, path: str) -> FieldMember:
        node = _expect_object(node, path)
        return FieldMember(
            identifier=_expect_str(node.get("name"), f"{path}.name"),
            type=self._type(node.get("type"), f"{path}.type"),
            visibility=_visibility(node.get("visibility", "public"), f"{path}.visibility"),
            is_const=bool(node.get("const", False)),
            is_static=bool(node.get("static", False)),
            initializer=_optional_str(node.get("initializer"), f"{path}.initializer"),
        )

    def _function(self, node: Any, path: str) -> FunctionMember:
        node = _expect_object(node, path)
        returns = node.get("returns")
        delegates = node.get("delegates")
        return FunctionMember(
            name=_expect_str(node.get("name"), f"{path}.name"),
            visibility=_visibility(node.get("visibility", "public"), f"{path}.visibility"),
            return_type=self._type(returns, f"{path}.returns") if returns else None,
            params=self._params(node.get("params", []), f"{path}.params"),
            body=tuple(_expect_str_list(node.get("body", []), f"{path}.body")),
            is_constructor=bool(node.get("constructor", False)),
            is_static=bool(node.get("static", False)),
            is_override=bool(node.get("override", False)),
            is_getter=bool(node.get("getter", False)),
            is_setter=bool(node.get("setter", False)),
            delegates_to=_delegation(delegates, f"{path}.delegates") if delegates else None,
        )

    def _function_type(self, node: Any, path: str) -> FunctionTypeAlias:
        node = _expect_object(node, path)
        returns = node.get("returns")
        return FunctionTypeAlias(
            name=_expect_str(node.get("name"), f"{path}.name"),
            return_type=self._type(returns, f"{path}.returns") if returns else None,
            params=self._params(node.get("params", []), f"{path}.params"),
        )

    def _params(self, nodes: Any, path: str) -> tuple[Param, ...]:
        params = []
        for i, node in enumerate(_expect_list(nodes, path)):
            node = _expect_object(node, f"{path}[{i}]")
            params.append(Param(
                identifier=_expect_str(node.get("name"), f"{path}[{i}].name"),
                type=self._type(node.get("type"), f"{path}[{i}].type"),
            ))
        return tuple(params)

    # ---- Types ----

    def _type(self, node: Any, path: str) -> TypeRef:
        if isinstance(node, str):
            *package, name = node.split(".")
            return self._make_type(name, tuple(package), ())
        if isinstance(node, dict):
            name = _expect_str(node.get("name"), f"{path}.name")
            args = tuple(self._type(a, f"{path}.args[{i}]")
                         for i, a in enumerate(node.get("args", [])))
            return self._make_type(name, _package(node.get("package", ""), f"{path}.package"), args)
        raise LoadError("expected a type name or type object", path)

    def _make_type(self, name: str, package: tuple[str, ...], args) -> TypeRef:
        if package:
            kind = TypeKind.CLASS
        elif name == "void":
            kind = TypeKind.VOID
        elif name in PRIMITIVE_TYPES:
            kind = TypeKind.PRIMITIVE
        elif name in self._aliases:
            kind = TypeKind.FUNCTION
        else:
            kind = TypeKind.CLASS
        return TypeRef(name=name, package=package, args=args, kind=kind)


def load_file(path: str) -> list[TypeDeclaration]:
    return Loader().load_file(path)


def _package(value: Any, path: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(s for s in value.split(".") if s)
    if isinstance(value, list) and all(isinstance(s, str) for s in value):
        return tuple(value)
    raise LoadError("expected a dotted package name or list of segments", path)


def _visibility(value: Any, path: str) -> Visibility:
    try:
        return Visibility(value)
    except ValueError:
        raise LoadError(f"unknown visibility '{value}'", path) from None


def _delegation(node: Any, path: str) -> ConstructorCall:
    node = _expect_object(node, path)
    try:
        kind = CallKind(node.get("kind"))
    except ValueError:
        raise LoadError(f"unknown delegation kind '{node.get('kind')}'", f"{path}.kind") from None
    args = _expect_list(node.get("args", []), f"{path}.args")
    return ConstructorCall(kind=kind, args=tuple(str(a) for a in args))


def _expect_object(node: Any, path: str) -> dict:
    if not isinstance(node, dict):
        raise LoadError("expected an object", path)
    return node


def _expect_list(node: Any, path: str) -> list:
    if not isinstance(node, list):
        raise LoadError("expected a list", path)
    return node


def _expect_str(node: Any, path: str) -> str:
    if not isinstance(node, str) or not node:
        raise LoadError("expected a non-empty string", path)
    return node


def _optional_str(node: Any, path: str) -> Optional[str]:
    if node is not None and not isinstance(node, str):
        raise LoadError("expected a string", path)
    return node


def _expect_str_list(node: Any, path: str) -> list[str]:
    for i, item in enumerate(_expect_list(node, path)):
        if not isinstance(item, str):
            raise LoadError("expected a string", f"{path}[{i}]")
    return node
