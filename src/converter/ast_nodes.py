"""Resolved object-model AST consumed by the target emitters.

Nodes are built by the upstream resolver (or by loader.py from JSON) and
are never mutated by a converter.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


NO_CONVERSION = "NoConversion"
CONVERT_ONCE = "ConvertOnce"

PRIMITIVE_TYPES = frozenset({"int", "uint", "Number", "Boolean"})


class TypeKind(Enum):
    PRIMITIVE = "primitive"
    CLASS = "class"
    FUNCTION = "function"
    VOID = "void"


class Visibility(Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    INTERNAL = "internal"

    def __str__(self) -> str:
        return self.value


class CallKind(Enum):
    THIS = "this"
    SUPER = "super"


@dataclass(frozen=True)
class TypeRef:
    name: str = ""
    package: tuple[str, ...] = ()
    args: tuple[TypeRef, ...] = ()
    kind: TypeKind = TypeKind.CLASS

    @property
    def is_primitive(self) -> bool:
        return self.kind == TypeKind.PRIMITIVE

    @property
    def qualified_name(self) -> str:
        return ".".join(self.package + (self.name,))


@dataclass(frozen=True)
class Param:
    identifier: str = ""
    type: Optional[TypeRef] = None


@dataclass(frozen=True)
class FieldMember:
    identifier: str = ""
    type: Optional[TypeRef] = None
    visibility: Visibility = Visibility.PUBLIC
    is_const: bool = False
    is_static: bool = False
    initializer: Optional[str] = None

    @property
    def has_initializer(self) -> bool:
        return self.initializer is not None


@dataclass(frozen=True)
class ConstructorCall:
    """First statement of a constructor delegating to this(...) or super(...)."""
    kind: CallKind = CallKind.SUPER
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class FunctionMember:
    name: str = ""
    visibility: Visibility = Visibility.PUBLIC
    return_type: Optional[TypeRef] = None
    params: tuple[Param, ...] = ()
    body: tuple[str, ...] = ()
    is_constructor: bool = False
    is_static: bool = False
    is_override: bool = False
    is_getter: bool = False
    is_setter: bool = False
    delegates_to: Optional[ConstructorCall] = None

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE

    @property
    def has_return_type(self) -> bool:
        return self.return_type is not None and self.return_type.kind != TypeKind.VOID


@dataclass(frozen=True)
class FunctionTypeAlias:
    name: str = ""
    return_type: Optional[TypeRef] = None
    params: tuple[Param, ...] = ()

    @property
    def has_return_type(self) -> bool:
        return self.return_type is not None and self.return_type.kind != TypeKind.VOID


@dataclass(frozen=True)
class ClassDeclaration:
    name: str = ""
    package: tuple[str, ...] = ()
    metadata: frozenset[str] = frozenset()
    function_types: tuple[FunctionTypeAlias, ...] = ()
    fields: tuple[FieldMember, ...] = ()
    functions: tuple[FunctionMember, ...] = ()
    is_final: bool = False
    extends: Optional[TypeRef] = None
    implements: tuple[TypeRef, ...] = ()

    @property
    def constructors(self) -> list[FunctionMember]:
        return [f for f in self.functions if f.is_constructor]


@dataclass(frozen=True)
class InterfaceDeclaration:
    name: str = ""
    package: tuple[str, ...] = ()
    metadata: frozenset[str] = frozenset()
    function_types: tuple[FunctionTypeAlias, ...] = ()
    functions: tuple[FunctionMember, ...] = ()


TypeDeclaration = Union[ClassDeclaration, InterfaceDeclaration]


def primitive(name: str) -> TypeRef:
    return TypeRef(name=name, kind=TypeKind.PRIMITIVE)


def class_ref(qualified: str, *args: TypeRef) -> TypeRef:
    """Build a class reference from a dotted name such as 'flash.events.Event'."""
    *package, name = qualified.split(".")
    return TypeRef(name=name, package=tuple(package), args=tuple(args))


def declared_types(decl: TypeDeclaration) -> list[TypeRef]:
    """Every type reference mentioned in a declaration's signatures, in order."""
    refs: list[TypeRef] = []

    def add_params(params):
        refs.extend(p.type for p in params if p.type is not None)

    for alias in decl.function_types:
        if alias.return_type is not None:
            refs.append(alias.return_type)
        add_params(alias.params)
    if isinstance(decl, ClassDeclaration):
        if decl.extends is not None:
            refs.append(decl.extends)
        refs.extend(decl.implements)
        refs.extend(f.type for f in decl.fields if f.type is not None)
    for func in decl.functions:
        if func.return_type is not None:
            refs.append(func.return_type)
        add_params(func.params)

    # Generic arguments count as references too.
    expanded: list[TypeRef] = []
    pending = list(refs)
    while pending:
        ref = pending.pop(0)
        expanded.append(ref)
        pending[0:0] = list(ref.args)
    return expanded


__all__ = [
    "NO_CONVERSION", "CONVERT_ONCE", "PRIMITIVE_TYPES",
    "TypeKind", "Visibility", "CallKind",
    "TypeRef", "Param", "FieldMember", "ConstructorCall", "FunctionMember",
    "FunctionTypeAlias", "ClassDeclaration", "InterfaceDeclaration",
    "TypeDeclaration", "primitive", "class_ref", "declared_types",
]
