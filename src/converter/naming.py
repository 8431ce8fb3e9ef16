"""Naming services shared by the target emitters.

Each target supplies a CodeHelper that spells types, escapes identifiers and
maps packages to its module system. Accessor naming is a separate, pluggable
convention so a target can pick its own getter/setter idiom without
touching the emission logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .ast_nodes import TypeRef


class AccessorNaming(ABC):
    @abstractmethod
    def getter(self, name: str) -> str: ...

    @abstractmethod
    def setter(self, name: str) -> str: ...


class PrefixAccessorNaming(AccessorNaming):
    """Accessors become plain methods: `width` -> `getWidth` / `setWidth`."""

    def __init__(self, getter_prefix: str = "get", setter_prefix: str = "set"):
        self.getter_prefix = getter_prefix
        self.setter_prefix = setter_prefix

    def getter(self, name: str) -> str:
        return self._join(self.getter_prefix, name)

    def setter(self, name: str) -> str:
        return self._join(self.setter_prefix, name)

    @staticmethod
    def _join(prefix: str, name: str) -> str:
        if not prefix:
            return name
        return prefix + name[:1].upper() + name[1:]


class CodeHelper(ABC):
    def __init__(self, accessors: AccessorNaming | None = None,
                 default_namespace: str = "Global"):
        self.accessors = accessors or PrefixAccessorNaming()
        self.default_namespace = default_namespace

    @abstractmethod
    def type_ref(self, ref: TypeRef | None) -> str:
        """Spell `ref` in the target language; None means no return value."""

    @abstractmethod
    def identifier(self, name: str) -> str: ...

    def getter(self, name: str) -> str:
        return self.accessors.getter(name)

    def setter(self, name: str) -> str:
        return self.accessors.setter(name)

    def namespace(self, package: Sequence[str]) -> str:
        if not package:
            return self.default_namespace
        return ".".join(self.identifier(segment) for segment in package)
