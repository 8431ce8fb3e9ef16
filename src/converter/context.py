"""Resolver-side services the emitters consult while rendering a type.

The defaults here work on the AST alone. A resolver with more knowledge
(symbol tables, ordering analysis) can subclass ConversionContext and
override any of them.
"""

from __future__ import annotations

import re

from .ast_nodes import (
    ClassDeclaration, FieldMember, TypeDeclaration, TypeKind, declared_types,
)
from .naming import CodeHelper


_LITERAL_RE = re.compile(
    r"""^(
        -?\d+(\.\d*)?([eE][-+]?\d+)?    # decimal
      | -?0[xX][0-9a-fA-F]+             # hex
      | "([^"\\]|\\.)*"                 # double-quoted string
      | '([^'\\]|\\.)*'                 # single-quoted string
      | true | false | null
    )$""",
    re.VERBOSE,
)


def is_literal(expression: str) -> bool:
    return bool(_LITERAL_RE.match(expression.strip()))


class ConversionContext:
    def __init__(self, helper: CodeHelper):
        self.helper = helper

    def class_name(self, decl: TypeDeclaration) -> str:
        return self.helper.identifier(decl.name)

    def imports(self, decl: TypeDeclaration) -> set[str]:
        """Namespaces of every referenced type declared outside decl's package."""
        own = tuple(decl.package)
        result = set()
        for ref in declared_types(decl):
            if ref.kind != TypeKind.CLASS or not ref.package:
                continue
            if tuple(ref.package) == own:
                continue
            result.add(self.helper.namespace(ref.package))
        return result

    def is_safe_initialized(self, decl: ClassDeclaration, fld: FieldMember) -> bool:
        """True when fld's initializer can stay on the declaration line.

        Primitive constants must stay inline (a target constant needs its
        value). Anything else is inline only when it is a plain literal;
        calls and references to other members are deferred.
        """
        if not fld.has_initializer:
            return False
        if fld.is_const and fld.type is not None and fld.type.is_primitive:
            return True
        return is_literal(fld.initializer)

    def deferred_fields(self, decl: ClassDeclaration) -> list[FieldMember]:
        """Fields whose initializer must run in the synthetic initializer method."""
        return [f for f in decl.fields
                if f.has_initializer and not self.is_safe_initialized(decl, f)]
