"""C# converter: renders one class or interface per .cs file."""

from __future__ import annotations

from typing import Iterable

from ..ast_nodes import InterfaceDeclaration, Param, TypeDeclaration, TypeRef
from ..base import TargetConverter
from ..context import ConversionContext
from ..naming import CodeHelper
from ..writer import CodeWriter
from .classes import emit_class, emit_interface
from .functions import emit_function_types
from .naming import CsCodeHelper


DEFAULT_IMPORT = "System"


class CsConverter(TargetConverter):
    extension = "cs"

    def __init__(self, helper: CodeHelper | None = None,
                 context: ConversionContext | None = None):
        super().__init__(helper or CsCodeHelper(), context)

    def render(self, decl: TypeDeclaration) -> CodeWriter:
        out = CodeWriter()

        out.writeln(f"using {DEFAULT_IMPORT};")
        out.blank_line()
        self._emit_imports(out, self.context.imports(decl))
        out.blank_line()

        out.writeln(f"namespace {self.helper.namespace(decl.package)}")
        out.block_open()

        emit_function_types(self, out, decl)

        if isinstance(decl, InterfaceDeclaration):
            emit_interface(self, out, decl)
        else:
            emit_class(self, out, decl)

        out.block_close()
        return out

    def _emit_imports(self, out: CodeWriter, imports: Iterable[str]):
        for name in sorted(set(imports) - {DEFAULT_IMPORT}):
            out.writeln(f"using {name};")

    # ---- Helpers shared by the member emitters ----

    def type(self, ref: TypeRef | None) -> str:
        return self.helper.type_ref(ref)

    def params_string(self, params: Iterable[Param]) -> str:
        return ", ".join(f"{self.type(p.type)} {self.helper.identifier(p.identifier)}"
                         for p in params)
