"""Tests for the writer, naming and context services."""

import pytest

from src.converter.ast_nodes import (
    ClassDeclaration, FieldMember, TypeKind, TypeRef, class_ref, declared_types, primitive,
)
from src.converter.context import ConversionContext, is_literal
from src.converter.csharp import CsCodeHelper
from src.converter.naming import PrefixAccessorNaming
from src.converter.writer import CodeWriter


class TestCodeWriter:
    def test_blocks_indent(self):
        out = CodeWriter()
        out.writeln("namespace a")
        out.block_open()
        out.write("class ")
        out.writeln("B")
        out.block_open()
        out.blank_line()
        out.block_close()
        out.block_close()
        assert out.text() == "namespace a\n{\n    class B\n    {\n\n    }\n}\n"

    def test_unbalanced_close(self):
        with pytest.raises(RuntimeError):
            CodeWriter().block_close()

    def test_open_block_not_written(self, tmp_path):
        out = CodeWriter()
        out.block_open()
        with pytest.raises(RuntimeError):
            out.write_to_file(str(tmp_path / "x.cs"))
        assert not (tmp_path / "x.cs").exists()


class TestNaming:
    def test_prefix_accessors(self):
        naming = PrefixAccessorNaming()
        assert naming.getter("width") == "getWidth"
        assert naming.setter("x") == "setX"
        assert PrefixAccessorNaming("", "").getter("width") == "width"

    def test_cs_types(self):
        helper = CsCodeHelper()
        assert helper.type_ref(primitive("Number")) == "float"
        assert helper.type_ref(primitive("Boolean")) == "bool"
        assert helper.type_ref(class_ref("*")) == "Object"
        assert helper.type_ref(None) == "void"
        assert helper.type_ref(TypeRef("void", kind=TypeKind.VOID)) == "void"
        assert helper.type_ref(TypeRef("Dictionary", args=(class_ref("String"), primitive("int")))) \
            == "Dictionary<String, int>"

    def test_packaged_type_is_not_builtin(self):
        assert CsCodeHelper().type_ref(class_ref("my.int")) == "@int"

    def test_namespace(self):
        helper = CsCodeHelper()
        assert helper.namespace(("com", "example")) == "com.example"
        assert helper.namespace(("app", "event")) == "app.@event"
        assert helper.namespace(()) == "Global"


class TestContext:
    def test_literals(self):
        for text in ("0", "-1", "3.14", "1e5", "0xFF", '"a\\"b"', "'c'", "true", "false", "null"):
            assert is_literal(text), text
        for text in ("f()", "a + 1", "new Array()", "MAX", '"a" + b'):
            assert not is_literal(text), text

    def test_safety_predicate(self):
        context = ConversionContext(CsCodeHelper())
        decl = ClassDeclaration(name="Foo")
        assert context.is_safe_initialized(decl, FieldMember("n", primitive("int"), is_const=True,
                                                             initializer="A * 2"))
        assert not context.is_safe_initialized(decl, FieldMember("p", class_ref("Point"), is_const=True,
                                                                 initializer="new Point()"))
        assert not context.is_safe_initialized(decl, FieldMember("n", primitive("int")))

    def test_declared_types_include_generic_args(self):
        decl = ClassDeclaration(name="Foo", fields=(
            FieldMember("m", TypeRef("Map", args=(class_ref("a.K"), class_ref("b.V")))),
        ))
        assert [t.name for t in declared_types(decl)] == ["Map", "K", "V"]
