"""Tests for the JSON declaration loader."""

import json

import pytest

from src.converter.ast_nodes import (
    CallKind, ClassDeclaration, InterfaceDeclaration, TypeKind, Visibility,
)
from src.converter.errors import LoadError
from src.converter.loader import Loader, load_file


DOCUMENT = {
    "types": [
        {
            "kind": "class",
            "name": "Foo",
            "package": "com.example",
            "metadata": ["ConvertOnce", "Bindable"],
            "final": True,
            "extends": "com.example.Base",
            "implements": ["IA", {"name": "IList", "package": ["mx", "collections"]}],
            "functionTypes": [
                {"name": "Callback", "params": [{"name": "code", "type": "int"}]},
            ],
            "fields": [
                {"name": "count", "type": "int", "static": True, "initializer": "computeDefault()"},
                {"name": "onDone", "type": "Callback", "visibility": "private"},
                {"name": "items", "type": {"name": "Vector", "args": ["String"]}},
            ],
            "functions": [
                {"name": "Foo", "constructor": True,
                 "params": [{"name": "a", "type": "Number"}],
                 "delegates": {"kind": "super", "args": [1]},
                 "body": ["trace(a);"]},
                {"name": "size", "returns": "uint", "getter": True, "visibility": "protected"},
            ],
        },
        {"kind": "interface", "name": "IA", "functions": [{"name": "run", "returns": "void"}]},
    ]
}


def load(document=DOCUMENT):
    return Loader().load(document)


class TestLoader:
    def test_class_declaration(self):
        foo = load()[0]
        assert isinstance(foo, ClassDeclaration)
        assert foo.name == "Foo"
        assert foo.package == ("com", "example")
        assert foo.metadata == frozenset({"ConvertOnce", "Bindable"})
        assert foo.is_final
        assert foo.extends.name == "Base" and foo.extends.package == ("com", "example")
        assert [t.qualified_name for t in foo.implements] == ["IA", "mx.collections.IList"]

    def test_type_kinds(self):
        count, on_done, items = load()[0].fields
        assert count.type.kind == TypeKind.PRIMITIVE
        assert count.is_static and count.initializer == "computeDefault()"
        assert on_done.type.kind == TypeKind.FUNCTION
        assert on_done.visibility == Visibility.PRIVATE
        assert items.type.args[0].name == "String"
        assert items.type.args[0].kind == TypeKind.CLASS

    def test_functions(self):
        ctor, size = load()[0].functions
        assert ctor.is_constructor
        assert ctor.params[0].type.name == "Number"
        assert ctor.delegates_to.kind == CallKind.SUPER
        assert ctor.delegates_to.args == ("1",)
        assert ctor.body == ("trace(a);",)
        assert size.is_getter and size.return_type.name == "uint"
        assert size.visibility == Visibility.PROTECTED

    def test_interface(self):
        iface = load()[1]
        assert isinstance(iface, InterfaceDeclaration)
        assert iface.package == ()
        assert iface.functions[0].return_type.kind == TypeKind.VOID
        assert not iface.functions[0].has_return_type

    def test_load_file(self, tmp_path):
        path = tmp_path / "types.json"
        path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
        assert [d.name for d in load_file(str(path))] == ["Foo", "IA"]


class TestLoaderErrors:
    def test_missing_types(self):
        with pytest.raises(LoadError):
            load({"classes": []})

    def test_unknown_kind(self):
        with pytest.raises(LoadError) as info:
            load({"types": [{"kind": "enum", "name": "E"}]})
        assert info.value.path == "$.types[0].kind"

    def test_bad_visibility_reports_path(self):
        doc = {"types": [{"name": "Foo", "fields": [{"name": "x", "type": "int", "visibility": "open"}]}]}
        with pytest.raises(LoadError) as info:
            load(doc)
        assert info.value.path == "$.types[0].fields[0].visibility"

    def test_missing_name(self):
        with pytest.raises(LoadError) as info:
            load({"types": [{"kind": "class"}]})
        assert info.value.path == "$.types[0].name"

    def test_bad_delegation(self):
        doc = {"types": [{"name": "Foo", "functions": [
            {"name": "Foo", "constructor": True, "delegates": {"kind": "parent"}}]}]}
        with pytest.raises(LoadError):
            load(doc)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LoadError):
            load_file(str(path))

    def test_non_string_initializer(self):
        doc = {"types": [{"name": "Foo", "fields": [{"name": "x", "type": "int", "initializer": 0}]}]}
        with pytest.raises(LoadError) as info:
            load(doc)
        assert info.value.path == "$.types[0].fields[0].initializer"

    def test_non_string_body_line(self):
        doc = {"types": [{"name": "Foo", "functions": [{"name": "run", "body": ["a();", 2]}]}]}
        with pytest.raises(LoadError) as info:
            load(doc)
        assert info.value.path == "$.types[0].functions[0].body[1]"

    def test_non_string_metadata(self):
        with pytest.raises(LoadError) as info:
            load({"types": [{"name": "Foo", "metadata": [{"tag": "ConvertOnce"}]}]})
        assert info.value.path == "$.types[0].metadata[0]"
