"""Tests for schema document parsing."""

from decimal import Decimal

import pytest

from schema_codegen.codegen.core.result import ErrorKind
from schema_codegen.codegen.core.schema import (
    JsonSchemaParser,
    SchemaDocument,
    parse_schema,
)


class TestJsonSchemaParser:

    def test_parse_text(self):
        result = parse_schema('{"title": "Point", "type": "object"}')
        assert result.success
        assert result.value.root == {"title": "Point", "type": "object"}
        assert result.value.scope == ""
        assert result.value.title == "Point"

    def test_parse_bytes(self):
        assert parse_schema(b'{"type": "object"}').success

    def test_parse_dict(self):
        root = {"type": "object"}
        assert parse_schema(root).value.root is root

    def test_declared_id_is_scope(self):
        result = parse_schema({"$id": "http://example.com/schemas/Person.json"})
        assert result.value.scope == "http://example.com/schemas/Person.json"

    def test_legacy_id_is_scope(self):
        assert parse_schema({"id": "http://example.com/a.json"}).value.scope == (
            "http://example.com/a.json"
        )

    def test_relative_id_resolved_against_default_scope(self):
        parser = JsonSchemaParser(default_scope="http://example.com/schemas/")
        document = parser.parse_document({"$id": "Order.json"})
        assert document.scope == "http://example.com/schemas/Order.json"

    def test_default_scope_without_id(self):
        parser = JsonSchemaParser(default_scope="http://example.com/x.json")
        assert parser.parse_document({}).scope == "http://example.com/x.json"

    def test_file_uri_is_default_scope(self, tmp_path):
        path = tmp_path / "Invoice.json"
        path.write_text('{"type": "object"}', encoding="utf-8")

        document = parse_schema(path).value

        assert document.scope == path.resolve().as_uri()
        assert document.scope.endswith("/Invoice.json")

    def test_number_kind_float(self):
        document = parse_schema('{"enum": [1.5]}').value
        assert document.number_kind is float
        assert isinstance(document.root["enum"][0], float)

    def test_number_kind_decimal(self):
        document = parse_schema('{"enum": [1.5, 2]}', number_kind="decimal").value
        assert document.number_kind is Decimal
        assert document.root["enum"] == [Decimal("1.5"), 2]

    def test_unknown_number_kind(self):
        with pytest.raises(ValueError):
            JsonSchemaParser("int")


class TestParseFailures:

    @pytest.mark.parametrize("source", ["{", "", b"\xff\xfe{", "[1, 2]", "3"])
    def test_invalid_sources(self, source):
        result = parse_schema(source)
        assert not result.success
        assert result.error_kind is ErrorKind.PARSE

    def test_missing_file(self, tmp_path):
        result = parse_schema(tmp_path / "missing.json")
        assert not result.success
        assert result.error_kind is ErrorKind.PARSE
        assert "missing.json" in result.error_message

    def test_unsupported_source_type(self):
        result = parse_schema(42)
        assert not result.success
        assert "Unsupported schema source" in result.error_message


class TestSchemaDocument:

    def test_resolve_pointer(self):
        document = SchemaDocument(root={"definitions": {"a/b": {"type": "string"}}})
        assert document.resolve_pointer("#/definitions/a~1b") == {"type": "string"}

    def test_resolve_root(self):
        root = {"type": "object"}
        assert SchemaDocument(root=root).resolve_pointer("#") is root

    def test_resolve_array_index(self):
        document = SchemaDocument(root={"items": [{"type": "string"}]})
        assert document.resolve_pointer("#/items/0") == {"type": "string"}

    def test_missing_pointer(self):
        with pytest.raises(KeyError):
            SchemaDocument(root={}).resolve_pointer("#/definitions/x")

    def test_title_ignores_non_strings(self):
        assert SchemaDocument(root={"title": 3}).title is None
