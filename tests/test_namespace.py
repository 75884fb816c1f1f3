"""Tests for namespace resolution from schema scopes."""

import pytest

from schema_codegen.codegen.core.namespace import (
    namespace_segments,
    package_name,
    transliterate,
)


class TestPackageName:

    def test_fragment_wins(self):
        assert package_name("http://example.com/schemas/Person.json#Person") == "Person"

    def test_file_name_without_extension(self):
        assert package_name("http://example.com/schemas/Address.json") == "Address"

    def test_host_when_path_is_empty(self):
        assert package_name("http://models.example.org") == "models.example.org"

    def test_empty_scope_uses_default(self):
        assert package_name("") == "local"
        assert package_name(None) == "local"

    def test_custom_fallback(self):
        assert package_name("", fallback="schemas") == "schemas"

    def test_empty_fallback_still_yields_namespace(self):
        assert package_name("", fallback="") == "local"

    def test_fragment_is_transliterated(self):
        assert package_name("http://example.com/x.json#com/acme-models") == "com.acme.models"

    def test_fragment_without_letters_falls_through(self):
        assert package_name("http://example.com/schemas/Order.json#--") == "Order"

    def test_host_port_is_dropped(self):
        assert package_name("http://localhost:8080/") == "localhost"

    def test_file_name_punctuation_becomes_separator(self):
        assert package_name("http://h.org/dir/my-schema.v1.json") == "my.schema.v1"

    def test_local_file_uri(self):
        assert package_name("file:///tmp/schemas/Invoice.json") == "Invoice"

    @pytest.mark.parametrize(
        "scope",
        [
            "",
            "#",
            "#...",
            "http://a.b/c.json#_x_",
            "urn:uuid:1234",
            "http://[::1]/",
            "-._~",
        ],
    )
    def test_never_empty_or_dotted_at_ends(self, scope):
        namespace = package_name(scope)
        assert namespace
        assert not namespace.startswith(".")
        assert not namespace.endswith(".")

    def test_deterministic(self):
        scope = "http://example.com/schemas/Person.json"
        assert package_name(scope) == package_name(scope)


class TestTransliterate:

    def test_non_alphanumerics_become_dots(self):
        assert transliterate("a b/c") == "a.b.c"

    def test_strips_leading_and_trailing_dots(self):
        assert transliterate("__a__") == "a"

    def test_inner_runs_are_kept(self):
        assert transliterate("a--b") == "a..b"


class TestNamespaceSegments:

    def test_split_on_separator(self):
        assert namespace_segments("com.acme.models") == ["com", "acme", "models"]

    def test_empty_segments_dropped(self):
        assert namespace_segments("a..b") == ["a", "b"]
