"""Tests for GenerationResult chaining."""

import pytest

from schema_codegen.codegen.core.generator import GeneratorError
from schema_codegen.codegen.core.result import (
    ErrorKind,
    GenerationResult,
    describe_exception,
)


class TestGenerationResult:

    def test_ok(self):
        result = GenerationResult.ok(3)
        assert result.success
        assert result.value == 3
        assert result.error_kind is None
        assert str(result) == "Success(3)"

    def test_error(self):
        result = GenerationResult.error("boom", kind=ErrorKind.IO)
        assert not result.success
        assert result.error_message == "boom"
        assert result.error_kind is ErrorKind.IO
        assert str(result) == "Failure(boom)"

    def test_error_defaults_to_render_kind(self):
        assert GenerationResult.error("x").error_kind is ErrorKind.RENDER

    def test_bind_chains_values(self):
        result = GenerationResult.ok(2).bind(lambda v: GenerationResult.ok(v * 10))
        assert result.value == 20

    def test_bind_short_circuits(self):
        calls = []
        failure = GenerationResult.error("first", kind=ErrorKind.PARSE)

        result = failure.bind(lambda v: calls.append(v) or GenerationResult.ok(v))

        assert result is failure
        assert calls == []

    def test_map(self):
        assert GenerationResult.ok([1, 2]).map(len).value == 2
        failure = GenerationResult.error("x")
        assert failure.map(len) is failure

    def test_tap_success(self):
        seen = []
        result = GenerationResult.ok("v")
        assert result.tap(on_success=seen.append, on_failure=seen.append) is result
        assert seen == ["v"]

    def test_tap_failure(self):
        seen = []
        result = GenerationResult.error("bad")
        result.tap(on_success=seen.append, on_failure=lambda r: seen.append(r.error_message))
        assert seen == ["bad"]

    def test_attempt_captures_exception(self):
        def fail():
            raise ValueError("no good")

        result = GenerationResult.attempt(fail, kind=ErrorKind.DERIVATION)

        assert not result.success
        assert result.error_message == "ValueError: no good"
        assert result.error_kind is ErrorKind.DERIVATION
        assert isinstance(result.exception, ValueError)

    def test_attempt_passes_arguments(self):
        assert GenerationResult.attempt(max, 1, 5).value == 5

    def test_unwrap(self):
        assert GenerationResult.ok("x").unwrap() == "x"
        with pytest.raises(GeneratorError, match="broken"):
            GenerationResult.error("broken").unwrap()


class TestDescribeException:

    def test_type_and_message(self):
        assert describe_exception(OSError("disk full")) == "OSError: disk full"

    def test_type_only_without_message(self):
        assert describe_exception(KeyError()) == "KeyError"
