"""Tests for generated file emission."""

from schema_codegen.codegen.core.result import ErrorKind, GenerationResult
from schema_codegen.codegen.core.writer import generate_file


def constant(text):
    return lambda namespace: GenerationResult.ok(text)


class TestGenerateFile:

    def test_writes_into_namespace_directories(self, tmp_path):
        result = generate_file("com.acme", "model.scala", tmp_path, constant("hello"))

        target = tmp_path / "com" / "acme" / "model.scala"
        assert result.success
        assert result.value == [target]
        assert target.read_text(encoding="utf-8") == "hello"

    def test_content_receives_namespace(self, tmp_path):
        seen = []

        def content(namespace):
            seen.append(namespace)
            return GenerationResult.ok(f"package {namespace}")

        result = generate_file("models", "model.scala", tmp_path, content)

        assert seen == ["models"]
        assert result.value[0].read_text(encoding="utf-8") == "package models"

    def test_replaces_existing_file(self, tmp_path):
        generate_file("ns", "Codecs.scala", tmp_path, constant("first version, longer"))
        result = generate_file("ns", "Codecs.scala", tmp_path, constant("second"))

        assert result.success
        assert (tmp_path / "ns" / "Codecs.scala").read_text(encoding="utf-8") == "second"

    def test_unencodable_text_keeps_previous_file(self, tmp_path):
        generate_file("ns", "model.scala", tmp_path, constant('Value("ok")'))
        target = tmp_path / "ns" / "model.scala"
        before = target.read_bytes()

        result = generate_file("ns", "model.scala", tmp_path, constant('Value("\ud800")'))

        assert not result.success
        assert result.error_kind is ErrorKind.IO
        assert result.error_message.startswith("UnicodeEncodeError")
        assert target.read_bytes() == before

    def test_writes_utf8(self, tmp_path):
        result = generate_file("ns", "model.scala", tmp_path, constant('Value("café")'))
        assert result.value[0].read_bytes() == 'Value("café")'.encode("utf-8")

    def test_content_failure_returned_unchanged(self, tmp_path):
        failure = GenerationResult.error("render broke", kind=ErrorKind.RENDER)

        result = generate_file("a.b", "model.scala", tmp_path, lambda namespace: failure)

        assert result is failure
        assert not (tmp_path / "a" / "b" / "model.scala").exists()
        # Directories created before the failure are left in place
        assert (tmp_path / "a" / "b").is_dir()

    def test_content_exception_becomes_io_failure(self, tmp_path):
        def content(namespace):
            raise RuntimeError("unexpected")

        result = generate_file("ns", "model.scala", tmp_path, content)

        assert not result.success
        assert result.error_kind is ErrorKind.IO
        assert result.error_message == "RuntimeError: unexpected"

    def test_unwritable_output_root(self, tmp_path):
        blocker = tmp_path / "occupied"
        blocker.write_text("not a directory", encoding="utf-8")

        result = generate_file("ns", "model.scala", blocker, constant("x"))

        assert not result.success
        assert result.error_kind is ErrorKind.IO
        assert result.error_message.startswith(("FileExistsError", "NotADirectoryError"))
        assert isinstance(result.exception, OSError)

    def test_target_is_directory(self, tmp_path):
        (tmp_path / "ns" / "model.scala").mkdir(parents=True)

        result = generate_file("ns", "model.scala", tmp_path, constant("x"))

        assert not result.success
        assert result.error_kind is ErrorKind.IO
