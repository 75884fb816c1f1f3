"""Tests for configuration loading."""

import json

import pytest

from schema_codegen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    EXAMPLE_SCALA_CONFIG,
    GeneratorConfig,
    load_config,
)
from schema_codegen.codegen.languages.scala import ScalaConfig


class TestConfigManager:

    def test_scala_defaults(self):
        config = load_config("scala")
        assert config.model_file_name == "model"
        assert config.codec_file_name == "Codecs"
        assert config.fallback_namespace == "local"
        assert config.number_kind == "float"
        assert config.language_config["codec_import"] == "argonaut._, Argonaut._"

    def test_custom_overrides(self):
        config = load_config("scala", custom_config={"output_dir": "src/main/scala"})
        assert config.output_dir == "src/main/scala"

    def test_unknown_keys_become_language_settings(self):
        config = load_config("scala", custom_config={"integer_type": "Long"})
        assert config.language_config["integer_type"] == "Long"
        assert config.language_config["codecs_object_name"] == "Codecs"

    def test_language_config_merged_by_key(self):
        config = load_config(
            "scala", custom_config={"language_config": {"codecs_object_name": "JsonCodecs"}}
        )
        assert config.language_config["codecs_object_name"] == "JsonCodecs"
        assert config.language_config["codec_import"] == "argonaut._, Argonaut._"

    def test_defaults_not_mutated(self):
        load_config("scala", custom_config={"language_config": {"indent_size": 8}})
        assert "indent_size" not in load_config("scala").language_config

    def test_config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(EXAMPLE_SCALA_CONFIG), encoding="utf-8")

        config = load_config("scala", config_file=path)

        assert config.number_kind == "decimal"
        assert config.fallback_namespace == "schemas"
        assert ScalaConfig(**config.language_config).number_type == "BigDecimal"

    def test_file_then_overrides(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output_dir": "a"}), encoding="utf-8")

        config = load_config("scala", custom_config={"output_dir": "b"}, config_file=path)

        assert config.output_dir == "b"

    @pytest.mark.parametrize(
        "name, content",
        [("config.json", "{"), ("config.json", "[]"), ("config.yaml", "{}")],
    )
    def test_invalid_files(self, tmp_path, name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config("scala", config_file=path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config("scala", config_file=tmp_path / "absent.json")

    def test_save_and_reload(self, tmp_path):
        manager = ConfigManager()
        original = manager.get_config("scala", {"fallback_namespace": "com.acme"})
        path = tmp_path / "saved.json"

        manager.save_config(original, path)

        assert manager.get_config("scala", config_file=path) == original

    def test_validation_warnings(self):
        manager = ConfigManager()
        warnings = manager.validate_config(
            GeneratorConfig(number_kind="int", model_file_name="x", codec_file_name="x")
        )
        assert len(warnings) == 2

    def test_invalid_number_kind_rejected(self):
        with pytest.raises(ConfigError, match="number_kind"):
            load_config("scala", custom_config={"number_kind": "int"})

    def test_invalid_number_kind_in_file_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"number_kind": "int"}), encoding="utf-8")
        with pytest.raises(ConfigError, match="'int'"):
            load_config("scala", config_file=path)

    def test_list_languages(self):
        assert ConfigManager().list_languages() == ["scala"]


class TestScalaConfig:

    def test_defaults(self):
        config = ScalaConfig()
        assert config.get_scala_type("string") == "String"
        assert config.get_scala_type("integer") == "Int"
        assert config.get_scala_type("number") == "Double"
        assert config.get_scala_type("boolean") == "Boolean"
        assert config.get_scala_type("any") == "Json"
        assert config.indent == "  "

    def test_unknown_kind(self):
        with pytest.raises(KeyError):
            ScalaConfig().get_scala_type("null")
