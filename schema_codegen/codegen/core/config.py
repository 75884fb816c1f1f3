"""
Generator settings.

Settings are layered: built-in defaults for the target language, then an
optional JSON settings file, then explicit overrides (usually from the
command line). Keys the generator does not know are handed to the language
backend through ``language_config``.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

NUMBER_KINDS = {"float", "decimal"}

PathLike = Union[str, Path]


class ConfigError(Exception):
    """Raised when a settings file cannot be used."""
    pass


@dataclass
class GeneratorConfig:
    """Settings shared by every language generator."""

    # Output root and generated file names (without extension)
    output_dir: str = "generated"
    model_file_name: str = "model"
    codec_file_name: str = "Codecs"

    # Namespace used when the schema scope yields none
    fallback_namespace: str = "local"

    # How JSON numbers with a fraction are read: float or decimal
    number_kind: str = "float"

    log_level: str = "WARNING"

    # Passed to the language backend, e.g. ScalaConfig(**language_config)
    language_config: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Builds GeneratorConfig instances from defaults, files and overrides."""

    def __init__(self):
        self._defaults: Dict[str, Dict[str, Any]] = {
            "scala": {
                "model_file_name": "model",
                "codec_file_name": "Codecs",
                "fallback_namespace": "local",
                "language_config": {
                    "codec_import": "argonaut._, Argonaut._",
                    "codecs_object_name": "Codecs",
                    "additional_properties_member": "_additional",
                },
            }
        }

    def get_config(self, language: str = "scala",
                   custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[PathLike] = None) -> GeneratorConfig:
        """
        Resolve the settings for a language.

        Args:
            language: Target language; unknown languages start from the
                GeneratorConfig defaults
            custom_config: Overrides applied last
            config_file: JSON settings file applied before the overrides

        Returns:
            GeneratorConfig with every layer applied

        Raises:
            ConfigError: If the settings file is missing or malformed, or
                the resolved number_kind is not one of NUMBER_KINDS
        """
        # Deep copy so the defaults survive nested updates
        settings = json.loads(json.dumps(self._defaults.get(language, {})))

        for layer in (self._read_file(config_file) if config_file else None, custom_config):
            if layer:
                self._apply(settings, layer)

        config = self._build(settings)
        if config.number_kind not in NUMBER_KINDS:
            raise ConfigError(
                f"Invalid number_kind {config.number_kind!r}, "
                f"expected one of: {', '.join(sorted(NUMBER_KINDS))}"
            )
        for warning in self.validate_config(config):
            logger.warning(warning)
        return config

    @staticmethod
    def _apply(settings: Dict[str, Any], layer: Dict[str, Any]):
        # language_config is merged key by key, everything else replaced
        for key, value in layer.items():
            if key == "language_config" and isinstance(value, dict):
                settings.setdefault("language_config", {}).update(value)
            else:
                settings[key] = value

    @staticmethod
    def _read_file(config_path: PathLike) -> Dict[str, Any]:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            settings = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file {path}: {e}") from e

        if not isinstance(settings, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return settings

    @staticmethod
    def _build(settings: Dict[str, Any]) -> GeneratorConfig:
        known = {f.name for f in fields(GeneratorConfig)}
        language_config = dict(settings.get("language_config", {}))
        language_config.update(
            {k: v for k, v in settings.items() if k not in known}
        )

        kwargs = {k: v for k, v in settings.items() if k in known}
        kwargs["language_config"] = language_config
        return GeneratorConfig(**kwargs)

    def save_config(self, config: GeneratorConfig, output_path: PathLike):
        """Write ``config`` as a JSON settings file."""
        path = Path(output_path)
        try:
            path.write_text(
                json.dumps(asdict(config), indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """Return warnings for settings that will not generate sensible output."""
        warnings = []

        if config.number_kind not in NUMBER_KINDS:
            warnings.append(f"Invalid number_kind: {config.number_kind}")

        if not config.model_file_name or not config.codec_file_name:
            warnings.append("Output file names must not be empty")
        elif config.model_file_name == config.codec_file_name:
            warnings.append(
                f"Model and codec file names are identical: {config.model_file_name}"
            )

        return warnings


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Shared ConfigManager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str = "scala",
                custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[PathLike] = None) -> GeneratorConfig:
    """Resolve settings through the shared ConfigManager."""
    return get_config_manager().get_config(language, custom_config, config_file)


# Example settings file
EXAMPLE_SCALA_CONFIG = {
    "output_dir": "src/main/scala",
    "fallback_namespace": "schemas",
    "number_kind": "decimal",
    "integer_type": "Long",
    "number_type": "BigDecimal",
}
