"""
Base generator interface for all code generation targets.

Defines the contract that language generators implement: rendering a single
type model entity as a declaration or a codec, and assembling those into
the model and codec files.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Any, Optional, Union

from .config import GeneratorConfig, load_config
from .model import TypeModel, RecordType, EnumType
from .namespace import package_name
from .result import ErrorKind, GenerationResult
from .templates import TemplateEngine, create_template_engine
from .writer import generate_file
from ...logging_config import get_logger

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config(self.language_name)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(
            self.get_template_directory(), self.get_templates()
        )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'scala')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.scala')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    def get_templates(self) -> Dict[str, str]:
        """Return in-memory templates keyed by name."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def model_file_name(self) -> str:
        return f"{self.config.model_file_name}{self.file_extension}"

    @property
    def codec_file_name(self) -> str:
        return f"{self.config.codec_file_name}{self.file_extension}"

    @abstractmethod
    def render_declaration(self, entity: TypeModel) -> str:
        """
        Render the declaration of one entity.

        Returns:
            Declaration text, or an empty string for entities that declare
            nothing on their own
        """
        pass

    @abstractmethod
    def render_codec(self, entity: TypeModel) -> str:
        """
        Render the serialization binding of one entity.

        Returns:
            Codec text, or an empty string for non-record entities
        """
        pass

    @abstractmethod
    def render_model_file(self, namespace: str, declarations: List[str]) -> str:
        """Assemble the model file from non-empty declarations."""
        pass

    @abstractmethod
    def render_codec_file(self, namespace: str, codecs: List[str]) -> str:
        """Assemble the codec file from non-empty codec bodies."""
        pass

    def resolve_namespace(self, scope: Optional[str]) -> str:
        """Namespace for a schema scope URI."""
        return package_name(scope, self.config.fallback_namespace)

    def validate_types(self, types: Iterable[TypeModel]) -> List[str]:
        """
        Validate the type model for structural issues.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        seen = set()

        for entity in types:
            if entity.identifier in seen and isinstance(entity, (RecordType, EnumType)):
                warnings.append(f"Duplicate type identifier '{entity.identifier}'")
            seen.add(entity.identifier)

            if isinstance(entity, RecordType):
                if not entity.properties and not entity.is_open:
                    warnings.append(f"Record '{entity.identifier}' has no properties")
                names = [p.name for p in entity.properties]
                if len(names) != len(set(names)):
                    warnings.append(
                        f"Record '{entity.identifier}' has duplicate property names"
                    )
            elif isinstance(entity, EnumType) and not entity.values:
                warnings.append(f"Enumeration '{entity.identifier}' has no values")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, allows at most two consecutive blank
        lines and ends the text with a single newline.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def generate_model_text(self, namespace: str, types: Iterable[TypeModel]) -> str:
        """Render the complete model file text."""
        declarations = [d for d in (self.render_declaration(t) for t in types) if d]
        return self.format_code(self.render_model_file(namespace, declarations))

    def generate_codec_text(self, namespace: str, types: Iterable[TypeModel]) -> str:
        """Render the complete codec file text."""
        codecs = [c for c in (self.render_codec(t) for t in types) if c]
        return self.format_code(self.render_codec_file(namespace, codecs))

    def generate_model(
        self, types: Iterable[TypeModel], scope: Optional[str], output_dir: Union[str, Path]
    ) -> GenerationResult[List[Path]]:
        """Write the model file for ``types`` into the scope's namespace."""
        types = list(types)
        for warning in self.validate_types(types):
            logger.warning(warning)

        return generate_file(
            self.resolve_namespace(scope),
            self.model_file_name,
            output_dir,
            lambda namespace: GenerationResult.attempt(
                self.generate_model_text, namespace, types, kind=ErrorKind.RENDER
            ),
        )

    def generate_codec(
        self, types: Iterable[TypeModel], scope: Optional[str], output_dir: Union[str, Path]
    ) -> GenerationResult[List[Path]]:
        """Write the codec file for ``types`` into the scope's namespace."""
        types = list(types)
        return generate_file(
            self.resolve_namespace(scope),
            self.codec_file_name,
            output_dir,
            lambda namespace: GenerationResult.attempt(
                self.generate_codec_text, namespace, types, kind=ErrorKind.RENDER
            ),
        )

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)
