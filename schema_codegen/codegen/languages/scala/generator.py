"""
Scala code generator implementation.

Generates Scala case classes and Enumerations for the model file, and
argonaut codecs for the codec file.
"""

from decimal import Decimal
from typing import Dict, List, Any, Optional

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratorError
from ...core.model import (
    ArrayType,
    EnumLiteral,
    EnumType,
    PrimitiveType,
    Property,
    RecordType,
    TypeModel,
)
from .config import ScalaConfig
from .naming import member_name, scala_identifier
from .templates import SCALA_TEMPLATES


class ScalaGenerator(CodeGenerator):
    """Code generator for Scala case classes with argonaut codecs."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Scala generator with configuration."""
        super().__init__(config)
        self.scala_config = ScalaConfig(**self.config.language_config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "scala"

    @property
    def file_extension(self) -> str:
        """Return Scala file extension."""
        return ".scala"

    def get_templates(self) -> Dict[str, str]:
        return SCALA_TEMPLATES

    # Type rendering

    def render_type(self, entity: TypeModel) -> str:
        """Scala type expression referring to ``entity``."""
        if isinstance(entity, ArrayType):
            container = (
                self.scala_config.set_container
                if entity.unique
                else self.scala_config.list_container
            )
            return f"{container}[{entity.nested.identifier}]"
        return entity.identifier

    def render_property_type(self, prop: Property) -> str:
        """Scala type of a record member, wrapped in Option when not required."""
        scala_type = self.render_type(prop.type)
        if prop.required:
            return scala_type
        return f"{self.scala_config.optional_container}[{scala_type}]"

    # Declarations

    def render_declaration(self, entity: TypeModel) -> str:
        """Render a case class, an Enumeration, or nothing."""
        if isinstance(entity, RecordType):
            return self._render_case_class(entity)
        elif isinstance(entity, EnumType):
            return self._render_enumeration(entity)
        elif isinstance(entity, (ArrayType, PrimitiveType)):
            return ""
        raise GeneratorError(
            f"Unsupported type model variant: {type(entity).__name__}"
        )

    def _render_case_class(self, record: RecordType) -> str:
        members = [
            f"{member_name(p.name)}: {self.render_property_type(p)}"
            for p in record.properties
        ]
        if record.additional is not None:
            members.append(
                f"{self.scala_config.additional_properties_member}: "
                f"{self.scala_config.map_container}"
                f"[String, {self.render_type(record.additional)}]"
            )

        context = {"class_name": record.identifier, "members": members}
        return self.render_template("case_class.scala.j2", context)

    def _render_enumeration(self, enum: EnumType) -> str:
        # Enumerations of floating-point numbers are not supported
        if enum.nested.identifier == self.scala_config.float_type:
            return ""

        values = [v for v in (self._enum_value(literal) for literal in enum.values) if v]
        context = {
            "enum_name": enum.identifier,
            "values": values,
            "indent": self.scala_config.indent,
        }
        return self.render_template("enumeration.scala.j2", context)

    def _enum_value(self, literal: EnumLiteral) -> Optional[Dict[str, Any]]:
        if isinstance(literal, str):
            return {
                "name": scala_identifier(literal),
                "literal": literal,
            }
        if isinstance(literal, bool) or not isinstance(literal, (int, float, Decimal)):
            return None
        # Numeric values are named after their integer part only
        number = int(literal)
        return {"name": f"v{number}", "literal": number}

    # Codecs

    def render_codec(self, entity: TypeModel) -> str:
        """Render the argonaut codec of a record; other variants render nothing."""
        if isinstance(entity, RecordType):
            if entity.additional is not None:
                return self._render_map_codec(entity)
            return self._render_case_codec(entity)
        elif isinstance(entity, (ArrayType, EnumType, PrimitiveType)):
            return ""
        raise GeneratorError(
            f"Unsupported type model variant: {type(entity).__name__}"
        )

    def _render_case_codec(self, record: RecordType) -> str:
        context = {
            "class_name": record.identifier,
            "arity": len(record.properties),
            "field_names": [p.name for p in record.properties],
            "indent": self.scala_config.indent,
        }
        return self.render_template("case_codec.scala.j2", context)

    def _render_map_codec(self, record: RecordType) -> str:
        context = {"class_name": record.identifier, "indent": self.scala_config.indent}
        return self.render_template("map_codec.scala.j2", context)

    # Files

    def render_model_file(self, namespace: str, declarations: List[str]) -> str:
        context = {"package_name": namespace, "body": "\n\n".join(declarations)}
        return self.render_template("model_file.scala.j2", context)

    def render_codec_file(self, namespace: str, codecs: List[str]) -> str:
        context: Dict[str, Any] = {
            "package_name": namespace,
            "codec_import": self.scala_config.codec_import,
            "object_name": self.scala_config.codecs_object_name,
            "body": "\n".join(codecs),
        }
        return self.render_template("codec_file.scala.j2", context)


def create_scala_generator(config: GeneratorConfig = None, **language_options) -> ScalaGenerator:
    """Create a Scala generator, with optional Scala-specific overrides."""
    if config is None:
        from ...core.config import load_config

        config = load_config("scala", custom_config={"language_config": language_options})
    elif language_options:
        config.language_config.update(language_options)

    return ScalaGenerator(config)
