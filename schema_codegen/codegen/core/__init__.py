"""
Core code generation components.

Provides the type model, result type, base generator, file writer and
pipeline used by the language generators.
"""

from .generator import CodeGenerator, GeneratorError
from .result import ErrorKind, GenerationResult, describe_exception
from .model import (
    TypeModel,
    PrimitiveType,
    Property,
    RecordType,
    ArrayType,
    EnumType,
    reference,
)
from .schema import JsonSchemaParser, SchemaDocument, SchemaParseError, parse_schema
from .naming import (
    NameSanitizer,
    NamingCase,
    clean_identifier,
    join_words,
    split_words,
    underscore_to_camel,
)
from .namespace import package_name, namespace_segments
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine, quote
from .writer import generate_file
from .pipeline import GenerationPipeline, LoggerSink, NullSink, Sink

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    # Results
    "ErrorKind",
    "GenerationResult",
    "describe_exception",
    # Type model
    "TypeModel",
    "PrimitiveType",
    "Property",
    "RecordType",
    "ArrayType",
    "EnumType",
    "reference",
    # Schema documents
    "JsonSchemaParser",
    "SchemaDocument",
    "SchemaParseError",
    "parse_schema",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "clean_identifier",
    "join_words",
    "split_words",
    "underscore_to_camel",
    "package_name",
    "namespace_segments",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "quote",
    # Emission
    "generate_file",
    "GenerationPipeline",
    "LoggerSink",
    "NullSink",
    "Sink",
]
