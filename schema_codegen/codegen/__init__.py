"""
Schema code generation module.

Generates Scala models and argonaut codecs from JSON Schema documents.
"""

from pathlib import Path
from typing import List, Optional, Union

from .core.config import GeneratorConfig, ConfigManager, load_config
from .core.generator import CodeGenerator, GeneratorError
from .core.pipeline import GenerationPipeline, LoggerSink, NullSink, Sink
from .core.result import ErrorKind, GenerationResult
from .core.schema import JsonSchemaParser, SchemaDocument, SchemaSource
from .languages.scala import ScalaGenerator, derive_model


def create_pipeline(
    config: Optional[GeneratorConfig] = None,
    sink: Optional[Sink] = None,
    default_scope: str = "",
) -> GenerationPipeline:
    """
    Build the Scala generation pipeline.

    Args:
        config: Generator configuration (defaults for Scala when omitted)
        sink: Observability sink; defaults to the package logger
        default_scope: Scope for sources that declare no ``$id``

    Returns:
        Configured GenerationPipeline
    """
    generator = ScalaGenerator(config)
    parser = JsonSchemaParser(generator.config.number_kind, default_scope)
    return GenerationPipeline(
        generator,
        lambda document: derive_model(document, generator.scala_config),
        parser=parser,
        sink=sink if sink is not None else LoggerSink(),
    )


def generate_from_schema(
    source: SchemaSource,
    output_dir: Union[str, Path, None] = None,
    config: Optional[GeneratorConfig] = None,
    sink: Optional[Sink] = None,
) -> GenerationResult[List[Path]]:
    """
    Generate model and codec files for a schema.

    Args:
        source: Schema path, JSON text or decoded schema object
        output_dir: Output root (``config.output_dir`` when omitted)
        config: Generator configuration
        sink: Observability sink

    Returns:
        GenerationResult with the written paths
    """
    pipeline = create_pipeline(config, sink)
    return pipeline.run(source, output_dir or pipeline.generator.config.output_dir)


__all__ = [
    "CodeGenerator",
    "ConfigManager",
    "ErrorKind",
    "GenerationPipeline",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "JsonSchemaParser",
    "LoggerSink",
    "NullSink",
    "ScalaGenerator",
    "SchemaDocument",
    "Sink",
    "create_pipeline",
    "derive_model",
    "generate_from_schema",
    "load_config",
]
