"""
schema_codegen

Generates Scala case classes and argonaut codecs from JSON Schema documents.
"""

from .codegen import create_pipeline, generate_from_schema

__version__ = "0.1.0"

__all__ = ["create_pipeline", "generate_from_schema", "__version__"]
