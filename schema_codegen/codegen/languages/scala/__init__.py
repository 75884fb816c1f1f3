"""
Scala code generator module.

Generates Scala case classes, Enumerations and argonaut codecs from a
JSON Schema derived type model.
"""

from .generator import ScalaGenerator, create_scala_generator
from .naming import (
    SCALA_BUILTIN_TYPES,
    SCALA_RESERVED_WORDS,
    create_scala_sanitizer,
    member_name,
    scala_identifier,
)
from .config import ScalaConfig, SCALA_TYPE_MAP
from .model import ModelDerivationError, ScalaModelDeriver, derive_model

__all__ = [
    # Generator
    "ScalaGenerator",
    "create_scala_generator",
    # Naming
    "SCALA_BUILTIN_TYPES",
    "SCALA_RESERVED_WORDS",
    "create_scala_sanitizer",
    "member_name",
    "scala_identifier",
    # Configuration
    "ScalaConfig",
    "SCALA_TYPE_MAP",
    # Model derivation
    "ModelDerivationError",
    "ScalaModelDeriver",
    "derive_model",
]
