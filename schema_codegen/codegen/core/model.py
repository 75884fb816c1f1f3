"""
Type model consumed by the emitters.

The model is a closed set of frozen variants produced once per run by a
model deriver. Every variant carries the identifier of the generated type.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

EnumLiteral = Union[str, int, float]


@dataclass(frozen=True)
class TypeModel:
    """Base class for all type model variants."""

    identifier: str


@dataclass(frozen=True)
class PrimitiveType(TypeModel):
    """A built-in scalar, or a reference to another generated type by name."""


@dataclass(frozen=True)
class Property:
    """A named member of a record."""

    name: str  # raw schema name, used verbatim in codecs
    type: TypeModel
    required: bool = False


@dataclass(frozen=True)
class RecordType(TypeModel):
    """An object with ordered named properties and optional open properties."""

    properties: Tuple[Property, ...] = ()
    additional: Optional[TypeModel] = None

    @property
    def is_open(self) -> bool:
        return self.additional is not None


@dataclass(frozen=True)
class ArrayType(TypeModel):
    """A homogeneous collection; ``unique`` selects a set container."""

    nested: TypeModel
    unique: bool = False


@dataclass(frozen=True)
class EnumType(TypeModel):
    """A closed set of literal values over a scalar kind."""

    nested: PrimitiveType
    values: Tuple[EnumLiteral, ...] = ()


def reference(identifier: str) -> PrimitiveType:
    """Refer to a generated type by identifier."""
    return PrimitiveType(identifier)
