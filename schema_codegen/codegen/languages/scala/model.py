"""
Derivation of the Scala type model from a parsed schema document.

Objects become records, ``enum`` keywords become enumerations, arrays wrap
their item type and scalars map through the Scala type map. Nested objects
are named after their parent and property (``PersonAddress``), array items
get an ``Item`` suffix, and definitions reached through local ``$ref`` are
named after their definition key.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Set

from ...core.model import (
    ArrayType,
    EnumType,
    PrimitiveType,
    Property,
    RecordType,
    TypeModel,
    reference,
)
from ...core.namespace import namespace_segments, package_name
from ...core.naming import NamingCase
from ...core.result import ErrorKind, GenerationResult, describe_exception
from ...core.schema import SchemaDocument
from ....logging_config import get_logger
from .config import ScalaConfig
from .naming import create_scala_sanitizer

logger = get_logger(__name__)

UNSUPPORTED_KEYWORDS = ("oneOf", "anyOf", "allOf", "not")


class ModelDerivationError(Exception):
    """Raised for schema constructs that have no type model representation."""

    def __init__(self, message: str, pointer: str = "#"):
        self.pointer = pointer
        super().__init__(f"[{pointer}] {message}")


class ScalaModelDeriver:
    """Builds the ordered set of type model entities for one document."""

    def __init__(self, document: SchemaDocument, config: Optional[ScalaConfig] = None):
        self.document = document
        self.config = config or ScalaConfig()
        self.sanitizer = create_scala_sanitizer()
        # identifier -> entity, in discovery order (parents before children)
        self._types: Dict[str, Optional[TypeModel]] = {}
        # JSON pointer -> type used to refer to the entity at that pointer
        self._pointers: Dict[str, TypeModel] = {}
        self._resolving: Set[str] = set()

    def derive(self) -> List[TypeModel]:
        """Derive every record and enumeration reachable from the root."""
        self._derive(self.document.root, self._root_name(), "#")
        types = [t for t in self._types.values() if t is not None]
        logger.debug("Derived %d type model entities", len(types))
        return types

    def _root_name(self) -> str:
        if self.document.title:
            return self.document.title
        return namespace_segments(package_name(self.document.scope, "Root"))[-1]

    def _derive(self, schema: Any, name_hint: str, pointer: str) -> TypeModel:
        if schema is True or schema == {}:
            return PrimitiveType(self.config.any_type)
        if not isinstance(schema, dict):
            raise ModelDerivationError(f"Expected a schema object, got {schema!r}", pointer)

        if "$ref" in schema:
            return self._resolve_ref(schema["$ref"], pointer)

        for keyword in UNSUPPORTED_KEYWORDS:
            if keyword in schema:
                raise ModelDerivationError(f"'{keyword}' is not supported", pointer)

        if "enum" in schema:
            return self._derive_enum(schema, name_hint, pointer)

        kind = self._kind(schema, pointer)
        if kind == "object":
            return self._derive_object(schema, name_hint, pointer)
        if kind == "array":
            return self._derive_array(schema, name_hint, pointer)
        if kind == "null":
            raise ModelDerivationError("'null' type has no Scala representation", pointer)

        try:
            return PrimitiveType(self.config.get_scala_type(kind))
        except KeyError:
            raise ModelDerivationError(f"Unknown type '{kind}'", pointer) from None

    def _kind(self, schema: Dict[str, Any], pointer: str) -> str:
        kind = schema.get("type")
        if isinstance(kind, list):
            kinds = [k for k in kind if k != "null"]
            if len(kinds) != 1:
                raise ModelDerivationError(f"Union type {kind} is not supported", pointer)
            kind = kinds[0]

        if kind is None:
            if "properties" in schema or "additionalProperties" in schema:
                return "object"
            if "items" in schema:
                return "array"
            return "any"

        if not isinstance(kind, str):
            raise ModelDerivationError(f"Invalid type declaration {kind!r}", pointer)
        return kind

    def _resolve_ref(self, ref: Any, pointer: str) -> TypeModel:
        if not isinstance(ref, str) or not ref.startswith("#"):
            raise ModelDerivationError(f"Only local references are supported: {ref!r}", pointer)

        if ref in self._pointers:
            return self._pointers[ref]

        try:
            target = self.document.resolve_pointer(ref)
        except (KeyError, IndexError):
            raise ModelDerivationError(f"Unresolvable reference {ref}", pointer) from None

        if ref in self._resolving:
            raise ModelDerivationError(f"Circular reference {ref}", pointer)

        name_hint = ref.rstrip("/").rsplit("/", 1)[-1] if ref != "#" else self._root_name()
        self._resolving.add(ref)
        try:
            resolved = self._derive(target, name_hint, ref)
        finally:
            self._resolving.discard(ref)
        self._pointers.setdefault(ref, resolved)
        return resolved

    def _claim_name(self, schema: Dict[str, Any], name_hint: str, pointer: str) -> str:
        title = schema.get("title")
        raw = title if isinstance(title, str) and title and pointer != "#" else name_hint
        base = self.sanitizer.sanitize_name(raw, NamingCase.PASCAL_CASE)
        identifier = base
        counter = 2
        while identifier in self._types:
            identifier = f"{base}{counter}"
            counter += 1
        self._types[identifier] = None
        self._pointers[pointer] = reference(identifier)
        return identifier

    def _derive_object(self, schema: Dict[str, Any], name_hint: str, pointer: str) -> TypeModel:
        properties = schema.get("properties") or {}
        if not isinstance(properties, dict):
            raise ModelDerivationError("'properties' must be an object", pointer)

        required = schema.get("required") or []
        if not isinstance(required, list) or not all(isinstance(r, str) for r in required):
            raise ModelDerivationError("'required' must be an array of strings", pointer)

        additional_schema = schema.get("additionalProperties")
        if not properties and not isinstance(additional_schema, dict):
            # Free-form object
            return PrimitiveType(self.config.any_type)

        identifier = self._claim_name(schema, name_hint, pointer)
        required = set(required)

        members = []
        for name, property_schema in properties.items():
            nested_hint = f"{identifier}{self._pascal(name)}"
            member_type = self._derive(
                property_schema, nested_hint, f"{pointer}/properties/{name}"
            )
            members.append(Property(name, member_type, name in required))

        additional = None
        if isinstance(additional_schema, dict):
            additional = self._derive(
                additional_schema,
                f"{identifier}Additional",
                f"{pointer}/additionalProperties",
            )

        self._types[identifier] = RecordType(identifier, tuple(members), additional)
        return reference(identifier)

    def _derive_array(self, schema: Dict[str, Any], name_hint: str, pointer: str) -> TypeModel:
        items = schema.get("items", True)
        if isinstance(items, list):
            raise ModelDerivationError("Tuple 'items' are not supported", pointer)

        nested = self._derive(items, f"{name_hint}Item", f"{pointer}/items")
        if isinstance(nested, ArrayType):
            # Nested containers are referred to by their rendered type
            nested = PrimitiveType(nested.identifier)

        unique = bool(schema.get("uniqueItems", False))
        container = self.config.set_container if unique else self.config.list_container
        return ArrayType(f"{container}[{nested.identifier}]", nested, unique)

    def _derive_enum(self, schema: Dict[str, Any], name_hint: str, pointer: str) -> TypeModel:
        values = schema["enum"]
        if not isinstance(values, list) or not values:
            raise ModelDerivationError("'enum' must be a non-empty array", pointer)

        nested = PrimitiveType(self._enum_kind(schema, values, pointer))
        identifier = self._claim_name(schema, name_hint, pointer)
        self._types[identifier] = EnumType(identifier, nested, tuple(values))
        return reference(identifier)

    def _enum_kind(self, schema: Dict[str, Any], values: List[Any], pointer: str) -> str:
        if "type" in schema:
            kind = self._kind(schema, pointer)
        elif all(isinstance(v, str) for v in values):
            kind = "string"
        elif all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            kind = "integer"
        elif all(isinstance(v, (int, float, Decimal)) and not isinstance(v, bool) for v in values):
            kind = "number"
        else:
            raise ModelDerivationError(f"Mixed enum values {values!r} are not supported", pointer)

        try:
            return self.config.get_scala_type(kind)
        except KeyError:
            raise ModelDerivationError(f"Unsupported enum type '{kind}'", pointer) from None

    def _pascal(self, name: str) -> str:
        return self.sanitizer.convert(name, NamingCase.PASCAL_CASE)


def derive_model(document: SchemaDocument,
                 config: Optional[ScalaConfig] = None) -> GenerationResult[List[TypeModel]]:
    """Derive the type model, reporting unsupported schemas as a failure."""
    try:
        return GenerationResult.ok(ScalaModelDeriver(document, config).derive())
    except ModelDerivationError as e:
        logger.error("Model derivation failed: %s", e)
        return GenerationResult.error(str(e), exception=e, kind=ErrorKind.DERIVATION)
    except (TypeError, AttributeError, ValueError) as e:
        # Malformed schema values the checks above do not anticipate
        logger.error("Model derivation failed on malformed schema: %s", e, exc_info=True)
        return GenerationResult.error(
            describe_exception(e), exception=e, kind=ErrorKind.DERIVATION
        )
