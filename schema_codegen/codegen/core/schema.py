"""
Schema document representation and parsing.

Reads JSON Schema text into a SchemaDocument: the root schema object, the
scope URI used for namespace resolution, and the numeric kind used for
fractional JSON numbers.
"""

import json
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional, Type, Union
from urllib.parse import urljoin

from .result import ErrorKind, GenerationResult
from ...logging_config import get_logger

logger = get_logger(__name__)

NUMBER_KINDS: Dict[str, Type] = {"float": float, "decimal": Decimal}

SchemaSource = Union[str, bytes, Path, Dict[str, Any]]


class SchemaParseError(Exception):
    """Raised when schema input cannot be read or is not a schema object."""

    pass


@dataclass(frozen=True)
class SchemaDocument:
    """A parsed schema document."""

    root: Dict[str, Any] = field(hash=False, repr=False)
    scope: str = ""
    number_kind: Type = float

    @property
    def title(self) -> Optional[str]:
        title = self.root.get("title")
        return title if isinstance(title, str) and title else None

    def resolve_pointer(self, pointer: str) -> Any:
        """
        Resolve a local JSON pointer such as ``#/definitions/Address``.

        Raises:
            KeyError: If the pointer does not lead to a value
        """
        if not pointer.startswith("#"):
            raise KeyError(pointer)

        node: Any = self.root
        path = pointer[1:].lstrip("/")
        if not path:
            return node

        for token in path.split("/"):
            token = token.replace("~1", "/").replace("~0", "~")
            if isinstance(node, list) and token.isdigit():
                node = node[int(token)]
            elif isinstance(node, dict) and token in node:
                node = node[token]
            else:
                raise KeyError(pointer)
        return node


class JsonSchemaParser:
    """Parser producing SchemaDocument instances."""

    def __init__(self, number_kind: Union[str, Type] = float, default_scope: str = ""):
        """
        Initialize parser.

        Args:
            number_kind: ``float``/``Decimal`` or their names
            default_scope: Scope used when the source carries none
        """
        if isinstance(number_kind, str):
            if number_kind not in NUMBER_KINDS:
                raise ValueError(f"Unsupported number kind: {number_kind}")
            number_kind = NUMBER_KINDS[number_kind]
        self.number_kind = number_kind
        self.default_scope = default_scope

    def parse(self, source: SchemaSource) -> GenerationResult[SchemaDocument]:
        """
        Parse a schema source.

        Args:
            source: JSON text, a path to a schema file, or an already
                decoded schema object

        Returns:
            GenerationResult with the SchemaDocument, or a parse failure
        """
        try:
            return GenerationResult.ok(self.parse_document(source))
        except SchemaParseError as e:
            logger.error("Schema parsing failed: %s", e)
            return GenerationResult.error(str(e), exception=e, kind=ErrorKind.PARSE)

    def parse_document(self, source: SchemaSource) -> SchemaDocument:
        """Parse a schema source, raising SchemaParseError on failure."""
        base_scope = self.default_scope

        if isinstance(source, Path):
            base_scope = base_scope or source.resolve().as_uri()
            try:
                text = source.read_text(encoding="utf-8")
            except OSError as e:
                raise SchemaParseError(f"Error reading schema file {source}: {e}") from e
            root = self._decode(text)
        elif isinstance(source, (str, bytes)):
            root = self._decode(source)
        elif isinstance(source, dict):
            root = source
        else:
            raise SchemaParseError(f"Unsupported schema source: {type(source).__name__}")

        if not isinstance(root, dict):
            raise SchemaParseError(
                f"Schema root must be a JSON object, got {type(root).__name__}"
            )

        scope = self._scope(root, base_scope)
        logger.debug("Parsed schema with scope %r", scope)
        return SchemaDocument(root=root, scope=scope, number_kind=self.number_kind)

    def _decode(self, text: Union[str, bytes]) -> Any:
        try:
            return json.loads(text, parse_float=self.number_kind)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SchemaParseError(f"Invalid JSON schema: {e}") from e

    def _scope(self, root: Dict[str, Any], base_scope: str) -> str:
        declared = root.get("$id", root.get("id"))
        if isinstance(declared, str) and declared:
            return urljoin(base_scope, declared) if base_scope else declared
        return base_scope


def parse_schema(source: SchemaSource, number_kind: Union[str, Type] = float,
                 default_scope: str = "") -> GenerationResult[SchemaDocument]:
    """Convenience wrapper around JsonSchemaParser.parse."""
    return JsonSchemaParser(number_kind, default_scope).parse(source)
