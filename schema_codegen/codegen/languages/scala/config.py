"""
Scala-specific configuration and type mappings.

Maps JSON Schema scalar kinds to Scala types and names the constructs used
by the model and codec files.
"""

from typing import Dict

# JSON Schema scalar kinds to Scala types
SCALA_TYPE_MAP = {
    "string": "String",
    "integer": "Int",
    "number": "Double",
    "boolean": "Boolean",
    "any": "Json",
}


class ScalaConfig:
    """Scala-specific configuration."""

    def __init__(self, **kwargs):
        """Initialize Scala configuration."""
        # Type preferences
        self.string_type = kwargs.get("string_type", "String")
        self.integer_type = kwargs.get("integer_type", "Int")
        self.number_type = kwargs.get("number_type", "Double")
        self.boolean_type = kwargs.get("boolean_type", "Boolean")
        self.any_type = kwargs.get("any_type", "Json")

        # Containers
        self.list_container = kwargs.get("list_container", "List")
        self.set_container = kwargs.get("set_container", "Set")
        self.optional_container = kwargs.get("optional_container", "Option")
        self.map_container = kwargs.get("map_container", "Map")

        # Member holding open (additional) properties
        self.additional_properties_member = kwargs.get(
            "additional_properties_member", "_additional"
        )

        # Codec file
        self.codec_import = kwargs.get("codec_import", "argonaut._, Argonaut._")
        self.codecs_object_name = kwargs.get("codecs_object_name", "Codecs")

        self.indent = " " * int(kwargs.get("indent_size", 2))

        self.type_map: Dict[str, str] = SCALA_TYPE_MAP.copy()
        self.type_map["string"] = self.string_type
        self.type_map["integer"] = self.integer_type
        self.type_map["number"] = self.number_type
        self.type_map["boolean"] = self.boolean_type
        self.type_map["any"] = self.any_type

    @property
    def float_type(self) -> str:
        """Scala type of floating-point numbers; enumerations over it are skipped."""
        return self.number_type

    def get_scala_type(self, kind: str) -> str:
        """Scala type for a JSON Schema scalar kind.

        Raises:
            KeyError: For kinds with no mapping
        """
        return self.type_map[kind]
