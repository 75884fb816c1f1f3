"""
Scala-specific naming utilities and sanitization.

Handles Scala reserved words and the identifier rules used for members and
enumeration values.
"""

from ...core.naming import NameSanitizer, clean_identifier, underscore_to_camel


# Scala reserved keywords, including symbolic ones a cleaned name can become
SCALA_RESERVED_WORDS = {
    "_",
    "abstract",
    "case",
    "catch",
    "class",
    "def",
    "do",
    "else",
    "extends",
    "false",
    "final",
    "finally",
    "for",
    "forSome",
    "if",
    "implicit",
    "import",
    "lazy",
    "macro",
    "match",
    "new",
    "null",
    "object",
    "override",
    "package",
    "private",
    "protected",
    "return",
    "sealed",
    "super",
    "this",
    "throw",
    "trait",
    "try",
    "true",
    "type",
    "val",
    "var",
    "while",
    "with",
    "yield",
}

# Types that generated case classes must not shadow
SCALA_BUILTIN_TYPES = {
    "Any",
    "AnyRef",
    "AnyVal",
    "BigDecimal",
    "BigInt",
    "Boolean",
    "Byte",
    "Char",
    "Codecs",
    "Double",
    "Either",
    "Float",
    "Int",
    "Json",
    "List",
    "Long",
    "Map",
    "Nothing",
    "Null",
    "Option",
    "Seq",
    "Set",
    "Short",
    "String",
    "Unit",
    "Vector",
}


def scala_identifier(name: str) -> str:
    """Turn an arbitrary string into a Scala identifier.

    Invalid characters become ``_``; reserved words are back-quoted.
    """
    cleaned = clean_identifier(name)
    if cleaned in SCALA_RESERVED_WORDS:
        return f"`{cleaned}`"
    return cleaned


def member_name(name: str) -> str:
    """Scala member name for a raw schema property name.

    Camel-casing can itself produce a keyword (``for_some``), so the result
    is checked again.
    """
    camel = underscore_to_camel(clean_identifier(name))
    if camel in SCALA_RESERVED_WORDS:
        return f"`{camel}`"
    return camel


def create_scala_sanitizer() -> NameSanitizer:
    """Create a name sanitizer for generated Scala type names."""
    return NameSanitizer(SCALA_RESERVED_WORDS, SCALA_BUILTIN_TYPES)
