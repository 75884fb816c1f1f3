"""
Identifier naming for generated code.

``clean_identifier`` and ``underscore_to_camel`` are pure and total: any
input string yields a usable identifier. ``NameSanitizer`` additionally
remembers the type names it has handed out during one run so that two
schema locations never share a generated type name.
"""

import re
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Tuple


class NamingCase(Enum):
    """Case styles for generated names."""
    SNAKE_CASE = "snake"      # user_name
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName
    PRESERVE = "preserve"     # words joined with "_", case untouched


_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")
_WORD_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_INNER_UNDERSCORES = re.compile(r"(?<=[A-Za-z0-9])_+([A-Za-z0-9])")


def clean_identifier(name: str, fallback: str = "_") -> str:
    """Replace every character that cannot appear in an identifier.

    The result is never empty and never starts with a digit.
    """
    cleaned = _INVALID_CHARS.sub("_", str(name))
    if not cleaned:
        return fallback
    if cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    return cleaned


def underscore_to_camel(name: str) -> str:
    """Fold ``_x`` into ``X`` inside an identifier.

    Leading underscores are kept, so ``first_name`` becomes ``firstName`` and
    ``_id`` stays ``_id``.
    """
    return _INNER_UNDERSCORES.sub(lambda m: m.group(1).upper(), name)


def split_words(name: str) -> List[str]:
    """Split on punctuation and lower-to-upper case changes."""
    return [w for w in _WORD_SEPARATORS.split(_CAMEL_BOUNDARY.sub("_", name)) if w]


def join_words(words: Iterable[str], case: NamingCase) -> str:
    words = list(words)
    if case == NamingCase.SNAKE_CASE:
        return "_".join(w.lower() for w in words)
    if case == NamingCase.PASCAL_CASE:
        return "".join(w.capitalize() for w in words)
    if case == NamingCase.CAMEL_CASE:
        head, tail = (words[0].lower(), words[1:]) if words else ("", [])
        return head + "".join(w.capitalize() for w in tail)
    return "_".join(words)


class NameSanitizer:
    """Hands out unique, case-converted type names for one run."""

    def __init__(self, reserved_words: Optional[Set[str]] = None,
                 builtin_types: Optional[Set[str]] = None, empty_name: str = "type"):
        """
        Args:
            reserved_words: Words of the target language
            builtin_types: Type names generated code must not shadow
            empty_name: Used when a name has no letters or digits at all
        """
        self.reserved_words = set(reserved_words or ())
        self.builtin_types = set(builtin_types or ())
        self.empty_name = empty_name
        self._assigned: Dict[Tuple[str, NamingCase], str] = {}
        self._used_names: Set[str] = set()

    def convert(self, name: str, target_case: NamingCase) -> str:
        """Re-case a name into an identifier without reserving it."""
        converted = join_words(split_words(name) or [self.empty_name], target_case)
        if converted[0].isdigit():
            converted = f"_{converted}"
        return converted

    def sanitize_name(self, name: str,
                      target_case: NamingCase = NamingCase.PASCAL_CASE) -> str:
        """
        Reserve a name for a generated type.

        Asking again for the same ``name`` returns the same result; another
        name that converts to an identifier already handed out gets a
        numeric suffix. Reserved words and builtin types get a trailing ``_``.
        """
        key = (name, target_case)
        if key not in self._assigned:
            candidate = self.convert(name, target_case)
            if candidate in self.reserved_words or candidate in self.builtin_types:
                candidate = f"{candidate}_"

            unique, counter = candidate, 1
            while unique in self._used_names:
                unique = f"{candidate}{counter}"
                counter += 1

            self._assigned[key] = unique
            self._used_names.add(unique)
        return self._assigned[key]

    def is_used(self, name: str) -> bool:
        return name in self._used_names

    def reset_used_names(self):
        """Forget every name handed out so far."""
        self._assigned.clear()
        self._used_names.clear()
