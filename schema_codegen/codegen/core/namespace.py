"""
Namespace resolution from a schema scope URI.

The namespace is used both as the generated package name and, split on
``.``, as the output directory path.
"""

from pathlib import PurePosixPath
from typing import List, Optional
from urllib.parse import unquote, urlsplit

SEPARATOR = "."
DEFAULT_NAMESPACE = "local"


def transliterate(raw: str) -> str:
    """Map every non letter/digit character to the separator and trim the ends."""
    mapped = "".join(c if c.isalnum() else SEPARATOR for c in raw)
    return mapped.strip(SEPARATOR)


def _host(netloc: str) -> str:
    host = netloc.rpartition("@")[2]
    name, _, port = host.rpartition(":")
    if name and port.isdigit():
        return name
    return host


def _file_name(path: str) -> str:
    if not path:
        return ""
    return PurePosixPath(unquote(path)).stem


def package_name(scope: Optional[str], fallback: str = DEFAULT_NAMESPACE) -> str:
    """
    Derive the namespace for a schema scope.

    Candidates in order: fragment, file name of the path (extension
    dropped), host, then ``fallback``. The first candidate that is still
    non-empty after transliteration wins.

    Args:
        scope: Scope URI of the schema document
        fallback: Namespace used when the URI yields nothing

    Returns:
        Non-empty namespace without leading or trailing separators
    """
    parts = urlsplit(scope or "")
    candidates = (
        unquote(parts.fragment),
        _file_name(parts.path),
        _host(parts.netloc),
        fallback,
    )
    for candidate in candidates:
        namespace = transliterate(candidate)
        if namespace:
            return namespace
    return DEFAULT_NAMESPACE


def namespace_segments(namespace: str) -> List[str]:
    """Split a namespace into directory segments."""
    return [segment for segment in namespace.split(SEPARATOR) if segment]
