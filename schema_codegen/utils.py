"""Schema source helpers for the command line.

Local files are handed to the parser as paths so that their ``file://`` URI
becomes the schema scope; remote schemas are fetched with ``requests`` and
the URL is used as the scope instead.
"""

from pathlib import Path
from typing import NamedTuple, Union
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30


class SchemaLoaderError(Exception):
    """A schema source could not be located or downloaded."""

    pass


class SchemaInput(NamedTuple):
    """Schema source ready for the pipeline."""

    source: Union[str, Path]
    scope: str
    description: str


def schema_from_file(file_path: Union[str, Path]) -> SchemaInput:
    """Check that a local schema exists; the parser reads it later.

    Raises:
        FileNotFoundError: If there is no file at ``file_path``.
    """
    path = Path(file_path)
    if not path.is_file():
        logger.error("Schema file not found: %s", path)
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() != ".json":
        logger.warning("Schema file %s has no .json extension", path)

    # An empty scope lets the parser derive one from the file URI
    return SchemaInput(path, "", f"📄 {path}")


def schema_from_url(url: str, timeout: int = DEFAULT_TIMEOUT) -> SchemaInput:
    """Download a schema document.

    Raises:
        SchemaLoaderError: For malformed URLs and any request failure.
    """
    parts = urlparse(url)
    if not (parts.scheme and parts.netloc):
        raise SchemaLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching schema from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        raise SchemaLoaderError(f"HTTP error {status} for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.debug("Request to %s failed", url, exc_info=True)
        raise SchemaLoaderError(f"Could not fetch {url}: {e}") from e

    content_type = response.headers.get("content-type", "")
    if "json" not in content_type.lower():
        logger.warning("Schema at %s served as %r", url, content_type)

    logger.info("Fetched %d characters of schema from %s", len(response.text), url)
    return SchemaInput(response.text, url, f"🌐 {url}")


def load_schema(file_path: Union[str, Path, None] = None, url: str = None,
                timeout: int = DEFAULT_TIMEOUT) -> SchemaInput:
    """Resolve exactly one of ``file_path`` or ``url`` to a SchemaInput."""
    if bool(file_path) == bool(url):
        raise SchemaLoaderError("Exactly one of file_path or url must be provided")

    if file_path:
        return schema_from_file(file_path)
    return schema_from_url(url, timeout)
