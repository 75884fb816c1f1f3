"""
File emission for generated sources.

Writes one generated file into the namespace directory under an output
root and reports the outcome as a GenerationResult.
"""

from pathlib import Path
from typing import Callable, List, Union

from .namespace import namespace_segments
from .result import ErrorKind, GenerationResult, describe_exception
from ...logging_config import get_logger

logger = get_logger(__name__)

ContentFunction = Callable[[str], GenerationResult[str]]


def _write_new_file(path: Path, content: str) -> Path:
    """Replace ``path`` with ``content``; fails if the file reappears in between."""
    # Encode before touching the old file so an unencodable text leaves it intact
    data = content.encode("utf-8")
    path.unlink(missing_ok=True)
    with path.open("xb") as handle:
        handle.write(data)
    logger.debug("Wrote %d characters to %s", len(content), path)
    return path


def generate_file(
    namespace: str,
    file_name: str,
    output_dir: Union[str, Path],
    content: ContentFunction,
) -> GenerationResult[List[Path]]:
    """
    Generate one file for a namespace.

    The namespace directory is created first. ``content`` is then called
    with the namespace; if it fails its failure is returned unchanged and
    nothing is written. Created directories are left in place on failure.

    Args:
        namespace: Dotted namespace, mapped to nested directories
        file_name: Name of the file inside the namespace directory
        output_dir: Output root
        content: Produces the file text for the namespace

    Returns:
        GenerationResult holding a one-element list with the written path
    """
    try:
        package_dir = Path(output_dir).joinpath(*namespace_segments(namespace))
        package_dir.mkdir(parents=True, exist_ok=True)

        rendered = content(namespace)
        return rendered.map(lambda text: [_write_new_file(package_dir / file_name, text)])

    except Exception as e:
        logger.error("Failed to generate %s for %s: %s", file_name, namespace, e)
        return GenerationResult.error(
            describe_exception(e), exception=e, kind=ErrorKind.IO
        )
