"""
Command-line interface for schema code generation.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box

from . import __version__
from .codegen import create_pipeline
from .codegen.core.config import ConfigError, GeneratorConfig, load_config
from .codegen.core.pipeline import LoggerSink
from .logging_config import get_logger, setup_logging
from .utils import SchemaInput, SchemaLoaderError, load_schema

logger = get_logger(__name__)

# Initialize rich console
console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="schema-codegen",
        description="Generate Scala case classes and argonaut codecs from a JSON Schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schema-codegen person.json -o src/main/scala
  schema-codegen --url https://example.com/schemas/Person.json
  schema-codegen --stdin --fallback-namespace models < schema.json
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="JSON Schema file")
    input_group.add_argument("--url", help="URL to fetch the schema from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the schema from standard input"
    )

    parser.add_argument("--output", "-o", help="Output directory (default: generated)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--number-kind",
        choices=["float", "decimal"],
        help="How fractional JSON numbers are read",
    )
    parser.add_argument(
        "--fallback-namespace",
        metavar="NAME",
        help="Namespace used when the schema scope yields none",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for pipeline output",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Shortcut for --log-level INFO"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments."""
    overrides = {}

    if args.output:
        overrides["output_dir"] = args.output
    if args.number_kind:
        overrides["number_kind"] = args.number_kind
    if args.fallback_namespace:
        overrides["fallback_namespace"] = args.fallback_namespace
    if args.log_level:
        overrides["log_level"] = args.log_level
    elif args.verbose:
        overrides["log_level"] = "INFO"

    try:
        return load_config("scala", custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _get_input(args: argparse.Namespace) -> SchemaInput:
    """Resolve the selected input option."""
    if args.stdin:
        return SchemaInput(sys.stdin.read(), "", "📥 stdin")
    try:
        return load_schema(file_path=args.file, url=args.url)
    except (SchemaLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _print_files(paths: List[Path]):
    table = Table(title="📄 Generated Files", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("File", style="green")
    for path in paths:
        table.add_row(str(path))
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the code generator.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
        setup_logging(config.log_level)

        schema = _get_input(args)
        console.print(f"[cyan]Generating Scala sources from {schema.description}[/cyan]")
        pipeline = create_pipeline(
            config, sink=LoggerSink(logger), default_scope=schema.scope
        )
        result = pipeline.run(schema.source, config.output_dir)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        return 1

    if not result.success:
        console.print(
            f"[red]✗ Code generation failed ({result.error_kind.value}):[/red] "
            f"{result.error_message}"
        )
        return 1

    _print_files(result.value)
    console.print(f"[green]✓[/green] Generated {len(result.value)} files")
    return 0


if __name__ == "__main__":
    sys.exit(main())
