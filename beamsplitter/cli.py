"""
Command-line interface for beamsplitter.

Reads a type model document and produces or edits the bindings of one
or more targets.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core.config import get_config_manager, load_config
from .core.errors import GeneratorError
from .core.generator import GenerationResult, generate_bindings
from .core.model import load_model
from .logging_config import configure_logging, get_logger
from .registry import get_registry, list_supported_targets

logger = get_logger(__name__)

console = Console()

SYNTAX_LEXERS = {
    ".cpp": "cpp",
    ".js": "javascript",
    ".ts": "typescript",
    ".java": "java",
}


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beamsplitter",
        description="Generate JavaScript, TypeScript and Java bindings from a type model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  beamsplitter definitions.json --target javascript --namespace View -o web/src
  beamsplitter definitions.json -t ts -t java --namespace View -o out
  beamsplitter definitions.json -t java --config beamsplitter.json --dry-run
  beamsplitter --list-targets
        """.strip(),
    )

    parser.add_argument("model", nargs="?", help="Type model JSON file")
    parser.add_argument(
        "--target",
        "-t",
        action="append",
        dest="targets",
        metavar="TARGET",
        help="Target to generate (repeatable; use --list-targets to see options)",
    )
    parser.add_argument("--namespace", "-n", help="Namespace prefix for generated names")
    parser.add_argument("--output-dir", "-o", metavar="DIR", help="Output directory")
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--marker", help="Marker text separating hand-written code")
    parser.add_argument("--java-class", metavar="NAME", help="Java class to edit")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render everything but don't write any file",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="With --dry-run, print the rendered artifacts",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument(
        "--list-targets",
        action="store_true",
        help="List supported targets and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect configuration overrides given on the command line."""
    overrides = {}
    if args.namespace is not None:
        overrides["namespace"] = args.namespace
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.marker is not None:
        overrides["marker"] = args.marker
    if args.java_class is not None:
        overrides["java_class"] = args.java_class
    return overrides


def _list_targets() -> int:
    """List supported targets with details."""
    registry = get_registry()

    table = Table(title="Supported Targets", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Aliases", style="blue")
    table.add_column("Output", style="dim")

    for target in list_supported_targets():
        info = registry.get_target_info(target)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(target, aliases, info["description"])

    console.print(table)
    return 0


def _show_rendered(results: List[GenerationResult]):
    for result in results:
        for artifact in result.artifacts:
            lexer = SYNTAX_LEXERS.get(artifact.path.suffix, "text")
            console.print(
                Panel(
                    Syntax(artifact.content.decode("utf-8"), lexer, line_numbers=True),
                    title=f"{artifact.action} {artifact.path}",
                    border_style="green",
                )
            )


def run(args: argparse.Namespace) -> int:
    """
    Run a generation from parsed arguments.

    Returns:
        Exit code (0 for success, 1 for any generation failure)
    """
    if args.list_targets:
        return _list_targets()

    if not args.model:
        console.print("[red]✗[/red] A type model file is required")
        return 1

    if not args.targets:
        console.print("[red]✗[/red] At least one --target is required")
        return 1

    try:
        registry = get_registry()
        model = load_model(args.model)
        overrides = _build_overrides(args)

        generators = []
        for target in args.targets:
            target_key = registry.resolve(target)
            config = load_config(target_key, overrides, args.config)
            for warning in get_config_manager().validate_config(config, target_key):
                logger.warning(warning)
            generators.append(registry.create_generator(target_key, config))

        results = generate_bindings(generators, model, dry_run=args.dry_run)

    except GeneratorError as e:
        logger.error("Generation failed: %s", e)
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1

    if args.dry_run and args.show:
        _show_rendered(results)

    for result in results:
        for line in result.summary_lines():
            if args.dry_run:
                line = f"Would have {line[0].lower()}{line[1:]}"
            console.print(line, highlight=False, markup=False, soft_wrap=True)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
