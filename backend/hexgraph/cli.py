"""
hexgraph command line.

Prints the architecture graph of an application (or one of its exports)
to standard output. Use --import to load the modules whose components
should be registered first.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from hexgraph.ai import AgentPack, ContextBuilder
from hexgraph.errors import HexGraphError
from hexgraph.exporters import ExportGraph, available_formats, get_exporter
from hexgraph.logging_setup import configure_logging
from hexgraph.registry import current_graph

logger = logging.getLogger(__name__)


def _import_modules(modules: List[str]) -> None:
    for name in modules:
        try:
            importlib.import_module(name)
        except ImportError as e:
            raise HexGraphError(
                f"Cannot import module '{name}': {e}",
                code="E_HEX_CLI_IMPORT",
                next_steps=["Check the module name and that it is on PYTHONPATH"],
            ) from e
        logger.debug("Imported %s", name)


def pack_command(args: argparse.Namespace) -> str:
    pack = AgentPack.from_graph(
        current_graph(),
        doc_paths=args.docs,
        package_name=args.package_name,
        package_version=args.package_version,
    )
    return pack.to_json(indent=args.indent)


def context_command(args: argparse.Namespace) -> str:
    return ContextBuilder(current_graph()).build().to_json(indent=args.indent)


def export_command(args: argparse.Namespace) -> str:
    exporter = get_exporter(args.format)
    graph = current_graph()
    if args.output:
        path = graph.save_visualization(Path(args.output), exporter)
        return f"Wrote {exporter.format_name()} to {path}"
    return ExportGraph(exporter).execute(graph)


def summary_command(args: argparse.Namespace) -> str:
    graph = current_graph()
    return graph.pretty_print() + "\n" + graph.to_ascii_art()


COMMANDS = {
    "pack": pack_command,
    "context": context_command,
    "export": export_command,
    "summary": summary_command,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexgraph",
        description="Architecture graph engine - inspect and export registered components",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Agent pack for an application
  hexgraph --import shop.domain --import shop.adapters pack

  # Mermaid diagram to a file
  hexgraph --import shop export mermaid -o architecture.mmd
        """,
    )
    parser.add_argument(
        "--import", dest="imports", action="append", default=[], metavar="MODULE",
        help="Import MODULE before building the graph (repeatable)",
    )
    parser.add_argument("--log-level", help="Override HEXGRAPH_LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Pack command
    pack_parser = subparsers.add_parser("pack", help="Print the agent pack as JSON")
    pack_parser.add_argument(
        "--doc", dest="docs", action="append", default=None, metavar="PATH",
        help="Documentation file to bundle (repeatable, default HEXGRAPH_DOC_PATHS)",
    )
    pack_parser.add_argument("--package-name", help="Name recorded in the pack")
    pack_parser.add_argument("--package-version", help="Version recorded in the pack")
    pack_parser.add_argument("--indent", type=int, default=None, help="Pretty-print with INDENT spaces")

    # Context command
    context_parser = subparsers.add_parser("context", help="Print the AI context as JSON")
    context_parser.add_argument("--indent", type=int, default=2, help="JSON indent")

    # Export command
    export_parser = subparsers.add_parser("export", help="Export the graph in one format")
    export_parser.add_argument("format", help=f"One of: {', '.join(available_formats())}")
    export_parser.add_argument("-o", "--output", help="Write to this file instead of stdout")

    # Summary command
    subparsers.add_parser("summary", help="Print a human-readable summary")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level)

    try:
        _import_modules(args.imports)
        output = COMMANDS[args.command](args)
    except HexGraphError as e:
        print(f"error [{e.code}]: {e.message}", file=sys.stderr)
        for step in e.next_steps:
            print(f"  - {step}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
