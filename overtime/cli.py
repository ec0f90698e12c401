"""overtime CLI: inspect and check REST gateway schema files.

Usage:
    overtime check <schema_file>
    overtime dump <schema_file> [--output <output_path>]
    overtime names <schema_file>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from overtime import __version__
from overtime.core.config import get_config
from overtime.core.types import ParseResult

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="overtime",
        description="overtime: schema front end for generated REST gateways",
        epilog="Declare types and endpoints once. Generate the gateway from the graph.",
    )
    parser.add_argument("--version", action="version", version=f"overtime {__version__}")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- check ---
    check_parser = subparsers.add_parser("check", help="Parse and validate a schema file")
    check_parser.add_argument("schema_file", type=str, help="Path to schema file")

    # --- dump ---
    dump_parser = subparsers.add_parser("dump", help="Write the parsed graph as JSON")
    dump_parser.add_argument("schema_file", type=str, help="Path to schema file")
    dump_parser.add_argument(
        "--output", "-o", type=str, default=None, help="Output path (default: stdout)"
    )

    # --- names ---
    names_parser = subparsers.add_parser(
        "names", help="Show derived endpoint names and expected resolver methods"
    )
    names_parser.add_argument("schema_file", type=str, help="Path to schema file")

    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_config().log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load(schema_file: str) -> ParseResult | None:
    """Parse a schema file, printing the error to stderr on failure."""
    from overtime.dsl.parser import parse_file

    schema_path = Path(schema_file)
    if not schema_path.exists():
        print(f"Error: Schema file not found: {schema_path}", file=sys.stderr)
        return None

    logger.info("Parsing %s", schema_path)
    try:
        result = parse_file(schema_path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {schema_path.name}: {exc}", file=sys.stderr)
        return None
    if not result.ok:
        print(f"Error: {schema_path.name}: {result.error}", file=sys.stderr)
        return None
    return result


def cmd_check(args: argparse.Namespace) -> int:
    """Parse and validate a schema file."""
    result = _load(args.schema_file)
    if result is None:
        return 1

    graph = result.unwrap()
    print(f"{Path(args.schema_file).name}: {len(graph.types)} types, {len(graph.endpoints)} endpoints")
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    """Serialize the parsed graph to JSON."""
    from overtime.compiler.serializer import serialize_to_json

    result = _load(args.schema_file)
    if result is None:
        return 1

    output = serialize_to_json(result.unwrap())
    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        print(f"Written to: {args.output}")
    else:
        print(output)
    return 0


def cmd_names(args: argparse.Namespace) -> int:
    """Print derived endpoint names and the resolver methods a generator needs."""
    from overtime.compiler.resolver import ResolverConventions

    result = _load(args.schema_file)
    if result is None:
        return 1

    graph = result.unwrap()
    conventions = ResolverConventions(get_config().builtin_types)

    print("Endpoints:")
    for endpoint in graph.endpoints.values():
        print(f"  {endpoint.method:<7} {endpoint.path}")
        print(f"          name: {endpoint.name} | api name: {endpoint.api_name}")

    methods = conventions.resolver_methods(graph)
    print("Resolvers:")
    if not methods:
        print("  (none)")
    for method in methods.values():
        print(f"  {method.name} -> {method.type_name}.{method.field_name}")

    return 0


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    dispatch = {
        "check": cmd_check,
        "dump": cmd_dump,
        "names": cmd_names,
    }

    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
