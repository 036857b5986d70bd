"""
Command line front-end.

Reads controller metadata produced by discovery, runs the generator and
prints the rendered C# (or writes it to ``--output``).
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .codegen import GeneratorService, load_controllers
from .utils.config import load_settings
from .utils.exceptions import R4GenError
from .utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="r4gen",
        description="Generate strongly-typed MVC helper classes from controller metadata",
    )
    parser.add_argument("--controllers", "-c", required=True,
                        help="JSON or YAML file with controller metadata")
    parser.add_argument("--config", help="Settings file (defaults to ./r4mvc.json)")
    parser.add_argument("--output", "-o", help="Write generated code to this file instead of stdout")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def run(args: argparse.Namespace) -> str:
    """Run one generation pass and return the rendered source."""
    settings = load_settings(args.config)
    controllers = load_controllers(args.controllers)

    service = GeneratorService(settings)
    source = service.generate_source(controllers)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(source, encoding="utf-8")
        logger.info(f"Wrote generated code to {output_path}")
    return source


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the r4gen command."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level or "WARNING")

    try:
        source = run(args)
    except R4GenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.output:
        sys.stdout.write(source)
    return 0


if __name__ == '__main__':
    sys.exit(main())
