"""satchel CLI: inspect a configured container.

Usage:
    satchel describe                      # config from $SATCHEL_CONFIG or ~/.satchel.yaml
    satchel describe -c app.yaml --json   # JSON listing
    satchel describe --raw                # stored values, nothing resolved
    satchel version
"""

import argparse
import json
import logging
import sys

from . import __version__
from .config import ContainerConfig
from .container import Container
from .diagnostics import describe, format_entries

logger = logging.getLogger(__name__)


def cmd_describe(args: argparse.Namespace) -> int:
    """Print every entry of the container built from config."""
    if args.config:
        config = ContainerConfig.from_file(args.config)
    else:
        config = ContainerConfig.from_env()

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"❌ {error}", file=sys.stderr)
        return 1

    container = Container.from_config(config)
    logger.info(f"Loaded {len(container)} entries")
    entries = describe(container, resolve=not args.raw)

    if args.json:
        print(json.dumps(
            [{"key": e.key, "kind": e.kind, "value": e.value} for e in entries],
            indent=2,
            default=repr,
        ))
    else:
        print(format_entries(entries))
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Print the library version."""
    print(__version__)
    return 0


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="satchel",
        description="satchel: a small dependency injection container",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # describe
    describe_parser = subparsers.add_parser(
        "describe", help="List entries of a configured container"
    )
    describe_parser.add_argument("--config", "-c", type=str, default=None,
                                 help="YAML config file (default: $SATCHEL_CONFIG)")
    describe_parser.add_argument("--json", action="store_true",
                                 help="Print the listing as JSON")
    describe_parser.add_argument("--raw", action="store_true",
                                 help="Show stored values without resolving them")
    describe_parser.add_argument("--log-level", type=str, default="warning",
                                 choices=["debug", "info", "warning", "error"])

    # version
    subparsers.add_parser("version", help="Print the version")

    args = parser.parse_args()

    # Logs go to stderr so listings on stdout stay parseable
    logging.basicConfig(
        level=getattr(logging, getattr(args, "log_level", "warning").upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "describe":
        sys.exit(cmd_describe(args))
    elif args.command == "version":
        sys.exit(cmd_version(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
