"""Main CLI entry point for the component audit."""

import argparse

from src.cli.commands.audit import audit_command
from src.cli.commands.classify import classify_command
from src.cli.config import Config
from src.utils.logging_config import setup_logging


def _add_common_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("schema", help="OpenAPI document (.json, .yaml or .yml)")
    parser.add_argument("--config", help="Path to .env configuration file", default=None)
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information",
    )


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="component-audit",
        description="Component Audit - find unused OpenAPI components",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Audit command
    audit_parser = subparsers.add_parser("audit", help="Report components never referenced from the paths")
    _add_common_arguments(audit_parser)

    # Classify command
    classify_parser = subparsers.add_parser("classify", help="Show simple and complex components")
    _add_common_arguments(classify_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging(verbose=args.verbose)

    # Load configuration
    config = Config(args.config)

    # Execute command
    if args.command == "audit":
        audit_command(config=config, schema=args.schema, as_json=args.json)
    elif args.command == "classify":
        classify_command(config=config, schema=args.schema, as_json=args.json)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
