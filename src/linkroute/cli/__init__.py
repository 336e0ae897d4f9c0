"""linkroute CLI: inspect route tables and resolve URLs from the shell.

Entry point registered as ``linkroute`` in ``pyproject.toml``::

    [project.scripts]
    linkroute = "linkroute.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``linkroute`` command."""
    parser = argparse.ArgumentParser(
        prog="linkroute",
        description="linkroute: deep-link routing for registered URL patterns.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and lookup details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- linkroute routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered patterns")
    routes_parser.add_argument(
        "table",
        help="Table reference: module[:attribute], attribute defaults to 'table'",
    )

    # -- linkroute match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a URL against a table")
    match_parser.add_argument(
        "table",
        help="Table reference: module[:attribute], attribute defaults to 'table'",
    )
    match_parser.add_argument("url", help="URL or path to resolve")
    match_parser.add_argument(
        "--callback",
        action="store_true",
        help="Resolve the callback slot instead of the type slot",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from linkroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from linkroute.cli._match import run_match

        run_match(args)
