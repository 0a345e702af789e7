"""intlroute CLI — configuration validation and routing previews.

Entry point registered as ``intlroute`` in ``pyproject.toml``::

    [project.scripts]
    intlroute = "intlroute.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``intlroute`` command."""
    parser = argparse.ArgumentParser(
        prog="intlroute",
        description="intlroute — locale detection and i18n routing for ASGI apps.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- intlroute check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a routing configuration")
    check_parser.add_argument(
        "target",
        help="TOML file or import string (e.g. myapp.i18n:routing)",
    )

    # -- intlroute resolve ------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Show how a request would be routed"
    )
    resolve_parser.add_argument(
        "target",
        help="TOML file or import string (e.g. myapp.i18n:routing)",
    )
    resolve_parser.add_argument("path", help="Request path, optionally with a query string")
    resolve_parser.add_argument("--host", default="localhost", help="Request host")
    resolve_parser.add_argument(
        "--accept-language",
        default=None,
        help="Accept-Language header value",
    )
    resolve_parser.add_argument("--cookie", default=None, help="Existing locale cookie value")
    resolve_parser.add_argument(
        "--scheme",
        default="https",
        choices=("http", "https"),
        help="Request scheme used for absolute URLs",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from intlroute.cli._check import run_check

        run_check(args)
    elif args.command == "resolve":
        from intlroute.cli._explain import run_explain

        run_explain(args)
