"""sprig CLI — serve a content root, or inspect its route table.

Entry point registered as ``sprig`` in ``pyproject.toml``::

    [project.scripts]
    sprig = "sprig.cli:main"
"""

import argparse
import sys


def _add_content_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--root", default=None, help="Content root directory")
    parser.add_argument("--routes", default=None, help="Route table JSON file")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``sprig`` command."""
    parser = argparse.ArgumentParser(
        prog="sprig",
        description="sprig — serve a directory of HTML pages.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- sprig run --------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the server")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    _add_content_args(run_parser)
    run_parser.add_argument(
        "--not-found-page",
        default=None,
        help="Custom 404 page, relative to the content root",
    )
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect)",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error", "critical"),
        help="Log level",
    )
    run_parser.add_argument(
        "--log-format",
        default=None,
        choices=("json", "text"),
        help="Log output format",
    )

    # -- sprig routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List configured routes")
    _add_content_args(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from sprig.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from sprig.cli._routes import run_routes

        run_routes(args)
