"""``sprig run`` — start the server."""

import argparse
import sys

from sprig.app import App
from sprig.cli._config import config_from_args
from sprig.errors import ConfigurationError


def run_server(args: argparse.Namespace) -> None:
    """Build the App from CLI flags and serve it.

    Exits with status 1 and a message on stderr when the resulting
    configuration is invalid.
    """
    app = App(config_from_args(args))
    try:
        app.run()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
