"""``sprig routes`` — list configured routes.

Loads the route table the server would use and prints each request
path with its target file and whether that file exists right now.
"""

import argparse

from sprig.cli._config import config_from_args
from sprig.routing.table import load_route_table


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATH, FILE, and EXISTS for the route file."""
    config = config_from_args(args)
    table = load_route_table(config.routes_file, config.content_root)

    if not table:
        print("No routes configured.")
        return

    rows: list[tuple[str, str, str]] = [
        (path, str(target), "yes" if target.is_file() else "no") for path, target in table.items()
    ]

    # Column widths
    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_file = max(max(len(r[1]) for r in rows), 4)  # "FILE" header

    fmt = f"{{:<{max_path}}}  {{:<{max_file}}}  {{}}"
    print(fmt.format("PATH", "FILE", "EXISTS"))
    print("-" * min(max_path + max_file + 10, 80))
    for path, target, exists in rows:
        print(fmt.format(path, target, exists))
