"""Build an AppConfig from CLI flags — unset flags keep the defaults."""

import argparse
from dataclasses import replace

from sprig.config import AppConfig

# argparse dest → AppConfig field
_FLAG_FIELDS = {
    "host": "host",
    "port": "port",
    "root": "content_root",
    "routes": "routes_file",
    "not_found_page": "not_found_page",
    "workers": "workers",
    "log_level": "log_level",
    "log_format": "log_format",
}


def config_from_args(args: argparse.Namespace, base: AppConfig | None = None) -> AppConfig:
    """Overlay the flags that were given onto *base* (or the defaults)."""
    overrides = {
        field: getattr(args, dest)
        for dest, field in _FLAG_FIELDS.items()
        if getattr(args, dest, None) is not None
    }
    return replace(base or AppConfig(), **overrides)
