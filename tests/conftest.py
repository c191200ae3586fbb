"""Shared fixtures: a temporary content root and route file."""

import json
import logging
from pathlib import Path

import pytest

from sprig.app import App
from sprig.config import AppConfig


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Empty content root; tests add the pages they need."""
    root = tmp_path / "html"
    root.mkdir()
    return root


@pytest.fixture
def routes_file(tmp_path: Path) -> Path:
    """Location of the route file. Not created until a test writes it."""
    conf = tmp_path / "conf"
    conf.mkdir()
    return conf / "routes.json"


@pytest.fixture
def write_routes(routes_file: Path):
    """Write a mapping to the route file as JSON."""

    def _write(mapping: dict[str, object]) -> Path:
        routes_file.write_text(json.dumps(mapping), encoding="utf-8")
        return routes_file

    return _write


@pytest.fixture
def make_app(content_root: Path, routes_file: Path):
    """Build an App pointed at the temporary root and route file."""

    def _make(**overrides: object) -> App:
        config = AppConfig(content_root=content_root, routes_file=routes_file, **overrides)
        return App(config)

    return _make


@pytest.fixture(autouse=True)
def _reset_sprig_logger():
    """Undo any handler or level ``configure_logging`` installed."""
    logger = logging.getLogger("sprig")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
