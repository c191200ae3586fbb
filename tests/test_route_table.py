"""Tests for sprig.routing.table — loading the route file."""

import logging
from pathlib import Path

import pytest

from sprig.routing.table import RouteTable, load_route_table


class TestLoadRouteTable:
    def test_missing_file_gives_empty_table(self, content_root: Path, routes_file: Path) -> None:
        table = load_route_table(routes_file, content_root)

        assert len(table) == 0
        assert table.lookup("/about") is None

    def test_values_are_joined_onto_root(self, content_root: Path, write_routes) -> None:
        path = write_routes({"/about": "about-us.html", "/team": "people/team.html"})

        table = load_route_table(path, content_root)

        root = content_root.resolve()
        assert table["/about"] == root / "about-us.html"
        assert table["/team"] == root / "people" / "team.html"

    def test_targets_need_not_exist(self, content_root: Path, write_routes) -> None:
        path = write_routes({"/ghost": "ghost.html"})

        table = load_route_table(path, content_root)

        assert "/ghost" in table
        assert not table["/ghost"].exists()

    def test_malformed_json_gives_empty_table(
        self, content_root: Path, routes_file: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        routes_file.write_text('{"/about": ', encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="sprig.routing"):
            table = load_route_table(routes_file, content_root)

        assert len(table) == 0
        [record] = caplog.records
        assert record.event == "config_parse_error"
        assert "invalid JSON" in record.error

    def test_non_object_gives_empty_table(
        self, content_root: Path, routes_file: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        routes_file.write_text('["/about", "about.html"]', encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="sprig.routing"):
            table = load_route_table(routes_file, content_root)

        assert len(table) == 0
        assert caplog.records[0].event == "config_parse_error"

    def test_non_string_values_are_skipped(
        self, content_root: Path, write_routes, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = write_routes({"/about": "about.html", "/bad": 42, "/empty": "", "nope": "x.html"})

        with caplog.at_level(logging.WARNING, logger="sprig.routing"):
            table = load_route_table(path, content_root)

        assert list(table) == ["/about"]
        skipped = {r.route for r in caplog.records if r.event == "route_skipped"}
        assert skipped == {"/bad", "/empty", "nope"}

    def test_last_duplicate_key_wins(self, content_root: Path, routes_file: Path) -> None:
        routes_file.write_text(
            '{"/about": "first.html", "/about": "second.html"}', encoding="utf-8"
        )

        table = load_route_table(routes_file, content_root)

        assert table["/about"] == content_root.resolve() / "second.html"

    def test_entries_escaping_root_are_skipped(self, content_root: Path, write_routes) -> None:
        path = write_routes({"/secret": "../conf/routes.json", "/ok": "ok.html"})

        table = load_route_table(path, content_root)

        assert list(table) == ["/ok"]

    def test_deeply_nested_json_gives_empty_table(
        self, content_root: Path, routes_file: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        routes_file.write_text("[" * 100_000, encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="sprig.routing"):
            table = load_route_table(routes_file, content_root)

        assert len(table) == 0
        assert caplog.records[0].event == "config_parse_error"

    def test_unresolvable_targets_are_skipped(
        self, content_root: Path, write_routes, caplog: pytest.LogCaptureFixture
    ) -> None:
        (content_root / "loop.html").symlink_to(content_root / "loop.html")
        path = write_routes({"/nul": "a\u0000b.html", "/loop": "loop.html", "/ok": "ok.html"})

        with caplog.at_level(logging.WARNING, logger="sprig.routing"):
            table = load_route_table(path, content_root)

        assert "/ok" in table
        assert "/nul" not in table
        skipped = {r.route for r in caplog.records if r.event == "route_skipped"}
        assert "/nul" in skipped

    def test_logs_loaded_count(
        self, content_root: Path, write_routes, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = write_routes({"/a": "a.html", "/b": "b.html"})

        with caplog.at_level(logging.INFO, logger="sprig.routing"):
            load_route_table(path, content_root)

        [record] = [r for r in caplog.records if getattr(r, "event", None) == "routes_loaded"]
        assert record.count == 2


class TestRouteTable:
    def test_is_read_only(self, content_root: Path) -> None:
        table = RouteTable.from_mapping({"/a": "a.html"}, content_root)

        with pytest.raises(TypeError):
            table["/b"] = content_root / "b.html"  # type: ignore[index]

    def test_source_mapping_changes_do_not_leak(self, content_root: Path) -> None:
        source = {"/a": "a.html"}
        table = RouteTable.from_mapping(source, content_root)

        source["/b"] = "b.html"

        assert "/b" not in table

    def test_preserves_insertion_order(self, content_root: Path) -> None:
        table = RouteTable.from_mapping({"/z": "z.html", "/a": "a.html"}, content_root)
        assert list(table) == ["/z", "/a"]
