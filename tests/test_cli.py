"""Tests for linkroute.cli: CLI entrypoint, ``routes`` and ``match`` commands."""

import sys
import types

import pytest

from linkroute.cli import main
from linkroute.routing.table import RouteTable


class ProfileScreen:
    pass


def open_profile(params: dict) -> None:
    pass


@pytest.fixture
def _fake_links_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module holding a populated RouteTable."""
    table = RouteTable()
    table.register_type("/user/:id", ProfileScreen)
    table.register_callback("/user/:id", open_profile)
    table.register_callback("/about", open_profile)

    mod = types.ModuleType("_fake_links")
    mod.table = table  # type: ignore[attr-defined]
    mod.empty = RouteTable()  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_links", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_match_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_table(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_match_missing_url(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_links"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "linkroute" in captured.out


@pytest.mark.usefixtures("_fake_links_module")
class TestRoutesCommand:
    def test_lists_patterns(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_links"])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].split() == ["PATTERN", "TYPE", "CALLBACK"]
        assert lines[2].split() == ["/user/:id", "ProfileScreen", "open_profile"]
        assert lines[3].split() == ["/about", "-", "open_profile"]

    def test_empty_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_links:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_bad_import_string(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_links:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_reference(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_links:a:b"])
        assert exc_info.value.code == 1
        assert "Invalid table reference" in capsys.readouterr().err


@pytest.mark.usefixtures("_fake_links_module")
class TestMatchCommand:
    def test_type_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "_fake_links", "app://host/user/42?tab=posts#bio"])
        out = capsys.readouterr().out

        assert out.splitlines()[0] == "type: ProfileScreen"
        assert "id" in out
        assert "42" in out
        assert "posts" in out
        assert "bio" in out

    def test_callback_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "_fake_links", "/about", "--callback"])
        assert capsys.readouterr().out.startswith("callback: open_profile")

    def test_no_route(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_links", "/nowhere"])
        assert exc_info.value.code == 1
        assert "No route matches '/nowhere'" in capsys.readouterr().err

    def test_empty_slot(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_links", "/about"])
        assert exc_info.value.code == 1
        assert "No type registered for '/about'" in capsys.readouterr().err
