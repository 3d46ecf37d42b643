"""Tests for the tab command line."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import tab_tint.cli as cli_module
from tab_tint.cli import app
from tab_tint.colors import RGBColor
from tab_tint.config import TabTintConfig
from tab_tint.controller import TabController

runner = CliRunner()


@pytest.fixture
def controller(monkeypatch, terminal) -> TabController:
    controller = TabController(terminal=terminal, config=TabTintConfig())
    monkeypatch.setattr("tab_tint.cli.main_cmd.build_controller", lambda: controller)
    monkeypatch.setattr("tab_tint.cli.admin.build_controller", lambda: controller)
    return controller


def test_set_title_and_color(controller, terminal):
    result = runner.invoke(app, ["main", "Build", "red"])

    assert result.exit_code == 0
    assert terminal.window_title == "Build"
    assert terminal.colors == [RGBColor(0xE7, 0x4C, 0x3C)]
    assert "Build" in result.output
    assert "#E74C3C" in result.output


def test_directive_argument(controller, terminal):
    result = runner.invoke(app, ["main", "Fix login|bug"])

    assert result.exit_code == 0
    assert terminal.window_title == "Fix login"
    assert terminal.colors == [RGBColor(0xC0, 0x39, 0x2B)]


def test_no_arguments_prints_usage(controller, terminal):
    result = runner.invoke(app, ["main"])

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "research" in result.output
    assert terminal.colors == []
    assert terminal.window_title == "pwsh"


def test_reset(controller, terminal):
    terminal.profile_name = "Ubuntu"
    result = runner.invoke(app, ["main", "--reset"])

    assert result.exit_code == 0
    assert terminal.window_title == "Ubuntu"
    assert terminal.colors == [RGBColor(0x33, 0x33, 0x33)]


def test_reset_with_color(controller, terminal):
    result = runner.invoke(app, ["main", "--reset", "blue"])

    assert result.exit_code == 0
    assert terminal.window_title == "pwsh"
    assert terminal.colors == [RGBColor(0x34, 0x98, 0xDB)]


def test_reset_rejects_extra_argument(controller, terminal):
    result = runner.invoke(app, ["main", "--reset", "blue", "red"])

    assert result.exit_code == 1
    assert "Unexpected argument 'red'" in result.output
    assert terminal.colors == []
    assert terminal.window_title == "pwsh"


def test_set_then_reset_restores_original_title(controller, terminal):
    runner.invoke(app, ["main", "Build", "red"])
    result = runner.invoke(app, ["main", "--reset"])

    assert result.exit_code == 0
    assert terminal.window_title == "pwsh"


def test_invalid_color_exits_one(controller, terminal):
    result = runner.invoke(app, ["main", "Build", "nope"])

    assert result.exit_code == 1
    assert "Invalid color 'nope'" in result.output
    assert terminal.colors == []


def test_missing_palette_file_exits_one(monkeypatch, tmp_path):
    monkeypatch.setenv("TAB_TINT_CONFIG", str(tmp_path / "missing.yaml"))
    result = runner.invoke(app, ["main", "Build"])

    assert result.exit_code == 1
    assert "Palette file not found" in result.output


def test_info_command(controller, terminal):
    terminal.profile_name = "Ubuntu"
    terminal.session_id = "sess-1"

    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "Spawn title" in result.output
    assert "Ubuntu" in result.output
    assert "sess-1" in result.output


def test_colors_command(controller):
    result = runner.invoke(app, ["colors"])

    assert result.exit_code == 0
    assert "devops" in result.output
    assert "#16A085" in result.output


def test_version_flag(controller):
    result = runner.invoke(app, ["main", "--version"])

    assert result.exit_code == 0
    assert "tab-tint" in result.output


class TestEntrypointRouting:
    @pytest.fixture
    def calls(self, monkeypatch):
        recorded: list[list[str]] = []
        monkeypatch.setattr(
            cli_module, "app", lambda args, prog_name: recorded.append(list(args))
        )
        return recorded

    def test_bare_title_routes_to_main(self, monkeypatch, calls):
        monkeypatch.setattr("sys.argv", ["tab", "Build", "red"])
        cli_module.cli()
        assert calls == [["main", "Build", "red"]]

    def test_reset_routes_to_main(self, monkeypatch, calls):
        monkeypatch.setattr("sys.argv", ["tab", "--reset"])
        cli_module.cli()
        assert calls == [["main", "--reset"]]

    def test_no_arguments_routes_to_main(self, monkeypatch, calls):
        monkeypatch.setattr("sys.argv", ["tab"])
        cli_module.cli()
        assert calls == [["main"]]

    def test_subcommand_passes_through(self, monkeypatch, calls):
        monkeypatch.setattr("sys.argv", ["tab", "info"])
        cli_module.cli()
        assert calls == [["info"]]
