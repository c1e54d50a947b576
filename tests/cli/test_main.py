"""Tests for main CLI entry point.

Tests the main CLI group, lazy command loading and the exit-code policy.
"""

from unittest import mock

import click
import pytest
from click.testing import CliRunner

from goscaffold.cli.main import (
    FAILURE_EXIT_CODE,
    INTERRUPT_EXIT_CODE,
    USAGE_EXIT_CODE,
    LazyGroup,
    cli,
    main,
)


@pytest.fixture
def runner():
    """Provide a Click CLI runner for testing."""
    return CliRunner()


class TestLazyGroup:
    """Test the LazyGroup command loading mechanism."""

    def test_get_command_imports_module(self):
        group = LazyGroup(name="test")
        ctx = mock.Mock()

        with mock.patch("importlib.import_module") as mock_import:
            mock_module = mock.Mock()
            mock_import.return_value = mock_module

            cmd = group.get_command(ctx, "create")

            mock_import.assert_called_once_with("goscaffold.cli.create_cmd")
            assert cmd is mock_module.create

    def test_get_command_returns_none_for_invalid_command(self):
        group = LazyGroup(name="test")

        assert group.get_command(mock.Mock(), "nonexistent_command") is None

    def test_list_commands(self):
        group = LazyGroup(name="test")

        assert group.list_commands(mock.Mock()) == ["create", "components"]

    def test_real_commands_load(self):
        group = LazyGroup(name="test")

        for name in group.list_commands(mock.Mock()):
            assert isinstance(group.get_command(mock.Mock(), name), click.Command)


class TestCliGroup:
    """Test the main CLI group."""

    def test_cli_group_help(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "goscaffold" in result.output.lower()
        assert "create" in result.output

    def test_cli_version_option(self, runner):
        from goscaffold import __version__

        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_subcommand_prints_usage(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == USAGE_EXIT_CODE
        assert "Usage:" in result.output
        assert "create" in result.output

    def test_unknown_subcommand(self, runner):
        result = runner.invoke(cli, ["destroy"])

        assert result.exit_code == USAGE_EXIT_CODE

    def test_unknown_group_option(self, runner):
        result = runner.invoke(cli, ["--bogus"])

        assert result.exit_code == USAGE_EXIT_CODE

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yml"), "components"])

        assert result.exit_code == USAGE_EXIT_CODE
        assert "not found" in result.output

    @mock.patch("goscaffold.cli.styles.initialize_theme_from_config")
    def test_cli_initializes_theme(self, mock_init_theme, runner):
        runner.invoke(cli, ["components"])

        assert mock_init_theme.called

    def test_cli_subcommand_help(self, runner):
        result = runner.invoke(cli, ["create", "--help"])

        assert result.exit_code == 0
        assert "--module" in result.output
        assert "--with" in result.output


class TestMainFunction:
    """Test the main entry point function."""

    @mock.patch("goscaffold.cli.main.cli")
    def test_main_calls_cli(self, mock_cli):
        mock_cli.return_value = None

        main()

        mock_cli.assert_called_once_with(prog_name="goscaffold", standalone_mode=False)

    def test_main_interrupt_during_generation(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.argv", ["goscaffold", "create", "demo", "--module=m"])
        monkeypatch.setattr(
            "goscaffold.cli.templates.TemplateManager.create_project",
            mock.Mock(side_effect=KeyboardInterrupt()),
        )

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == INTERRUPT_EXIT_CODE

    @mock.patch("goscaffold.cli.main.cli")
    @mock.patch("click.echo")
    def test_main_handles_general_exception(self, mock_echo, mock_cli):
        mock_cli.side_effect = Exception("Test error")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == FAILURE_EXIT_CODE
        mock_echo.assert_called_with("Error: Test error", err=True)

    def test_main_usage_error_exit_code(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setattr("sys.argv", ["goscaffold", "create", "demo"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == USAGE_EXIT_CODE
        assert "--module" in capsys.readouterr().err
        assert not (tmp_path / "cwd" / "demo").exists()

    def test_main_missing_subcommand(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["goscaffold"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == USAGE_EXIT_CODE

    def test_main_generation_failure(self, monkeypatch, tmp_path):
        (tmp_path / "cwd" / "demo").mkdir()
        (tmp_path / "cwd" / "demo" / "Dockerfile").write_text("mine")
        monkeypatch.setattr("sys.argv", ["goscaffold", "create", "demo", "--module=m"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == FAILURE_EXIT_CODE
        assert (tmp_path / "cwd" / "demo" / "Dockerfile").read_text() == "mine"

    def test_main_success_returns_normally(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.argv", ["goscaffold", "create", "demo", "--module=m"])

        main()

        assert (tmp_path / "cwd" / "demo" / "go.mod").exists()

    def test_main_version_exits_zero(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["goscaffold", "--version"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
