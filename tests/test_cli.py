"""CLI tests with the backend and the TUI patched out."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from errdex.exceptions import ConfigurationError, RepositoryConnectionError
from errdex.main import app

runner = CliRunner()


@pytest.fixture
def cli_env(settings):
    """Patch logging, config loading and the repository for CLI runs."""
    loggers = (logging.getLogger("errdex"), logging.getLogger("key_events"))
    with patch("errdex.main.setup_tui_logging", return_value=loggers) as mock_logging, patch(
        "errdex.main.load_env_files"
    ), patch("errdex.main.load_settings", return_value=settings) as mock_settings, patch(
        "errdex.main.ReportRepository"
    ) as mock_repository:
        yield {
            "logging": mock_logging,
            "settings": mock_settings,
            "repository": mock_repository,
        }


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "--init-index" in result.stdout
        assert "--log-file" in result.stdout

    def test_cli_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "errdex version 0.1.0" in result.stdout


class TestInitIndex:
    def test_success(self, cli_env, settings):
        result = runner.invoke(app, ["--init-index"])

        assert result.exit_code == 0
        assert "Index initialized successfully!" in result.stdout
        cli_env["repository"].assert_called_once_with(settings)
        cli_env["repository"].return_value.ensure_index_configured.assert_called_once()

    def test_failure_exits_with_error(self, cli_env):
        repository = cli_env["repository"].return_value
        repository.ensure_index_configured.side_effect = RepositoryConnectionError(
            "Failed to update searchable attributes"
        )

        with patch("errdex.ui.app.run_tui") as mock_run_tui:
            result = runner.invoke(app, ["--init-index"])

        assert result.exit_code == 1
        mock_run_tui.assert_not_called()


class TestRunTui:
    def test_runs_tui_with_repository(self, cli_env):
        with patch("errdex.ui.app.run_tui") as mock_run_tui:
            result = runner.invoke(app, [])

        assert result.exit_code == 0
        mock_run_tui.assert_called_once_with(cli_env["repository"].return_value)

    def test_debug_and_log_file_are_passed_to_logging(self, cli_env, tmp_path):
        log_file = tmp_path / "errdex.log"
        with patch("errdex.ui.app.run_tui"):
            runner.invoke(app, ["--debug", "--log-file", str(log_file)])

        cli_env["logging"].assert_called_once_with(debug=True, log_file=Path(log_file))

    def test_tui_crash_exits_with_error(self, cli_env):
        with patch("errdex.ui.app.run_tui", side_effect=RuntimeError("terminal gone")):
            result = runner.invoke(app, [])

        assert result.exit_code == 1

    def test_keyboard_interrupt_exits_cleanly(self, cli_env):
        with patch("errdex.ui.app.run_tui", side_effect=KeyboardInterrupt):
            result = runner.invoke(app, [])

        assert result.exit_code == 0


class TestConfiguration:
    def test_invalid_configuration_exits_before_backend(self, cli_env):
        cli_env["settings"].side_effect = ConfigurationError(
            "Task timeout must be positive", setting="ERRDEX_TASK_TIMEOUT_MS"
        )

        result = runner.invoke(app, ["--init-index"])

        assert result.exit_code == 1
        cli_env["repository"].assert_not_called()

    def test_show_config_lists_variables(self, cli_env):
        result = runner.invoke(app, ["--show-config"])

        assert result.exit_code == 0
        assert "MEILISEARCH_URL" in result.stdout
        assert "MEILISEARCH_INDEX" in result.stdout
        cli_env["repository"].assert_not_called()
