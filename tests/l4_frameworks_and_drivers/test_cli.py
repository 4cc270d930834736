"""Tests for CLI entry point -- patches deferred imports at source module level."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from draft_zero import __version__
from draft_zero.l2_use_cases.ports.path_memory import LAST_FILE_KEY
from draft_zero.l4_frameworks_and_drivers.cli import cli

# Patch targets at SOURCE module level (not cli module) because cli() uses
# deferred `from X import Y` which creates local bindings that bypass
# module-level attribute patches.
_APP = 'draft_zero.l4_frameworks_and_drivers.app.App'
_CONTAINER = 'draft_zero.l4_frameworks_and_drivers.container.DependencyContainer'


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / 'cfg.yaml'
    path.write_text(body, encoding='utf-8')
    return path


class TestCliBasics:
    def test_version(self):
        result = CliRunner().invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_options(self):
        result = CliRunner().invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert '--forget' in result.output
        assert '--corrections' in result.output

    def test_missing_config_file_is_usage_error(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ['-c', str(tmp_path / 'nope.yaml')])
        assert result.exit_code == 2

    def test_invalid_config_exits_1(self, tmp_path: Path):
        cfg = _write_config(tmp_path, 'autosave:\n  keystroke_threshold: 0\n')
        with patch(_APP) as mock_app:
            result = CliRunner().invoke(cli, ['-c', str(cfg)])
        assert result.exit_code == 1
        assert 'invalid configuration' in result.output
        mock_app.assert_not_called()


class TestCliLaunch:
    def test_runs_app_with_loaded_config(self, sample_config_yaml: Path):
        with patch(_APP) as mock_app, patch(_CONTAINER) as mock_container:
            result = CliRunner().invoke(cli, ['-c', str(sample_config_yaml)])

        assert result.exit_code == 0, result.output
        config = mock_app.call_args.kwargs['config']
        assert config.autosave.interval == 30.0
        assert config.prompt.default_name == 'novel.md'
        assert mock_app.call_args.kwargs['controller'] is mock_container.return_value.controller
        mock_app.return_value.run.assert_called_once()

    def test_corrections_flag_overrides_config(self, tmp_path: Path):
        cfg = _write_config(tmp_path, 'editor:\n  allow_corrections: false\n')
        with patch(_APP) as mock_app, patch(_CONTAINER):
            result = CliRunner().invoke(cli, ['-c', str(cfg), '--corrections'])

        assert result.exit_code == 0, result.output
        assert mock_app.call_args.kwargs['config'].editor.allow_corrections is True

    def test_forget_clears_remembered_path(self, tmp_path: Path):
        cfg = _write_config(tmp_path, '{}\n')
        container = MagicMock()
        with patch(_APP), patch(_CONTAINER, return_value=container):
            result = CliRunner().invoke(cli, ['-c', str(cfg), '--forget'])

        assert result.exit_code == 0, result.output
        container.path_memory.clear.assert_called_once_with(LAST_FILE_KEY)

    def test_without_forget_memory_untouched(self, tmp_path: Path):
        cfg = _write_config(tmp_path, '{}\n')
        container = MagicMock()
        with patch(_APP), patch(_CONTAINER, return_value=container):
            CliRunner().invoke(cli, ['-c', str(cfg)])

        container.path_memory.clear.assert_not_called()
