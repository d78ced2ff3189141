"""
Tests for CLI commands.

Feature Test: wirebox CLI command structure
Story Test: Binding inspection commands (info, boot)
"""

import json

import pytest
from click.testing import CliRunner

from cli.main import cli
from cli import __version__
from cli.commands.targets import load_module
from wirebox.exceptions import ConfigurationError


class TestCLIBasics:
    """Test basic CLI functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_cli_help(self):
        """Test: wirebox --help returns valid output."""
        result = self.runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'wirebox' in result.output
        assert 'info' in result.output
        assert 'boot' in result.output

    def test_cli_version(self):
        """Test: wirebox --version returns correct version."""
        result = self.runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_cli_no_command(self):
        """Test: wirebox with no command shows help."""
        result = self.runner.invoke(cli, [])
        assert result.exit_code == 0
        assert 'Usage:' in result.output


class TestInfoCommand:
    """Test info command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_info_lists_bindings(self):
        """Test: wirebox info prints declared bindings without instances."""
        result = self.runner.invoke(cli, ['info', 'cli_targets:BootModule'])
        assert result.exit_code == 0
        assert 'Begin Named Bindings' in result.output
        assert 'wall -> Clock, scope: SINGLETON, instance: ' in result.output
        assert 'IGreeter -> Greeter, scope: EAGER_SINGLETON, instance: \n' in result.output
        assert '2 binding(s)' in result.output

    def test_info_alias(self):
        """Test: wirebox ls is an alias for info."""
        result = self.runner.invoke(cli, ['ls', 'cli_targets:BootModule'])
        assert result.exit_code == 0
        assert 'IGreeter -> Greeter' in result.output

    def test_info_requires_target(self):
        """Test: wirebox info without targets fails."""
        result = self.runner.invoke(cli, ['info'])
        assert result.exit_code != 0

    def test_info_configuration_error(self):
        """Test: module configure() failure exits with 1."""
        result = self.runner.invoke(cli, ['info', 'cli_targets:BrokenModule'])
        assert result.exit_code == 1
        assert 'cannot configure' in result.output


class TestBootCommand:
    """Test boot command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_boot_constructs_eager_singletons(self):
        """Test: wirebox boot shows eager singleton instances."""
        result = self.runner.invoke(cli, ['boot', 'cli_targets:BootModule'])
        assert result.exit_code == 0
        assert 'IGreeter -> Greeter, scope: EAGER_SINGLETON, instance: Greeter()' in result.output
        assert 'wall -> Clock, scope: SINGLETON, instance: \n' in result.output

    def test_boot_import_error(self):
        """Test: unknown module exits with 1."""
        result = self.runner.invoke(cli, ['boot', 'no_such_package.boot:BootModule'])
        assert result.exit_code == 1
        assert 'Cannot import' in result.output

    def test_boot_continues_after_eager_failure(self):
        """Test: eager singleton failure is logged, boot still succeeds."""
        result = self.runner.invoke(cli, ['boot', 'cli_targets:ExplodingModule'])
        assert result.exit_code == 0
        assert 'Exploding -> Exploding' in result.output


class TestLoadModule:
    """Test module target loading."""

    def test_load_module(self):
        from cli_targets import BootModule
        assert isinstance(load_module('cli_targets:BootModule'), BootModule)

    @pytest.mark.parametrize('target', [
        'cli_targets',
        ':BootModule',
        'cli_targets:',
        'cli_targets:Missing',
        'cli_targets:NOT_A_MODULE',
    ])
    def test_invalid_targets(self, target):
        with pytest.raises(ConfigurationError) as exc_info:
            load_module(target)
        assert exc_info.value.setting == 'target'


class TestSettingsFromEnvironment:
    """Test validated WIREBOX_* settings driving the CLI."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def _read_log(self, path):
        from wirebox.logging import LogManager
        for handler in LogManager().handlers.values():
            handler.flush()
        return path.read_text(encoding='utf-8').strip().splitlines()

    def test_invalid_log_level_exits_with_error(self):
        """Test: WIREBOX_LOG_LEVEL=LOUD is rejected before any command runs."""
        result = self.runner.invoke(
            cli, ['info', 'cli_targets:BootModule'],
            env={'WIREBOX_LOG_LEVEL': 'LOUD'},
        )
        assert result.exit_code == 1
        assert 'Configuration error' in result.output
        assert 'log_level' in result.output
        assert 'IGreeter' not in result.output

    def test_no_log_file_by_default(self, tmp_path):
        """Test: without WIREBOX_LOG_FILE/JSON nothing is written to the log directory."""
        log_dir = tmp_path / 'logs'
        result = self.runner.invoke(
            cli, ['info', 'cli_targets:BootModule'],
            env={'WIREBOX_LOG_DIR': str(log_dir)},
        )
        assert result.exit_code == 0
        assert not log_dir.exists()

    def test_json_logs_written_to_log_dir(self, tmp_path):
        """Test: WIREBOX_LOG_JSON=true writes JSON lines with container fields."""
        log_dir = tmp_path / 'logs'
        result = self.runner.invoke(
            cli, ['boot', 'cli_targets:ExplodingModule'],
            env={'WIREBOX_LOG_JSON': 'true', 'WIREBOX_LOG_DIR': str(log_dir)},
        )
        assert result.exit_code == 0

        entries = [json.loads(line) for line in self._read_log(log_dir / 'boot.log')]
        failure = next(e for e in entries if 'binding' in e)
        assert failure['service'] == 'boot'
        assert failure['level'] == 'ERROR'
        assert failure['binding'].startswith('Exploding -> Exploding')
        assert failure['rank'] == 0
        assert 'boom' in failure['exception']

    def test_log_file_flag_writes_text_log(self, tmp_path):
        """Test: --log-file writes a plain text log under WIREBOX_LOG_DIR."""
        log_dir = tmp_path / 'logs'
        result = self.runner.invoke(
            cli, ['--log-file', 'boot', 'cli_targets:ExplodingModule'],
            env={'WIREBOX_LOG_DIR': str(log_dir)},
        )
        assert result.exit_code == 0
        lines = self._read_log(log_dir / 'boot.log')
        assert any("Exception constructing eager singleton 'Exploding'" in line for line in lines)

    def test_debug_from_environment(self):
        """Test: WIREBOX_DEBUG=true enables debug logging without --debug."""
        result = self.runner.invoke(
            cli, ['boot', 'cli_targets:BootModule'],
            env={'WIREBOX_DEBUG': 'true'},
        )
        assert result.exit_code == 0
        assert 'Constructing eager singleton: Greeter' in result.output
