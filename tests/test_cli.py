"""Tests for configuration and the command line entry point."""

import io
import logging
import sys

import pytest

from myshell import __version__
from myshell.cli import build_parser, configure_logging, main
from myshell.config import DEFAULT_PROMPT, ShellConfig


class TestShellConfig:
    """Tests for ShellConfig."""

    def test_defaults(self):
        config = ShellConfig.from_env({})
        assert config.prompt == DEFAULT_PROMPT
        assert config.debug is False

    def test_from_env(self):
        config = ShellConfig.from_env({'MYSHELL_PROMPT': '> ', 'MYSHELL_DEBUG': 'yes'})
        assert config.prompt == '> '
        assert config.debug is True

    @pytest.mark.parametrize('value', ['0', 'false', 'no', ''])
    def test_debug_falsy_values(self, value):
        assert ShellConfig.from_env({'MYSHELL_DEBUG': value}).debug is False


class TestParser:
    """Tests for argument parsing."""

    def test_defaults_leave_config_alone(self):
        args = build_parser().parse_args([])
        assert args.prompt is None
        assert args.debug is None

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(['--version'])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestLogging:
    """Tests for logging setup."""

    def test_debug_level(self):
        configure_logging(True)
        assert logging.getLogger('myshell').level == logging.DEBUG

    def test_quiet_level(self):
        configure_logging(False)
        assert logging.getLogger('myshell').level == logging.WARNING


class TestMain:
    """Tests for main()."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        monkeypatch.delenv('MYSHELL_PROMPT', raising=False)
        monkeypatch.delenv('MYSHELL_DEBUG', raising=False)

    def test_runs_until_exit(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'stdin', io.StringIO('echo hi\nexit 5\n'))
        assert main(['--prompt', '']) == 5
        assert capsys.readouterr().out == 'hi\n'

    def test_end_of_input(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'stdin', io.StringIO(''))
        assert main(['--prompt', '']) == 0

    def test_prompt_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv('MYSHELL_PROMPT', 'env> ')
        monkeypatch.setattr(sys, 'stdin', io.StringIO('exit\n'))
        assert main([]) == 0
        assert capsys.readouterr().out.startswith('env>')

    def test_read_failure_exits_with_one(self, monkeypatch, capsys):
        class Broken(io.StringIO):
            def readline(self, *args):
                raise OSError('input/output error')

        monkeypatch.setattr(sys, 'stdin', Broken())
        assert main(['--prompt', '']) == 1
        assert 'cannot read input' in capsys.readouterr().out
