"""Tests for the application loop with a fake terminal."""

import signal

import pytest

from conftest import FakeTerminal
from ncshell import app
from ncshell.config import Config
from ncshell.shell import ShellExit


def _patch_terminal(monkeypatch, terminal):
    monkeypatch.setattr(app, "CursesTerminal", lambda stdscr: terminal)


class TestRunShell:
    def test_exit_returns_zero(self, monkeypatch):
        terminal = FakeTerminal()
        terminal.feed("echo hi", 10, "exit", 10)
        _patch_terminal(monkeypatch, terminal)
        assert app.run_shell(None, Config()) == 0
        assert terminal.output == ["Type 'help' for a list of commands.", "hi"]
        assert terminal.closed

    def test_welcome_can_be_disabled(self, monkeypatch):
        terminal = FakeTerminal()
        terminal.feed("quit", 10)
        _patch_terminal(monkeypatch, terminal)
        config = Config()
        config.shell.welcome = None
        assert app.run_shell(None, config) == 0
        assert terminal.output == []

    def test_too_narrow_raises_status_1(self, monkeypatch):
        _patch_terminal(monkeypatch, FakeTerminal(cols=15))
        with pytest.raises(ShellExit) as exc:
            app.run_shell(None, Config())
        assert exc.value.status == 1
        assert "columns wide" in str(exc.value)

    def test_sigint_handler_restored(self, monkeypatch):
        terminal = FakeTerminal()
        terminal.feed("exit", 10)
        _patch_terminal(monkeypatch, terminal)
        before = signal.getsignal(signal.SIGINT)
        app.run_shell(None, Config())
        assert signal.getsignal(signal.SIGINT) is before

    def test_debug_flag_writes_logs(self, monkeypatch, tmp_path):
        terminal = FakeTerminal()
        terminal.feed("nope", 10, "exit", 10)
        _patch_terminal(monkeypatch, terminal)
        config = Config()
        config.debug.directory = str(tmp_path)
        app.run_shell(None, config, debug=True)
        assert "CMD | nope []" in (tmp_path / "ncshell_commands.log").read_text()
