"""Tests for the demo CLI."""

import logging

import pytest
from typer.testing import CliRunner

import termkit
from termkit.cli import app as app_module
from termkit.cli.app import create_app
from termkit.core.errors import GeometryUnavailable, SignalRegistrationFailed
from termkit.core.geometry import TerminalSize

runner = CliRunner()


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch):
    """CLI app with logging setup left alone."""
    monkeypatch.setattr(app_module, "configure_logging", lambda verbose: None)
    return create_app()


@pytest.fixture
def width_40(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(termkit.core.layout, "query_terminal_size", lambda: TerminalSize(40, 10))


def no_terminal() -> TerminalSize:
    raise GeometryUnavailable("fd 1 has no terminal size")


class TestSize:

    def test_prints_dimensions(self, app, monkeypatch) -> None:
        monkeypatch.setattr(termkit, "query_terminal_size", lambda: TerminalSize(120, 40))
        result = runner.invoke(app, ["size"])
        assert result.exit_code == 0
        assert "120x40" in result.stdout

    def test_no_terminal(self, app, monkeypatch) -> None:
        monkeypatch.setattr(termkit, "query_terminal_size", no_terminal)
        result = runner.invoke(app, ["size"])
        assert result.exit_code == 1


class TestCenter:

    def test_centers_each_line(self, app, width_40) -> None:
        result = runner.invoke(app, ["center", "ab\\nabcdef"])
        assert result.exit_code == 0
        assert result.stdout.split("\n")[:2] == [" " * 19 + "ab", " " * 17 + "abcdef"]

    def test_block(self, app, width_40) -> None:
        result = runner.invoke(app, ["center", "--block", "ab\\nabcdef"])
        assert result.stdout.split("\n")[:2] == [" " * 19 + "ab", " " * 19 + "abcdef"]

    def test_styled_text_uses_visible_width(self, app, width_40) -> None:
        text = termkit.bold("abcd")
        result = runner.invoke(app, ["center", text])
        assert result.stdout.rstrip("\n") == " " * 18 + text

    def test_explicit_visual_width(self, app, width_40) -> None:
        result = runner.invoke(app, ["center", "-w", "10", "x"])
        assert result.stdout.rstrip("\n") == " " * 15 + "x"

    def test_no_terminal(self, app, monkeypatch) -> None:
        monkeypatch.setattr(termkit.core.layout, "query_terminal_size", no_terminal)
        result = runner.invoke(app, ["center", "x"])
        assert result.exit_code == 1


class TestSwatch:

    def test_foreground(self, app) -> None:
        result = runner.invoke(app, ["swatch", "255", "0", "128"])
        assert result.exit_code == 0
        assert "\x1b[38;2;255;0;128m 255,0,128 \x1b[39m" in result.stdout

    def test_background_padded(self, app) -> None:
        result = runner.invoke(app, ["swatch", "--background", "--pad", "1", "2", "3"])
        expected = termkit.rgb_bg(" 1,2,3 ", 1, 2, 3, pad=True)
        assert expected in result.stdout

    def test_out_of_range(self, app) -> None:
        result = runner.invoke(app, ["swatch", "256", "0", "0"])
        assert result.exit_code == 1


class TestKeys:

    @pytest.fixture
    def typed(self, monkeypatch: pytest.MonkeyPatch):
        """Feed scripted bytes to the keys command."""
        def feed(data: bytes) -> None:
            remaining = list(data)

            def read() -> int:
                if not remaining:
                    raise EOFError
                return remaining.pop(0)

            monkeypatch.setattr(termkit, "read_raw_byte", read)

        monkeypatch.setattr(termkit, "install_interrupt_guard", lambda: None)
        return feed

    def test_prints_bytes_until_q(self, app, typed) -> None:
        typed(b"a\x1bqz")
        result = runner.invoke(app, ["keys"])
        assert result.exit_code == 0
        assert " 97  0x61" in result.stdout
        assert " 27  0x1b" in result.stdout
        assert "113  0x71" in result.stdout
        assert "0x7a" not in result.stdout

    def test_ctrl_c_quits(self, app, typed) -> None:
        typed(b"\x03a")
        result = runner.invoke(app, ["keys"])
        assert "  3  0x03" in result.stdout
        assert "0x61" not in result.stdout

    def test_count(self, app, typed) -> None:
        typed(b"abc")
        result = runner.invoke(app, ["keys", "--count", "2"])
        assert "0x62" in result.stdout
        assert "0x63" not in result.stdout

    def test_stops_at_eof(self, app, typed) -> None:
        typed(b"x")
        result = runner.invoke(app, ["keys"])
        assert result.exit_code == 0

    def test_runs_without_guard(self, app, typed, monkeypatch) -> None:
        def refuse() -> None:
            raise SignalRegistrationFailed("not main thread")

        monkeypatch.setattr(termkit, "install_interrupt_guard", refuse)
        typed(b"q")
        result = runner.invoke(app, ["keys"])
        assert result.exit_code == 0

    def test_not_a_terminal(self, app, monkeypatch) -> None:
        def not_a_tty() -> int:
            raise OSError(25, "Inappropriate ioctl for device")

        monkeypatch.setattr(termkit, "install_interrupt_guard", lambda: None)
        monkeypatch.setattr(termkit, "read_raw_byte", not_a_tty)
        result = runner.invoke(app, ["keys"])
        assert result.exit_code == 1


class TestLogging:

    def test_verbose_enables_debug(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        app_module.configure_logging(True)
        assert calls[0]["level"] == "DEBUG"

    def test_level_from_environment(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("TERMKIT_LOG_LEVEL", "info")
        app_module.configure_logging(False)
        assert calls[0]["level"] == "INFO"

    def test_unknown_level_falls_back_to_warning(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("TERMKIT_LOG_LEVEL", "loud")
        app_module.configure_logging(False)
        assert calls[0]["level"] == "WARNING"

    def test_unknown_level_does_not_break_commands(self, app, monkeypatch) -> None:
        monkeypatch.setenv("TERMKIT_LOG_LEVEL", "loud")
        result = runner.invoke(app, ["swatch", "1", "2", "3"])
        assert result.exit_code == 0
