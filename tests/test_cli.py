"""Tests for the Typer CLI."""
from io import StringIO

import pytest
import typer
from rich.console import Console
from typer.testing import CliRunner

from gemini_assistant.cli.app import app
from gemini_assistant.cli.providers import (
    get_request_builder,
    make_console_logger,
    parse_line_range,
)
from gemini_assistant.context import ContextProvider, ContextSourceKind, FileEditorBridge
from gemini_assistant.ui.config import LogLevel

runner = CliRunner()

# Wide terminal so Rich does not wrap panel titles
WIDE = {"COLUMNS": "200"}


class TestParseLineRange:
    """Tests for --lines parsing."""

    def test_none(self):
        assert parse_line_range(None) is None

    def test_range(self):
        assert parse_line_range("3:4") == (3, 4)

    def test_single_line(self):
        assert parse_line_range("7") == (7, 7)

    @pytest.mark.parametrize("value", ["a:b", "0:2", "5:3", "1:x"])
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter):
            parse_line_range(value)


def test_request_builder_language_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_ASSISTANT_LANGUAGE", "Python")
    assert get_request_builder().language == "Python"
    assert get_request_builder("Julia").language == "Julia"


class TestContextCommand:
    """Tests for the context inspector."""

    def test_line_range_is_selection(self, sample_r_file):
        result = runner.invoke(
            app, ["context", "--file", str(sample_r_file), "--lines", "3:4"], env=WIDE
        )
        assert result.exit_code == 0
        assert "Context source: Selected text in editor" in result.output
        assert "df <- mtcars" in result.output
        assert "summary(df)" in result.output
        assert "library(dplyr)" not in result.output

    def test_whole_file(self, sample_r_file):
        result = runner.invoke(app, ["context", "--file", str(sample_r_file)], env=WIDE)
        assert result.exit_code == 0
        assert "Full document from active editor" in result.output
        assert "plot(df$mpg)" in result.output

    def test_no_file(self):
        result = runner.invoke(app, ["context"], env=WIDE)
        assert result.exit_code == 0
        assert "No document open or empty document" in result.output
        assert "No code available in editor" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(
            app, ["context", "--file", str(tmp_path / "missing.R")], env=WIDE
        )
        assert result.exit_code == 0
        assert "Error retrieving code context from editor" in result.output

    def test_bad_range(self, sample_r_file):
        result = runner.invoke(
            app, ["context", "--file", str(sample_r_file), "--lines", "4:2"], env=WIDE
        )
        assert result.exit_code == 2


class TestAskCommand:
    """Tests for the one-shot ask command."""

    def test_missing_credential_is_reported_as_reply(self, monkeypatch, sample_r_file):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        result = runner.invoke(
            app, ["ask", "What does this do?", "--file", str(sample_r_file)], env=WIDE
        )
        assert result.exit_code == 0
        assert "Context source: Full document from active editor" in result.output
        assert "GEMINI_API_KEY" in result.output

    def test_blank_question(self):
        result = runner.invoke(app, ["ask", "   "], env=WIDE)
        assert result.exit_code == 1
        assert "question is empty" in result.output

    def test_log_output_with_bracketed_path(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        missing = tmp_path / "scripts[/old]" / "a.R"
        result = runner.invoke(
            app,
            ["ask", "Explain", "--file", str(missing), "--log-level", "debug"],
            env=WIDE,
        )
        assert result.exit_code == 0
        assert "[/old]" in result.output
        assert "GEMINI_API_KEY" in result.output


class TestConsoleLogger:
    """Tests for the --log-level console callback."""

    def _console(self) -> tuple[Console, StringIO]:
        buffer = StringIO()
        return Console(file=buffer, width=200, color_system=None), buffer

    def test_disabled_without_level(self):
        assert make_console_logger(None) is None

    def test_filters_below_threshold(self):
        console, buffer = self._console()
        log = make_console_logger("warning", console)

        log("info", "CORE", "hidden")
        log("error", "LLM", "shown")

        output = buffer.getvalue()
        assert "hidden" not in output
        assert "ERROR" in output
        assert "LLM shown" in output

    def test_message_is_printed_literally(self):
        console, buffer = self._console()
        log = make_console_logger("debug", console)

        log("error", "LLM", "Model call failed: [bold]quota[/old] exceeded")

        assert "[bold]quota[/old] exceeded" in buffer.getvalue()

    def test_capture_with_bracketed_path_still_returns_error(self, tmp_path):
        console, buffer = self._console()
        provider = ContextProvider(FileEditorBridge(tmp_path / "scripts[/old]" / "a.R"))
        provider.set_debug_callback(make_console_logger("debug", console))

        snapshot = provider.capture()

        assert snapshot.source_kind == ContextSourceKind.ERROR
        assert "scripts[/old]" in buffer.getvalue()


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", LogLevel.DEBUG), ("INFO", LogLevel.INFO), ("Warning", LogLevel.WARNING),
     ("error", LogLevel.ERROR), ("verbose", LogLevel.DEBUG)],
)
def test_log_level_parse(name, expected):
    assert LogLevel.parse(name) is expected
