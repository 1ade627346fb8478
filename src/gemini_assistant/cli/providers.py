"""Provider factory functions for CLI.

Centralizes creation of the model client, request builder and editor
bridge from environment variables and command-line options.
"""

from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.text import Text

from ..config import (
    API_KEY_ENV,
    read_credential,
    read_host,
    read_language,
    read_model,
    read_timeout,
)
from ..context import EditorBridge, create_editor_bridge
from ..llm import ModelClient, RequestBuilder, create_model_client
from ..ui.config import LogLevel

# Default console for output
_console = Console()


def get_model_client(model: str | None = None, **client_kwargs: Any) -> ModelClient:
    """Create the Gemini client from environment variables.

    Args:
        model: Model id overriding GEMINI_MODEL

    Environment variables:
        GEMINI_MODEL: Model id (default: gemini-2.0-flash)
        GEMINI_API_HOST: API host (default: generativelanguage.googleapis.com)
        GEMINI_TIMEOUT: HTTP timeout in seconds (default: 60)
    """
    return create_model_client(
        "gemini",
        model=model or read_model(),
        host=read_host(),
        timeout=read_timeout(),
        **client_kwargs
    )


def get_request_builder(language: str | None = None) -> RequestBuilder:
    """Create the request builder.

    Environment variables:
        GEMINI_ASSISTANT_LANGUAGE: Language named in the preamble (default: R)
    """
    return RequestBuilder(language=language or read_language())


def parse_line_range(value: str | None) -> tuple[int, int] | None:
    """Parse 'START:END' (1-based, inclusive) into a tuple.

    A single number selects one line.

    Raises:
        typer.BadParameter: If the range is malformed
    """
    if not value:
        return None
    start_str, _, end_str = value.partition(":")
    try:
        start = int(start_str)
        end = int(end_str) if end_str else start
    except ValueError as e:
        raise typer.BadParameter(f"Invalid line range: {value!r} (expected START:END)") from e
    if start < 1 or end < start:
        raise typer.BadParameter(f"Invalid line range: {value!r} (expected 1 <= START <= END)")
    return start, end


def get_editor(path: Path | None, lines: str | None = None) -> EditorBridge:
    """Create a file-backed editor bridge for one-shot commands."""
    return create_editor_bridge("file", path=path, lines=parse_line_range(lines))


def warn_if_missing_credential(console: Console | None = None) -> None:
    """Print a warning when the API key is not configured.

    Sending still works; each reply will explain the missing key.
    """
    con = console or _console
    if not read_credential():
        con.print(
            f"[yellow]Warning: {API_KEY_ENV} not set, replies will report the missing key[/yellow]"
        )


def make_console_logger(level: str | None, console: Console | None = None) -> Any | None:
    """Build a debug callback printing to the console.

    Args:
        level: Minimum level (debug/info/warning/error), None disables logging

    Returns:
        Callable(level, component, message) or None
    """
    if level is None:
        return None
    con = console or _console
    threshold = LogLevel.parse(level)
    colors = {
        LogLevel.DEBUG: "dim",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def _log(msg_level: str, component: str, message: str) -> None:
        value = LogLevel.parse(msg_level)
        if value < threshold:
            return
        # Message text is printed literally, never as markup
        con.print(
            Text.assemble(
                (f"{value.name:<7} ", colors[value]),
                (component, "bold"),
                " ",
                message,
            ),
            highlight=False,
        )

    return _log
