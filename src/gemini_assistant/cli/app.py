"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.text import Text

from ..assistant import Orchestrator
from ..context import ContextProvider
from .providers import (
    get_editor,
    get_model_client,
    get_request_builder,
    make_console_logger,
    warn_if_missing_credential,
)

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="gemini-assistant",
    help="Chat with Gemini about the code in your editor",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

LOG_LEVEL_HELP = "Show log output at this level (debug, info, warning, error)"


@app.command()
def chat(
    path: Path | None = typer.Argument(
        None,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="File to open in the editor pane"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Gemini model id (default: $GEMINI_MODEL or gemini-2.0-flash)"
    ),
    language: str | None = typer.Option(
        None,
        "--language",
        help="Language named in the context preamble (default: $GEMINI_ASSISTANT_LANGUAGE or R)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help=LOG_LEVEL_HELP
    ),
):
    """Open the interactive editor + chat TUI."""
    from ..ui import run_assistant_tui

    warn_if_missing_credential(console)
    asyncio.run(run_assistant_tui(
        client=get_model_client(model),
        request_builder=get_request_builder(language),
        document_path=path,
        log_level=log_level,
    ))


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask about the code"),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="File providing the code context"
    ),
    lines: str | None = typer.Option(
        None,
        "--lines",
        "-l",
        help="Line range START:END used as the selection"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Gemini model id (default: $GEMINI_MODEL or gemini-2.0-flash)"
    ),
    language: str | None = typer.Option(
        None,
        "--language",
        help="Language named in the context preamble"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help=LOG_LEVEL_HELP
    ),
):
    """Ask a single question about a file and print the reply."""
    editor = get_editor(file, lines)
    if not question.strip():
        console.print("[red]Error: question is empty[/red]")
        raise typer.Exit(code=1)

    async def _ask():
        async with get_model_client(model) as client:
            orchestrator = Orchestrator(
                ContextProvider(editor),
                client,
                request_builder=get_request_builder(language),
            )
            debug = make_console_logger(log_level, console)
            if debug is not None:
                orchestrator.set_debug_callback(debug)

            snapshot = orchestrator.refresh_context()
            console.print(f"[dim]Context source: {snapshot.label}[/dim]")

            with console.status("[dim]Thinking...[/dim]"):
                reply = await orchestrator.send(question)

        if reply is not None:
            console.print(Markdown(reply.content))

    asyncio.run(_ask())


@app.command()
def context(
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="File providing the code context"
    ),
    lines: str | None = typer.Option(
        None,
        "--lines",
        "-l",
        help="Line range START:END used as the selection"
    ),
):
    """Show the context that would be sent with the next question."""
    snapshot = ContextProvider(get_editor(file, lines)).capture()
    console.print(Panel(
        Text(snapshot.text),
        title=f"Context source: {snapshot.label}",
        border_style="red" if snapshot.detail else "cyan",
    ))


if __name__ == "__main__":
    app()
