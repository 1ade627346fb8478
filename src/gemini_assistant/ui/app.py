"""Main Textual TUI application.

Orchestrates the UI components and forwards user actions to the
Orchestrator, which owns all conversation state.
"""

import asyncio
from collections.abc import Callable
from pathlib import Path

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, TextArea

from ..assistant import Orchestrator
from ..config import read_credential
from ..context import ContextProvider, TextAreaEditorBridge
from ..conversation import Message
from ..llm import ModelClient, RequestBuilder
from .config import LogLevel
from .styles import APP_CSS
from .themes import GEMINI_NIGHT
from .widgets import ChatHistoryWidget, ChatInputBar, ContextSourceBar, DebugPanel


class AssistantApp(App):
    """Textual TUI pairing a code editor with a Gemini chat."""

    CSS = APP_CSS
    TITLE = "Gemini Assistant"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "refresh_context", "Refresh Context"),
        Binding("ctrl+y", "copy_last_response", "Copy Response"),
        Binding("ctrl+b", "toggle_maximize_chat", "Max Chat"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        client: ModelClient,
        request_builder: RequestBuilder | None = None,
        document_path: Path | None = None,
        log_level: str | None = None,
        credential_getter: Callable[[], str] = read_credential,
    ) -> None:
        super().__init__()
        self._document_path = document_path
        self._log_level = log_level
        self._builder = request_builder or RequestBuilder()
        self.load_error: str | None = None
        self._editor_bridge = TextAreaEditorBridge()
        self.orchestrator = Orchestrator(
            ContextProvider(self._editor_bridge),
            client,
            request_builder=self._builder,
            credential_getter=credential_getter,
        )

    def _initial_text(self) -> str:
        if self._document_path is None:
            return ""
        try:
            return self._document_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.load_error = f"Cannot open {self._document_path}: {e}"
            return ""

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        editor = TextArea.code_editor(self._initial_text(), id="code-editor")
        editor.border_title = Text(self._document_path.name) if self._document_path else "Scratch"
        editor.border_subtitle = "Select code to pin it as context"
        yield editor

        yield ChatHistoryWidget(id="chat-history", language=self._builder.language)

        with Vertical(id="bottom-bar"):
            yield ContextSourceBar(id="context-source")
            yield ChatInputBar(id="chat-input-bar")
            yield DebugPanel(id="debug-panel")

        yield Footer()

    def on_mount(self) -> None:
        """Wire the editor and callbacks, then take the first context snapshot."""
        self.register_theme(GEMINI_NIGHT)
        self.theme = "gemini-night"

        debug_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            debug_panel.log_level = LogLevel.parse(self._log_level)
            debug_panel.show()
            debug_panel.add_entry("TUI", f"Log panel enabled with level: {self._log_level.upper()}", LogLevel.INFO)

        self._editor_bridge.attach(self.query_one("#code-editor", TextArea))
        self.orchestrator.set_debug_callback(debug_panel.route)
        self.orchestrator.set_update_callback(self._on_conversation_update)

        self.sub_title = f"{self.orchestrator.client.model} | {self._builder.language}"

        snapshot = self.orchestrator.refresh_context()
        self.query_one("#context-source", ContextSourceBar).show(snapshot)
        self.query_one("#chat-history", ChatHistoryWidget).show_welcome(snapshot.text)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

        if self.load_error:
            debug_panel.add_entry("TUI", self.load_error, LogLevel.ERROR)
            self.notify(self.load_error, severity="error", timeout=5, markup=False)

    def _on_conversation_update(self, messages: tuple[Message, ...]) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).sync(messages)
        self.query_one("#context-source", ContextSourceBar).show(
            self.orchestrator.state.context
        )

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self.submit_prompt(event.value)

    def on_chat_input_bar_refresh_requested(self, event: ChatInputBar.RefreshRequested) -> None:
        self.action_refresh_context()

    def submit_prompt(self, prompt: str) -> bool:
        """Start a send cycle. Returns False if the prompt was not accepted."""
        if not prompt.strip():
            return False
        if self.orchestrator.busy:
            self.notify("Still waiting for the previous reply", severity="warning", timeout=3)
            return False
        self._send(prompt)
        return True

    @work(group="send")
    async def _send(self, prompt: str) -> None:
        """Run the send cycle as a background async worker."""
        reply = await self.orchestrator.send(prompt)
        if reply is None:
            self.notify("Message was not sent", severity="warning", timeout=3)

    def action_refresh_context(self) -> None:
        """Recapture the editor context, replacing any pinned selection."""
        snapshot = self.orchestrator.refresh_context()
        self.query_one("#context-source", ContextSourceBar).show(snapshot)
        self.query_one("#chat-history", ChatHistoryWidget).show_welcome(snapshot.text)
        self.notify("Code context refreshed", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self.query_one("#chat-history", ChatHistoryWidget).get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")

    def action_toggle_maximize_chat(self) -> None:
        """Toggle between side-by-side and chat-only layout."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        editor = self.query_one("#code-editor", TextArea)
        if chat.has_class("-maximized"):
            chat.remove_class("-maximized")
            editor.display = True
        else:
            chat.add_class("-maximized")
            editor.display = False

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self.query_one("#debug-panel", DebugPanel).toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_assistant_tui(
    client: ModelClient,
    request_builder: RequestBuilder | None = None,
    document_path: Path | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        client: Model client used for every send
        request_builder: Request builder (controls the preamble language)
        document_path: File to open in the editor pane
        log_level: Log level for the log panel (debug/info/warning/error), None to hide
    """
    app = AssistantApp(
        client=client,
        request_builder=request_builder,
        document_path=document_path,
        log_level=log_level,
    )
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await client.close()
