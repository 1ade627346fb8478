"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message rendering and in-place placeholder replacement
- Input history and submit shortcuts
- Context source display
- Log rendering and level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Markdown, RichLog, Static, TextArea

from ..config import THINKING_PLACEHOLDER
from ..context import ContextSnapshot, ContextSourceKind
from ..conversation import Message, Role
from .config import ASSISTANT_LABEL, TIMESTAMP_FORMAT, USER_LABEL, LogLevel
from .formatting import as_markdown, welcome_text


class MessageView(Vertical):
    """One rendered conversation message. Click to copy its content."""

    def __init__(self, message: Message, language: str = "", **kwargs) -> None:
        is_user = message.role == Role.USER
        classes = "chat-message " + ("user-message" if is_user else "assistant-message")
        if not is_user and message.content == THINKING_PLACEHOLDER:
            classes += " pending"
        super().__init__(classes=classes, **kwargs)
        self.message = message
        self._language = language

    def compose(self):
        message = self.message
        if message.role == Role.USER:
            header = f"> {USER_LABEL} [{message.timestamp.strftime(TIMESTAMP_FORMAT)}]"
            yield Static(Text(header), classes="message-header")
            yield Static(Text(message.content), classes="message-content")
        else:
            header = f"< {ASSISTANT_LABEL} [{message.timestamp.strftime(TIMESTAMP_FORMAT)}]"
            yield Static(Text(header), classes="message-header")
            yield Markdown(as_markdown(message.content, self._language), classes="message-content")

    def on_click(self, event: Click) -> None:
        """Copy message content to the clipboard."""
        event.stop()
        self.app.copy_to_clipboard(self.message.content)
        self.app.notify("Copied to clipboard", timeout=2)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation view kept in step with the ConversationStore."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, language: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._language = language
        self._views: dict[int, MessageView] = {}
        self._welcome: Static | None = None

    @property
    def message_count(self) -> int:
        return len(self._views)

    def show_welcome(self, context_text: str) -> None:
        """Show or update the welcome text while no message exists."""
        if self._views:
            return
        if self._welcome is None:
            self._welcome = Static(Text(welcome_text(context_text)), classes="welcome")
            self.mount(self._welcome)
        else:
            self._welcome.update(Text(welcome_text(context_text)))

    def sync(self, messages: Sequence[Message]) -> None:
        """Render new messages and re-render replaced ones.

        Only the last message is ever replaced, so a changed view is
        removed and its successor appended at the end.
        """
        if messages and self._welcome is not None:
            self._welcome.remove()
            self._welcome = None

        for message in messages:
            view = self._views.get(message.id)
            if view is not None and view.message == message:
                continue
            if view is not None:
                view.remove()
            new_view = MessageView(message, self._language)
            self._views[message.id] = new_view
            self.mount(new_view)

        self.border_subtitle = f"{len(messages)} messages"
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last finished assistant response."""
        for message_id in sorted(self._views, reverse=True):
            message = self._views[message_id].message
            if message.role == Role.ASSISTANT and message.content != THINKING_PLACEHOLDER:
                return message.content
        return None


class ContextSourceBar(Static):
    """One-line display of where the current code context came from."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("Context source: (not captured yet)", *args, **kwargs)
        self.label = "Context source: (not captured yet)"

    def show(self, snapshot: ContextSnapshot | None) -> None:
        if snapshot is None:
            return
        self.label = f"Context source: {snapshot.label}"
        self.update(Text(self.label))
        self.set_class(snapshot.source_kind == ContextSourceKind.SELECTION, "-selection")
        self.set_class(snapshot.source_kind == ContextSourceKind.ERROR, "-error")


class ChatInputBar(Horizontal):
    """Chat input with Send and Refresh Context buttons."""

    class Submitted(TextualMessage):
        """Posted when the user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class RefreshRequested(TextualMessage):
        """Posted when the user asks for a context refresh."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Submit message (Ctrl+J)"
        )
        yield Button("Refresh", id="refresh-btn", variant="primary").with_tooltip(
            "Refresh code context (Ctrl+R)"
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self._submit()
        elif event.button.id == "refresh-btn":
            self.post_message(self.RefreshRequested())

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: terminals do not report ctrl+enter, so ctrl+j submits.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _cursor_at_start(self) -> bool:
        return self.query_one("#chat-input", TextArea).cursor_location == (0, 0)

    def _cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        lines = text_area.text.split("\n")
        return text_area.cursor_location == (len(lines) - 1, len(lines[-1]))

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text.strip()
        text_area.text = ""
        if not value:
            return
        if not self._history or self._history[-1] != value:
            self._history.append(value)
        self._history_index = -1
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Log panel for tracing the send cycle, with level filtering.

    Hidden by default; shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "CORE": "green",
        "Context": "bright_blue",
        "LLM": "magenta",
    }

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level
        self.display = False

    @property
    def log_level(self) -> LogLevel:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def add_entry(self, component: str, message: str, level: LogLevel = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold."""
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text.assemble(
            (f"{timestamp} ", "dim"),
            (f"{level.name:<5} ", level_color),
            (f"[{component}] ", comp_color),
            message,
        )
        self.write(line)

    def route(self, level: str, component: str, message: str) -> None:
        """Debug-callback entry point: Callable(level, component, message)."""
        self.add_entry(component, message, LogLevel.parse(level))

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
