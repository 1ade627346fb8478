"""Terminal UI module for gemini_assistant.

Provides a Textual-based TUI: a code editor pane feeding the context, a
chat panel, and an input bar.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (message rendering, input bar, context bar, log)
- formatting.py: Reply text transformations
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- config.py: Log levels and display constants
- app.py: Application orchestration (user interaction flow)
"""

from .app import AssistantApp, run_assistant_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, ContextSourceBar, DebugPanel

__all__ = [
    "AssistantApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "ContextSourceBar",
    "DebugPanel",
    "LogLevel",
    "run_assistant_tui",
]
