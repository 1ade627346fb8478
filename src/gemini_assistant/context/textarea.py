"""Editor bridge over a Textual TextArea.

Lets the TUI's embedded code editor act as the context source.
"""

from typing import TYPE_CHECKING

from .base import EditorBridge, EditorUnavailableError

if TYPE_CHECKING:
    from textual.widgets import TextArea


class TextAreaEditorBridge(EditorBridge):
    """Editor bridge reading selection and text from a TextArea widget."""

    def __init__(self, text_area: "TextArea | None" = None):
        self._text_area = text_area

    def attach(self, text_area: "TextArea") -> None:
        """Attach the widget once it has been composed."""
        self._text_area = text_area

    def _widget(self) -> "TextArea":
        if self._text_area is None:
            raise EditorUnavailableError("Editor is not running")
        return self._text_area

    def activate_source(self) -> None:
        """Scroll the editor so the cursor and selection are on screen."""
        self._widget().scroll_cursor_visible()

    def get_selection(self) -> str:
        return self._widget().selected_text

    def get_document(self) -> str:
        return self._widget().text

    @property
    def editor_type(self) -> str:
        return "textarea"
