"""Abstract interface to the host editor.

The abstraction hides:
- Which editor is being queried (a file on disk, a Textual TextArea, ...)
- How selections and documents are represented by that editor
"""

from abc import ABC, abstractmethod


class EditorUnavailableError(Exception):
    """Raised when the editor cannot be queried (not running, no document)."""


class EditorBridge(ABC):
    """Read-only view of the user's active editor.

    Implementations raise EditorUnavailableError when there is no editor
    or document to read from. Any other exception is also treated as a
    capture failure by ContextProvider.
    """

    def activate_source(self) -> None:
        """Bring the source view forward before reading it.

        Best effort; the default implementation does nothing.
        """

    @abstractmethod
    def get_selection(self) -> str:
        """Return the currently selected text, or an empty string."""

    @abstractmethod
    def get_document(self) -> str:
        """Return the full text of the active document."""

    @property
    @abstractmethod
    def editor_type(self) -> str:
        """Get the editor type identifier."""
