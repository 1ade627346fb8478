"""Context provider: turns editor state into a ContextSnapshot."""

from typing import Any

from ..config import CONTEXT_ERROR_TEXT, NO_CODE_PLACEHOLDER
from .base import EditorBridge
from .models import ContextSnapshot, ContextSourceKind


class ContextProvider:
    """Captures code context from the active editor.

    Hidden design decisions:
    - Selection takes priority over the full document
    - Empty documents map to a fixed placeholder
    - Editor failures become ERROR snapshots instead of exceptions
    """

    def __init__(self, editor: EditorBridge):
        self._editor = editor
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback, Callable(level, component, message)."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Context", message)

    def capture(self) -> ContextSnapshot:
        """Capture the current editor context. Never raises.

        Returns:
            Snapshot tagged SELECTION, FULL_DOCUMENT, EMPTY or ERROR
        """
        try:
            self._editor.activate_source()
        except Exception as e:
            self._debug("debug", f"Could not activate source view: {e}")

        try:
            selection = self._editor.get_selection()
            if selection:
                snapshot = ContextSnapshot(
                    text=selection, source_kind=ContextSourceKind.SELECTION
                )
            else:
                document = self._editor.get_document()
                if document:
                    snapshot = ContextSnapshot(
                        text=document, source_kind=ContextSourceKind.FULL_DOCUMENT
                    )
                else:
                    snapshot = ContextSnapshot(
                        text=NO_CODE_PLACEHOLDER, source_kind=ContextSourceKind.EMPTY
                    )
        except Exception as e:
            self._debug("warning", f"Context capture failed: {e}")
            return ContextSnapshot(
                text=f"{CONTEXT_ERROR_TEXT}: {e}",
                source_kind=ContextSourceKind.ERROR,
                detail=str(e),
            )

        self._debug("info", f"{snapshot.label} ({len(snapshot.text)} chars)")
        return snapshot
