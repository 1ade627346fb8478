"""Data models for captured editor context."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ContextSourceKind(str, Enum):
    """How the captured code was obtained."""

    SELECTION = "selection"          # Non-empty selection in the editor
    FULL_DOCUMENT = "full_document"  # Whole text of the active document
    EMPTY = "empty"                  # No document open, or document is empty
    ERROR = "error"                  # Editor could not be queried


_LABELS = {
    ContextSourceKind.SELECTION: "Selected text in editor",
    ContextSourceKind.FULL_DOCUMENT: "Full document from active editor",
    ContextSourceKind.EMPTY: "No document open or empty document",
}


class ContextSnapshot(BaseModel):
    """The code most recently captured from the editor.

    Snapshots carry no timestamp, so two captures of an unchanged editor
    compare equal.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Captured code, or a placeholder/diagnostic")
    source_kind: ContextSourceKind = Field(description="How the text was obtained")
    detail: str = Field(default="", description="Failure reason for ERROR snapshots")

    @property
    def label(self) -> str:
        """Human-readable description of the context source."""
        if self.source_kind == ContextSourceKind.ERROR:
            return f"Error getting context: {self.detail}"
        return _LABELS[self.source_kind]

    @property
    def is_selection(self) -> bool:
        return self.source_kind == ContextSourceKind.SELECTION
