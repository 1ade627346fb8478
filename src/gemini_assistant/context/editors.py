"""File-backed editor bridge.

Treats a file on disk as the active document. A line range stands in for
the editor selection, which lets the CLI send only part of a file.
"""

from pathlib import Path

from .base import EditorBridge, EditorUnavailableError


class FileEditorBridge(EditorBridge):
    """Editor bridge reading from a file on disk."""

    def __init__(
        self,
        path: str | Path | None = None,
        lines: tuple[int, int] | None = None,
        encoding: str = "utf-8",
    ):
        """Initialize file editor bridge.

        Args:
            path: File acting as the open document (None means no document is open)
            lines: Optional 1-based inclusive (start, end) range used as the selection
            encoding: Text encoding of the file
        """
        self._path = Path(path) if path is not None else None
        self._lines = lines
        self._encoding = encoding

    def _read(self) -> str:
        if self._path is None:
            return ""
        if not self._path.is_file():
            raise EditorUnavailableError(f"No such document: {self._path}")
        try:
            return self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise EditorUnavailableError(f"Cannot read {self._path}: {e}") from e

    def get_selection(self) -> str:
        """Lines of the range; a range running past the end is clipped.

        Raises:
            EditorUnavailableError: If the range starts after the last line
        """
        if self._lines is None or self._path is None:
            return ""
        start, end = self._lines
        lines = self._read().splitlines()
        if start > len(lines):
            raise EditorUnavailableError(
                f"Lines {start}:{end} are past the end of {self._path} ({len(lines)} lines)"
            )
        return "\n".join(lines[max(start, 1) - 1:end])

    def get_document(self) -> str:
        return self._read()

    @property
    def editor_type(self) -> str:
        return "file"
