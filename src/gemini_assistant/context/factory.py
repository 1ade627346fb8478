"""Factory for creating editor bridges."""

from typing import Any

from .base import EditorBridge


def create_editor_bridge(editor: str = "file", **kwargs: Any) -> EditorBridge:
    """Create an editor bridge.

    Args:
        editor: Editor type ("file" or "textarea")
        **kwargs: Editor-specific configuration
            For file:
                - path: str | Path | None
                - lines: tuple[int, int] | None
            For textarea:
                - text_area: textual.widgets.TextArea | None

    Returns:
        EditorBridge instance

    Raises:
        ValueError: If editor type is not supported
    """
    if editor == "file":
        from .editors import FileEditorBridge
        return FileEditorBridge(**kwargs)

    elif editor == "textarea":
        from .textarea import TextAreaEditorBridge
        return TextAreaEditorBridge(**kwargs)

    raise ValueError(
        f"Unsupported editor: {editor}. "
        f"Supported editors: file, textarea"
    )
