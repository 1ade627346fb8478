"""Editor context capture for gemini_assistant.

Hides how code is pulled out of the editor and how the source of that
code (selection, whole document, nothing, failure) is classified.
"""

from .base import EditorBridge, EditorUnavailableError
from .editors import FileEditorBridge
from .factory import create_editor_bridge
from .models import ContextSnapshot, ContextSourceKind
from .provider import ContextProvider
from .textarea import TextAreaEditorBridge

__all__ = [
    "ContextProvider",
    "ContextSnapshot",
    "ContextSourceKind",
    "EditorBridge",
    "EditorUnavailableError",
    "FileEditorBridge",
    "TextAreaEditorBridge",
    "create_editor_bridge",
]
