"""
Gemini Assistant: chat with Google Gemini about the code open in your editor.

Each module hides a single design decision: how editor context is
captured, how the conversation is stored, how requests are built and sent,
and how one send cycle is orchestrated.
"""

__version__ = "0.1.0"

from .assistant import Orchestrator, SessionState
from .context import ContextProvider, ContextSnapshot, ContextSourceKind
from .conversation import ConversationStore, Message, Role
from .llm import GeminiClient, ModelResult, OutboundRequest, RequestBuilder

__all__ = [
    "ContextProvider",
    "ContextSnapshot",
    "ContextSourceKind",
    "ConversationStore",
    "GeminiClient",
    "Message",
    "ModelResult",
    "Orchestrator",
    "OutboundRequest",
    "RequestBuilder",
    "Role",
    "SessionState",
]
