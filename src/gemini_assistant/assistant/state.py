"""Explicit session state owned by the Orchestrator."""

from dataclasses import dataclass, field

from ..context import ContextSnapshot
from ..conversation import ConversationStore


@dataclass
class SessionState:
    """Everything one chat session knows.

    Nothing here is persisted; the state is discarded with the session.
    """

    conversation: ConversationStore = field(default_factory=ConversationStore)
    context: ContextSnapshot | None = None  # Latest snapshot only
    busy: bool = False  # True while a model call is in flight
