"""Conversation log for the current session.

Hides how messages are numbered, timestamped and replaced.
The log lives in memory only and is gone when the session ends.
"""

from .models import Message, Role
from .store import ConversationStore

__all__ = [
    "ConversationStore",
    "Message",
    "Role",
]
