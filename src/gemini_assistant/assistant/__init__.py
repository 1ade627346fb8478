"""Send-cycle orchestration for gemini_assistant.

Wires context capture, the conversation log, request building and the
model client together for one user session.
"""

from .orchestrator import Orchestrator
from .state import SessionState

__all__ = [
    "Orchestrator",
    "SessionState",
]
