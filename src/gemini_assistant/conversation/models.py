"""Data models for the conversation log."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single turn in the conversation.

    Messages are immutable; replacing one produces a new instance that
    keeps the original id and role.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1, description="Sequential identifier within the session")
    role: Role = Field(description="Who authored the message")
    content: str = Field(description="Message text")
    timestamp: datetime = Field(default_factory=datetime.now)
