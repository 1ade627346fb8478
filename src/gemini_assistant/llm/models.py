from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    """A single text part of a content entry."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Text of the part")


class Content(BaseModel):
    """One entry of the generateContent 'contents' array."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"] = Field(description="Wire role: 'user' or 'model'")
    parts: list[Part] = Field(description="Content parts, a single text part here")


class OutboundRequest(BaseModel):
    """Request body for a generateContent call.

    Built fresh for every call and never stored.
    """

    model_config = ConfigDict(frozen=True)

    contents: list[Content] = Field(description="Context entry followed by the conversation")

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body expected by the API."""
        return self.model_dump(mode="json")


class ModelResult(BaseModel):
    """Outcome of a model call: reply text or a readable error."""

    model_config = ConfigDict(frozen=True)

    ok: bool = Field(description="True if text is the model's reply")
    text: str = Field(description="Reply text, or error message when ok is False")
    status_code: int | None = Field(
        default=None,
        description="HTTP status of the response, None if no response arrived"
    )
