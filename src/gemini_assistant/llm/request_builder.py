"""Conversion of editor context and chat history into a model request."""

from collections.abc import Sequence

from ..config import DEFAULT_LANGUAGE
from ..context import ContextSnapshot
from ..conversation import Message, Role
from .models import Content, OutboundRequest, Part

PREAMBLE_TEMPLATE = (
    "You are an expert {language} programmer assistant. "
    "The following is the code context from the user's editor:\n\n"
    "```{fence}\n{code}\n```\n\n"
    "Please analyze this code when answering questions."
)

_WIRE_ROLES = {
    Role.USER: "user",
    Role.ASSISTANT: "model",
}


class RequestBuilder:
    """Builds generateContent requests.

    The first entry is a synthetic user turn holding the instructional
    preamble and the captured code, so the model sees the context before
    any turn-taking. The whole history follows, untruncated.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        """Initialize request builder.

        Args:
            language: Language named in the preamble; its lower-cased form tags the code fence
        """
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def preamble(self, context: ContextSnapshot) -> str:
        return PREAMBLE_TEMPLATE.format(
            language=self._language,
            fence=self._language.lower(),
            code=context.text,
        )

    def build(
        self,
        context: ContextSnapshot,
        history: Sequence[Message],
    ) -> OutboundRequest:
        """Build a request from the context and the conversation history.

        Args:
            context: Latest context snapshot
            history: Conversation messages in append order

        Returns:
            OutboundRequest ready to be sent
        """
        contents = [Content(role="user", parts=[Part(text=self.preamble(context))])]
        for message in history:
            contents.append(Content(
                role=_WIRE_ROLES[message.role],
                parts=[Part(text=message.content)]
            ))
        return OutboundRequest(contents=contents)
