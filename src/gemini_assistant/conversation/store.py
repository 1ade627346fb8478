"""Append-only conversation store."""

from datetime import datetime

from .models import Message, Role


class ConversationStore:
    """Ordered, append-only log of conversation messages.

    Ids are assigned sequentially starting at 1 and never reused. The only
    permitted mutation besides appending is replacing the most recently
    appended message, which is how a pending placeholder becomes the final
    reply.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, role: Role | str, content: str) -> int:
        """Append a message and return its id.

        Args:
            role: Message author
            content: Message text

        Returns:
            The id assigned to the new message
        """
        self._last_id += 1
        self._messages.append(
            Message(id=self._last_id, role=Role(role), content=content)
        )
        return self._last_id

    def replace_last(self, content: str) -> None:
        """Overwrite content and timestamp of the last message.

        Does nothing when the conversation is empty.
        """
        if not self._messages:
            return
        self._messages[-1] = self._messages[-1].model_copy(
            update={"content": content, "timestamp": datetime.now()}
        )

    def replace(self, message_id: int, content: str) -> None:
        """Replace the message identified by the handle returned from append.

        Args:
            message_id: Id returned by a previous append
            content: New message text

        Raises:
            ValueError: If the id does not belong to the most recent message
        """
        if not self._messages or self._messages[-1].id != message_id:
            raise ValueError(
                f"Only the most recent message can be replaced (got id {message_id})"
            )
        self.replace_last(content)

    def last(self) -> Message | None:
        """Get the most recently appended message."""
        return self._messages[-1] if self._messages else None

    def snapshot(self) -> tuple[Message, ...]:
        """Get a read-only copy of the conversation in append order."""
        return tuple(self._messages)
