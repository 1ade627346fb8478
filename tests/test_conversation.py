"""Unit tests for the conversation module."""
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from gemini_assistant.conversation import ConversationStore, Message, Role


class TestConversationStore:
    """Tests for ConversationStore."""

    def test_append_assigns_sequential_ids(self):
        """Test that ids start at 1 and increase by one."""
        store = ConversationStore()

        first = store.append(Role.USER, "hello")
        second = store.append(Role.ASSISTANT, "hi there")

        assert (first, second) == (1, 2)
        assert [m.id for m in store.snapshot()] == [1, 2]

    def test_append_accepts_role_strings(self):
        store = ConversationStore()
        store.append("user", "hello")

        assert store.snapshot()[0].role == Role.USER

    def test_append_rejects_unknown_role(self):
        store = ConversationStore()
        with pytest.raises(ValueError):
            store.append("system", "nope")
        assert len(store) == 0

    def test_replace_last_keeps_id_and_role(self):
        """Test that replacing the last message preserves id and role."""
        store = ConversationStore()
        store.append(Role.USER, "question")
        store.append(Role.ASSISTANT, "Thinking...")
        before = store.last()

        store.replace_last("answer")

        after = store.last()
        assert after.id == before.id
        assert after.role == Role.ASSISTANT
        assert after.content == "answer"
        assert after.timestamp >= before.timestamp
        assert len(store) == 2

    def test_replace_last_on_empty_is_noop(self):
        store = ConversationStore()
        store.replace_last("anything")

        assert len(store) == 0
        assert store.last() is None

    def test_replace_by_handle(self):
        store = ConversationStore()
        store.append(Role.USER, "question")
        placeholder = store.append(Role.ASSISTANT, "Thinking...")

        store.replace(placeholder, "answer")

        assert store.last().content == "answer"

    def test_replace_rejects_older_message(self):
        """Test that only the most recent message can be replaced."""
        store = ConversationStore()
        first = store.append(Role.USER, "question")
        store.append(Role.ASSISTANT, "answer")

        with pytest.raises(ValueError, match="most recent"):
            store.replace(first, "edited")
        assert store.snapshot()[0].content == "question"

    def test_snapshot_is_a_copy(self):
        store = ConversationStore()
        store.append(Role.USER, "one")
        snapshot = store.snapshot()

        store.append(Role.ASSISTANT, "two")

        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    @given(st.lists(st.sampled_from(["append", "replace"]), max_size=40))
    def test_ids_strictly_increasing(self, operations: list[str]):
        """Property test: ids stay strictly increasing and never reused."""
        store = ConversationStore()
        for op in operations:
            if op == "append":
                store.append(Role.USER, "text")
            else:
                store.replace_last("replaced")

        ids = [m.id for m in store.snapshot()]
        assert ids == list(range(1, len(ids) + 1))
        assert ids == sorted(set(ids))


class TestMessage:
    """Tests for the Message model."""

    def test_message_is_frozen(self):
        message = Message(id=1, role=Role.USER, content="hi")
        with pytest.raises(ValidationError):
            message.content = "changed"  # type: ignore[misc]

    def test_message_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            Message(id=0, role=Role.USER, content="hi")
