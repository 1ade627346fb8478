"""Orchestration of a single send cycle.

States of one cycle:
    Idle -> UserMessageAppended -> ContextRefreshed -> PlaceholderAppended
    -> AwaitingModel -> Resolved (Idle)

Every path, including failures, ends back at Idle with the placeholder
replaced by ordinary assistant text.
"""

from collections.abc import Callable
from typing import Any

from ..config import THINKING_PLACEHOLDER, read_credential
from ..context import ContextProvider, ContextSnapshot
from ..conversation import Message, Role
from ..llm import ModelClient, RequestBuilder
from .state import SessionState


class Orchestrator:
    """Runs send cycles against a session state.

    A send issued while another is awaiting the model is rejected: the
    conversation is left untouched and send() returns None.

    Example:
        orchestrator = Orchestrator(ContextProvider(editor), GeminiClient())
        orchestrator.refresh_context()
        reply = await orchestrator.send("What does this function do?")
    """

    def __init__(
        self,
        context_provider: ContextProvider,
        client: ModelClient,
        request_builder: RequestBuilder | None = None,
        credential_getter: Callable[[], str] = read_credential,
        state: SessionState | None = None,
    ):
        """Initialize orchestrator.

        Args:
            context_provider: Source of editor context
            client: Remote model client
            request_builder: Request builder (default: RequestBuilder())
            credential_getter: Called at every send to read the API key
            state: Session state to drive (default: a fresh one)
        """
        self._context_provider = context_provider
        self._client = client
        self._builder = request_builder or RequestBuilder()
        self._credential_getter = credential_getter
        self._state = state or SessionState()
        self._debug_callback: Any | None = None
        self._update_callback: Callable[[tuple[Message, ...]], None] | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state.busy

    @property
    def client(self) -> ModelClient:
        return self._client

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for detailed execution logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
                      component: Source component name
                      message: Log message
        """
        self._debug_callback = callback
        self._context_provider.set_debug_callback(callback)
        if hasattr(self._client, "set_debug_callback"):
            self._client.set_debug_callback(callback)

    def set_update_callback(
        self, callback: Callable[[tuple[Message, ...]], None] | None
    ) -> None:
        """Set a callback receiving the conversation after every mutation.

        Lets a UI render the pending placeholder before the reply arrives.
        """
        self._update_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "CORE", message)

    def _notify_update(self) -> None:
        if self._update_callback:
            self._update_callback(self._state.conversation.snapshot())

    def refresh_context(self) -> ContextSnapshot:
        """Recapture the editor context unconditionally."""
        snapshot = self._context_provider.capture()
        self._state.context = snapshot
        return snapshot

    def _auto_refresh_context(self) -> ContextSnapshot:
        """Recapture context unless the last capture was a user selection."""
        current = self._state.context
        if current is not None and current.is_selection:
            self._debug("debug", "Keeping selected text as context")
            return current
        return self.refresh_context()

    async def send(self, user_input: str) -> Message | None:
        """Run one send cycle.

        Args:
            user_input: Text typed by the user

        Returns:
            The final assistant message, or None if the input was blank or
            a previous send is still awaiting the model
        """
        prompt = user_input.strip()
        if not prompt:
            return None
        if self._state.busy:
            self._debug("warning", "Send rejected: still waiting for the previous reply")
            return None

        conversation = self._state.conversation
        self._state.busy = True
        try:
            conversation.append(Role.USER, prompt)
            self._notify_update()

            context = self._auto_refresh_context()
            history = conversation.snapshot()

            placeholder_id = conversation.append(Role.ASSISTANT, THINKING_PLACEHOLDER)
            self._notify_update()

            request = self._builder.build(context, history)
            self._debug("info", f"Sending {len(request.contents)} entries to {self._client.model}")
            try:
                result = await self._client.send(request, self._credential_getter())
                reply = result.text
                if not result.ok:
                    self._debug("error", f"Model call failed: {reply}")
            except Exception as e:
                self._debug("error", f"Exception: {e}")
                reply = f"Error: {e}"

            conversation.replace(placeholder_id, reply)
            self._notify_update()
            return conversation.last()
        finally:
            self._state.busy = False
