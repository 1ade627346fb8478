"""Google Gemini model client over the generateContent REST endpoint.

Reference: https://ai.google.dev/api/generate-content

A single POST per call: no retry, no streaming. The API key travels as the
``key`` query parameter.
"""

from typing import Any

import httpx

from ...config import (
    API_KEY_ENV,
    DEFAULT_HOST,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    MISSING_KEY_MESSAGE,
    NO_RESPONSE_FALLBACK,
)
from ..base import ModelClient
from ..errors import (
    CredentialMissingError,
    ModelClientError,
    NetworkFailureError,
    RemoteApiError,
)
from ..models import ModelResult, OutboundRequest


class GeminiClient(ModelClient):
    """Gemini REST client.

    Hidden design decisions:
    - Endpoint URL layout and key-as-query-parameter authentication
    - Error envelope parsing
    - Reply extraction from the first candidate
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        host: str = DEFAULT_HOST,
        timeout: float | None = DEFAULT_TIMEOUT,
        **client_kwargs: Any
    ):
        """Initialize Gemini client.

        Args:
            model: Model id placed in the endpoint path (e.g. gemini-2.0-flash)
            host: API host name
            timeout: HTTP timeout in seconds (None disables it)
            **client_kwargs: Additional kwargs for httpx.AsyncClient (e.g. transport)
        """
        self._model = model
        self._host = host
        self._client = httpx.AsyncClient(timeout=timeout, **client_kwargs)
        self._debug_callback: Any | None = None

    @property
    def model(self) -> str:
        """Get the model id."""
        return self._model

    @property
    def endpoint(self) -> str:
        return f"https://{self._host}/v1/models/{self._model}:generateContent"

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback, Callable(level, component, message)."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "LLM", message)

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_message(body: Any, status_code: int) -> str:
        """Pull error.message out of an error envelope."""
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                message = error.get("message")
                if isinstance(message, str) and message:
                    return message
        return f"API Error: {status_code}"

    @staticmethod
    def _extract_text(body: Any) -> str | None:
        """Get candidates[0].content.parts[0].text, or None if the path is missing."""
        try:
            text = body["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None

    async def _post(self, request: OutboundRequest, credential: str) -> str:
        """Perform the HTTP call.

        Raises:
            CredentialMissingError: If the credential is empty
            NetworkFailureError: If no response arrived
            RemoteApiError: If the API returned a non-200 status
        """
        if not credential:
            raise CredentialMissingError(MISSING_KEY_MESSAGE)

        self._debug("info", f"POST {self.endpoint} ({len(request.contents)} entries)")
        try:
            response = await self._client.post(
                self.endpoint,
                params={"key": credential},
                headers={"Content-Type": "application/json"},
                json=request.to_payload(),
            )
        except httpx.TimeoutException as e:
            raise NetworkFailureError(f"Network error: request timed out ({e})") from e
        except httpx.RequestError as e:
            raise NetworkFailureError(f"Network error: {e}") from e

        self._debug("info", f"Response status {response.status_code}")
        body = self._parse_json(response)

        if response.status_code != 200:
            raise RemoteApiError(
                self._error_message(body, response.status_code),
                status_code=response.status_code,
            )

        text = self._extract_text(body)
        if text is None:
            self._debug("warning", "Response had no candidate text")
            return NO_RESPONSE_FALLBACK
        return text

    async def send(self, request: OutboundRequest, credential: str) -> ModelResult:
        """Send a generateContent request.

        Args:
            request: Request built by RequestBuilder
            credential: Value of the API key environment variable

        Returns:
            ModelResult with reply text, or error text when ok is False
        """
        try:
            text = await self._post(request, credential)
        except CredentialMissingError as e:
            self._debug("error", f"{API_KEY_ENV} is not set")
            return ModelResult(ok=False, text=str(e))
        except RemoteApiError as e:
            self._debug("error", f"API error {e.status_code}: {e}")
            return ModelResult(ok=False, text=str(e), status_code=e.status_code)
        except ModelClientError as e:
            self._debug("error", str(e))
            return ModelResult(ok=False, text=str(e))

        return ModelResult(ok=True, text=text, status_code=200)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
