from abc import ABC, abstractmethod
from typing import Any

from .models import ModelResult, OutboundRequest


class ModelClient(ABC):
    """Abstract base class for remote model clients.

    This module hides the design decision of how the remote model is reached.
    Implementations must handle provider-specific details like:
    - Endpoint construction and authentication
    - Request serialization and response parsing
    - Turning every failure into readable text

    send() never raises: failures come back as ModelResult(ok=False).

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            result = await client.send(request, credential)
        # Automatically cleaned up
    """

    @abstractmethod
    async def send(self, request: OutboundRequest, credential: str) -> ModelResult:
        """Send a request and wait for the complete reply.

        Args:
            request: Request built by RequestBuilder
            credential: API key read from the environment at call time

        Returns:
            ModelResult holding either the reply text or an error message
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    @property
    @abstractmethod
    def model(self) -> str:
        """Get the model identifier."""
        pass

    async def __aenter__(self) -> "ModelClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
