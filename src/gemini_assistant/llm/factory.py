from typing import Any

from .base import ModelClient
from .providers import GeminiClient


def create_model_client(provider: str = "gemini", **config: Any) -> ModelClient:
    """Create a model client instance.

    This factory function hides the instantiation logic for model clients.

    Args:
        provider: Provider type (only 'gemini' is available)
        **config: Provider-specific configuration
            For Gemini:
                - model: str (default: 'gemini-2.0-flash')
                - host: str (default: 'generativelanguage.googleapis.com')
                - timeout: float | None (default: 60.0)

    Returns:
        Initialized model client

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> client = create_model_client(
        ...     "gemini",
        ...     model="gemini-2.0-flash"
        ... )
    """
    if provider.lower() == "gemini":
        return GeminiClient(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )
