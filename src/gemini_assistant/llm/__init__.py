from .base import ModelClient
from .errors import (
    CredentialMissingError,
    ModelClientError,
    NetworkFailureError,
    RemoteApiError,
)
from .factory import create_model_client
from .models import Content, ModelResult, OutboundRequest, Part
from .providers import GeminiClient
from .request_builder import RequestBuilder

__all__ = [
    "ModelClient",
    "create_model_client",
    "Content",
    "ModelResult",
    "OutboundRequest",
    "Part",
    "RequestBuilder",
    "GeminiClient",
    "ModelClientError",
    "CredentialMissingError",
    "NetworkFailureError",
    "RemoteApiError",
]
