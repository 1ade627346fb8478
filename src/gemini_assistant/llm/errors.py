"""Errors raised inside model clients.

They never leave ModelClient.send; each one is turned into a failed
ModelResult whose text is the exception message.
"""


class ModelClientError(Exception):
    """Base class for model client failures."""


class CredentialMissingError(ModelClientError):
    """The API credential is empty or unset."""


class RemoteApiError(ModelClientError):
    """The API answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class NetworkFailureError(ModelClientError):
    """No response arrived (connection refused, timeout, ...)."""
