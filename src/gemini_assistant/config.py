"""Configuration constants and environment readers.

Centralizes magic strings and environment variable names so the rest of
the package never calls os.getenv directly.
"""

import os

# Environment variable names
API_KEY_ENV = "GEMINI_API_KEY"
MODEL_ENV = "GEMINI_MODEL"
HOST_ENV = "GEMINI_API_HOST"
TIMEOUT_ENV = "GEMINI_TIMEOUT"
LANGUAGE_ENV = "GEMINI_ASSISTANT_LANGUAGE"

# Defaults
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_HOST = "generativelanguage.googleapis.com"
DEFAULT_TIMEOUT = 60.0  # Seconds; httpx's own 5s default is too short for generation
DEFAULT_LANGUAGE = "R"

# Conversation
THINKING_PLACEHOLDER = "Thinking..."
NO_RESPONSE_FALLBACK = "No response generated. Please try again."
MISSING_KEY_MESSAGE = (
    f"Error: {API_KEY_ENV} is not set. "
    f"Export {API_KEY_ENV}=your_api_key or add it to a .env file."
)

# Context capture
NO_CODE_PLACEHOLDER = "No code available in editor"
CONTEXT_ERROR_TEXT = "Error retrieving code context from editor"
CONTEXT_PREVIEW_LENGTH = 50  # Characters shown in the welcome message


def read_credential() -> str:
    """Read the API key from the environment at call time.

    Returns an empty string when unset so callers can report it as a
    recoverable configuration problem.
    """
    return os.getenv(API_KEY_ENV, "").strip()


def read_model() -> str:
    return os.getenv(MODEL_ENV, DEFAULT_MODEL)


def read_host() -> str:
    return os.getenv(HOST_ENV, DEFAULT_HOST)


def read_timeout() -> float:
    """Read the HTTP timeout, falling back to the default on bad values."""
    raw = os.getenv(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT


def read_language() -> str:
    return os.getenv(LANGUAGE_ENV, DEFAULT_LANGUAGE)
