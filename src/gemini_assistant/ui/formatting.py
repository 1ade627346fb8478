"""Text formatting utilities for the TUI.

Pure text transformations; nothing here touches the conversation state.
"""

from ..config import CONTEXT_PREVIEW_LENGTH

# Line prefixes that mark a reply as bare code rather than prose
CODE_INDICATORS = (
    "library(", "function(", "def ", "class ", "import ", "from ",
    "async def ", "for ", "while ", "if (", "return ",
)


def context_preview(text: str, limit: int = CONTEXT_PREVIEW_LENGTH) -> str:
    """Shorten captured code for the welcome message."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def looks_like_code(text: str) -> bool:
    """Check if a reply is unfenced multi-line code."""
    stripped = text.strip()
    if "```" in stripped or "\n" not in stripped:
        return False
    first_line = stripped.split("\n", 1)[0]
    return first_line.startswith(CODE_INDICATORS) or "<-" in first_line


def as_markdown(text: str, language: str = "") -> str:
    """Prepare an assistant reply for the Markdown widget.

    Replies that are bare code are wrapped in a fence so they keep their
    layout; everything else is already Markdown (fences, inline code).
    """
    if looks_like_code(text):
        return f"```{language.lower()}\n{text.strip()}\n```"
    return text


def welcome_text(context_text: str) -> str:
    """Text shown while the conversation is still empty."""
    return (
        "Welcome to Gemini Assistant. Start by sending a message.\n\n"
        f"Current code context: {context_preview(context_text)}"
    )
