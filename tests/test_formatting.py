"""Unit tests for reply and preview formatting."""
from hypothesis import given
from hypothesis import strategies as st

from gemini_assistant.ui.formatting import (
    as_markdown,
    context_preview,
    looks_like_code,
    welcome_text,
)


class TestContextPreview:
    """Tests for the welcome-message preview."""

    def test_short_text_unchanged(self):
        assert context_preview("x <- 1") == "x <- 1"

    def test_exactly_fifty_chars_unchanged(self):
        text = "a" * 50
        assert context_preview(text) == text

    def test_long_text_truncated(self):
        assert context_preview("b" * 51) == "b" * 50 + "..."

    @given(st.text(min_size=51))
    def test_truncated_preview_is_prefix(self, text: str):
        preview = context_preview(text)
        assert preview.endswith("...")
        assert text.startswith(preview[:-3])
        assert len(preview) == 53


class TestReplyFormatting:
    """Tests for turning replies into Markdown."""

    def test_prose_is_left_alone(self):
        reply = "Use `mean(x)` to average a vector."
        assert as_markdown(reply, "R") == reply

    def test_fenced_reply_is_left_alone(self):
        reply = "Try this:\n\n```r\nx <- 1\n```"
        assert as_markdown(reply, "R") == reply

    def test_bare_r_code_is_fenced(self):
        reply = "x <- c(1, 2, 3)\nmean(x)"
        assert as_markdown(reply, "R") == "```r\nx <- c(1, 2, 3)\nmean(x)\n```"

    def test_bare_python_code_is_fenced(self):
        reply = "def add(a, b):\n    return a + b\n"
        assert as_markdown(reply, "Python") == "```python\ndef add(a, b):\n    return a + b\n```"

    def test_single_line_is_not_code(self):
        assert not looks_like_code("x <- 1")

    def test_prose_first_line_is_not_code(self):
        assert not looks_like_code("Here is the answer.\nx <- 1")


def test_welcome_text_includes_preview():
    text = welcome_text("library(dplyr)\n" + "z" * 60)
    assert text.startswith("Welcome to Gemini Assistant")
    assert text.endswith("...")
    assert "Current code context: library(dplyr)" in text
