"""Pytest configuration and shared fixtures."""
import json

import httpx
import pytest

from gemini_assistant.context import EditorBridge, EditorUnavailableError
from gemini_assistant.llm import GeminiClient


class FakeEditor(EditorBridge):
    """In-memory editor whose state tests set directly."""

    def __init__(self, selection: str = "", document: str = "", error: str | None = None):
        self.selection = selection
        self.document = document
        self.error = error
        self.activations = 0

    def activate_source(self) -> None:
        self.activations += 1

    def get_selection(self) -> str:
        if self.error:
            raise EditorUnavailableError(self.error)
        return self.selection

    def get_document(self) -> str:
        if self.error:
            raise EditorUnavailableError(self.error)
        return self.document

    @property
    def editor_type(self) -> str:
        return "fake"


def gemini_reply(text: str) -> dict:
    """Build a successful generateContent response body."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a response."""

    def __init__(self, status_code: int = 200, body: object | None = None, raw: bytes | None = None):
        self.status_code = status_code
        self.body = body
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_editor():
    """Editor holding a small R document and no selection."""
    return FakeEditor(document="x <- 1\ny <- x + 1\nprint(y)")


@pytest.fixture
def make_client():
    """Factory for GeminiClient instances backed by a mock transport."""
    def _make(handler, **kwargs) -> GeminiClient:
        return GeminiClient(transport=httpx.MockTransport(handler), **kwargs)
    return _make


@pytest.fixture
def sample_r_file(tmp_path):
    """Create a temporary R script."""
    path = tmp_path / "analysis.R"
    path.write_text("library(dplyr)\n\ndf <- mtcars\nsummary(df)\nplot(df$mpg)\n")
    return path
