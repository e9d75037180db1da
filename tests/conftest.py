import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from Advisory.core.config import settings
from Advisory.services.chatbot.chatbot_prompt import prompt_cache
from Advisory.services.chatbot.chatbot_routes import get_upstream_client


class FakeUpstream:
    """Records outbound completion calls and answers with a canned response."""

    def __init__(self):
        self.calls = []
        self.response = httpx.Response(
            200, json={"choices": [{"message": {"content": "hello"}}]}
        )
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def prompt_file(tmp_path):
    path = tmp_path / "system_prompt.txt"
    path.write_text("  Be brief.\n\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def chat_settings(monkeypatch, prompt_file):
    monkeypatch.setattr(settings, "FEATHERLESS_API_KEY", "test-key")
    monkeypatch.setattr(settings, "SYSTEM_PROMPT_PATH", str(prompt_file))
    monkeypatch.setattr(settings, "SYSTEM_PROMPT_ENABLED", True)
    prompt_cache.clear()
    yield settings
    prompt_cache.clear()


@pytest.fixture
def upstream():
    fake = FakeUpstream()

    async def override():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake)) as client:
            yield client

    app.dependency_overrides[get_upstream_client] = override
    yield fake
    app.dependency_overrides.pop(get_upstream_client, None)


@pytest.fixture
def client(upstream):
    with TestClient(app) as c:
        yield c
