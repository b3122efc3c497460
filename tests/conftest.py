import json

import httpx
import pytest

from quickask.config import Settings
from quickask.invoker import CompletionInvoker
from quickask.llm import OpenAIClient

VALID_KEY = "sk-test"


def completion_body(content="Dublin", model="gpt-4", choices=1):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": i,
                "message": {"role": "assistant", "content": content if i == 0 else f"{content} ({i})"},
                "finish_reason": "stop"
            }
            for i in range(choices)
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 3, "total_tokens": 15}
    }


def error_body(message, code=None, type_="invalid_request_error"):
    return {"error": {"message": message, "type": type_, "param": None, "code": code}}


class FakeChatAPI:
    """Stands in for the remote chat-completions endpoint and records every call."""

    known_models = {"gpt-4", "gpt-3.5-turbo"}

    def __init__(self):
        self.requests = []
        self.content = "Dublin"
        self.status_override = None

    def payloads(self):
        return [json.loads(r.content) for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.status_override is not None:
            return httpx.Response(self.status_override, json=error_body("Rate limit reached", type_="requests"))

        if request.headers.get("Authorization") != f"Bearer {VALID_KEY}":
            return httpx.Response(401, json=error_body("Incorrect API key provided", code="invalid_api_key"))

        payload = json.loads(request.content)
        if payload["model"] not in self.known_models:
            return httpx.Response(
                404,
                json=error_body(f"The model `{payload['model']}` does not exist", code="model_not_found")
            )
        if not payload["messages"]:
            return httpx.Response(400, json=error_body("[] is too short - 'messages'"))

        return httpx.Response(200, json=completion_body(self.content, payload["model"]))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("API_KEY", "OPENAI_API_KEY", "OPENAI_BASE_URL", "API_BASE", "QUICKASK_VARIANT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_api():
    return FakeChatAPI()


@pytest.fixture
def make_invoker(fake_api):
    def _make(api_key=VALID_KEY):
        settings = Settings(api_key=api_key, _env_file=None)
        llm = OpenAIClient(
            settings.api_key,
            settings.api_base,
            http_client=httpx.Client(transport=httpx.MockTransport(fake_api))
        )
        return CompletionInvoker(settings, llm)

    return _make
