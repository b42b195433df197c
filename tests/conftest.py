import httpx
import pytest
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from config.settings import Settings


@pytest.fixture
def settings():
    s = Settings()
    s.gemini_api_key = "test-gemini-key"
    s.groq_api_key = "test-groq-key"
    s.gemini_flash_model = "gemini-flash-test"
    s.gemini_pro_model = "gemini-pro-test"
    s.groq_api_url = "https://groq.test/openai/v1/chat/completions"
    return s


class FakeGemini:
    """Stands in for the chat model and records every prompt it receives."""

    def __init__(self, reply="Namaste!"):
        self.reply = reply
        self.calls = []

    def factory(self, settings, model_name):
        def respond(prompt_value):
            self.calls.append((model_name, prompt_value.to_messages()))
            if isinstance(self.reply, Exception):
                raise self.reply
            return AIMessage(content=self.reply)

        return RunnableLambda(respond)


@pytest.fixture
def fake_gemini():
    return FakeGemini()


class GroqRecorder:
    def __init__(self, body=None, status_code=200, raw=None, error=None):
        self.body = body if body is not None else {
            "choices": [{"message": {"role": "assistant", "content": "Turbo reply"}}]
        }
        self.status_code = status_code
        self.raw = raw
        self.error = error
        self.requests = []

    def handler(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    def client(self):
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def groq():
    return GroqRecorder()
