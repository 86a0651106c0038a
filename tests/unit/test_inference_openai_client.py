"""Unit tests for the OpenAI-backed inference client."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from release_summarizer.inference.openai_client import OpenAIInferenceClient


def completion(*contents: str | None) -> SimpleNamespace:
    """Build a stand-in for a chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content)) for content in contents])


@pytest.fixture
def openai_client() -> MagicMock:
    """A mocked AsyncOpenAI client."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion("* summary"))
    client.images.generate = AsyncMock(return_value=SimpleNamespace(data=[SimpleNamespace(url="https://images.example/a.png")]))
    return client


@pytest.mark.asyncio
async def test_predict_joins_segments(openai_client: MagicMock) -> None:
    """Test that prompt segments are sent as one user message."""
    inference = OpenAIInferenceClient(openai_client, model="test-model")

    result = await inference.predict("first ", "second", " third")

    assert result == "* summary"
    openai_client.chat.completions.create.assert_awaited_once_with(
        model="test-model",
        messages=[{"role": "user", "content": "first second third"}],
    )


@pytest.mark.asyncio
async def test_predict_uses_first_choice(openai_client: MagicMock) -> None:
    """Test that the first choice is returned when several are produced."""
    openai_client.chat.completions.create.return_value = completion("first", "second")
    assert await OpenAIInferenceClient(openai_client).predict("prompt") == "first"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        pytest.param(completion(), id="no choices"),
        pytest.param(completion(None), id="no content"),
    ],
)
async def test_predict_empty(openai_client: MagicMock, response: SimpleNamespace) -> None:
    """Test that an empty completion yields None."""
    openai_client.chat.completions.create.return_value = response
    assert await OpenAIInferenceClient(openai_client).predict("prompt") is None


@pytest.mark.asyncio
async def test_generate_image(openai_client: MagicMock) -> None:
    """Test that one image is requested with the configured model and size."""
    inference = OpenAIInferenceClient(openai_client, image_model="image-model", image_size="512x512")

    response = await inference.generate_image("A robot. No text. Style of Yoda")

    assert response.data[0].url == "https://images.example/a.png"
    openai_client.images.generate.assert_awaited_once_with(model="image-model", prompt="A robot. No text. Style of Yoda", n=1, size="512x512")


def test_create_configures_client(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that create passes credentials to AsyncOpenAI and keeps the limits."""
    async_openai = MagicMock()
    monkeypatch.setattr("release_summarizer.inference.openai_client.AsyncOpenAI", async_openai)

    inference = OpenAIInferenceClient.create("sk-test", base_url="https://llm.example/v1", model="m", image_model="i", max_input_length=500)

    async_openai.assert_called_once_with(api_key="sk-test", base_url="https://llm.example/v1")
    assert inference.client is async_openai.return_value
    assert (inference.model, inference.image_model, inference.max_input_length) == ("m", "i", 500)
