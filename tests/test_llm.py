# File: tests/test_llm.py

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from onboard.services.llm import OpenAICompletionClient, ServiceUnavailableError


def _response(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _client_with(create) -> OpenAICompletionClient:
    client = OpenAICompletionClient("sk-test", model="gpt-test")
    client._client = MagicMock()
    client._client.chat.completions.create = create
    return client


def test_missing_api_key_is_unavailable():
    client = OpenAICompletionClient(None)

    with pytest.raises(ServiceUnavailableError):
        client.complete("hello", 10)


def test_complete_returns_stripped_text():
    create = MagicMock(return_value=_response("  Founder \n"))
    client = _client_with(create)

    assert client.complete("which path?", 100) == "Founder"
    kwargs = create.call_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["max_tokens"] == 100
    assert kwargs["messages"] == [{"role": "user", "content": "which path?"}]


def test_empty_choices_and_null_content():
    assert _client_with(MagicMock(return_value=SimpleNamespace(choices=[]))).complete("x", 5) == ""
    assert _client_with(MagicMock(return_value=_response(None))).complete("x", 5) == ""


def test_sdk_errors_become_unavailable():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    create = MagicMock(side_effect=openai.APIConnectionError(request=request))
    client = _client_with(create)

    with pytest.raises(ServiceUnavailableError):
        client.complete("x", 5)


def test_from_settings(settings):
    configured = settings.model_copy(update={"openai_api_key": "sk-test", "openai_model": "gpt-x"})

    client = OpenAICompletionClient.from_settings(configured)

    assert client.model == "gpt-x"
    assert client._client is not None
