# File: tests/test_path_classifier.py

import pytest

from onboard.services.path_classifier import PathClassifier
from onboard.services.llm import ServiceUnavailableError
from tests.conftest import FakeCompletionClient


def _classify(replies, role="Engineer"):
    return PathClassifier(FakeCompletionClient(replies)).classify(role, "1-5 people", "Ship faster")


def test_exact_reply():
    assert _classify(["Sales Lead"]) == "Sales Lead"


def test_label_inside_prose():
    assert _classify(["I would suggest the Marketing Manager path."]) == "Marketing Manager"


def test_first_label_in_catalog_order_wins():
    # Founder appears first in the text, but Operations Manager comes first in the catalog.
    assert _classify(["Founder, or maybe Operations Manager"]) == "Operations Manager"


@pytest.mark.parametrize("reply", ["", "   ", "Astronaut"])
def test_unusable_reply_falls_back_to_role(reply):
    assert _classify([reply], role="Support Manager") == "Support Manager"


@pytest.mark.parametrize("reply", ["", "Astronaut"])
def test_unusable_reply_and_unknown_role_uses_default(reply):
    assert _classify([reply], role="Engineer") == "Operations Manager"


def test_unreachable_service_is_deterministic():
    results = {_classify([ServiceUnavailableError("down")], role="Founder") for _ in range(5)}
    assert results == {"Founder"}

    results = {_classify([], role="CTO") for _ in range(5)}
    assert results == {"Operations Manager"}


def test_role_must_match_exactly_for_fallback():
    assert _classify([], role="founder") == "Operations Manager"


def test_prompt_lists_profile_and_labels():
    client = FakeCompletionClient(["Founder"])
    PathClassifier(client).classify("CEO", "6-20 people", "Grow revenue")

    prompt, max_tokens = client.prompts[0]
    assert max_tokens == 100
    assert "User Role: CEO" in prompt
    assert "Team Size: 6-20 people" in prompt
    assert "Primary Goal: Grow revenue" in prompt
    assert "Operations Manager, Sales Lead, Founder, Support Manager, Marketing Manager" in prompt


def test_welcome_uses_reply():
    client = FakeCompletionClient(["  Welcome aboard, sam!  "])

    assert PathClassifier(client).compose_welcome("sam", "Founder") == "Welcome aboard, sam!"
    assert client.prompts[0][1] == 150


def test_welcome_blank_reply_mentions_path():
    text = PathClassifier(FakeCompletionClient([""])).compose_welcome("sam", "Founder")
    assert text == "Welcome! We're excited to get you started with your Founder journey."


def test_welcome_service_failure():
    text = PathClassifier(FakeCompletionClient([])).compose_welcome("sam", "Founder")
    assert text == "Welcome! We're excited to help you get the most out of our product."


@pytest.mark.parametrize("error", [TimeoutError("read timed out"), RuntimeError("bad response")])
def test_unexpected_client_error_falls_back(error):
    assert _classify([error], role="Founder") == "Founder"
    assert _classify([error], role="CTO") == "Operations Manager"


def test_welcome_unexpected_client_error():
    text = PathClassifier(FakeCompletionClient([ConnectionResetError("reset")])).compose_welcome("sam", "Founder")
    assert text == "Welcome! We're excited to help you get the most out of our product."
