"""
Tests for the text-generation transport and the recipe request entrypoint.

`requests.post` is replaced per test; no network access is needed.
"""

import pytest
import requests

from recipe_chef.core.errors import GenerationError, InputError
from recipe_chef.llm import client as llm_client
from recipe_chef.llm.provider_config import LLM_URL, SYSTEM_MESSAGE
from recipe_chef.llm.service import build_payload, request_recipe

from tests.conftest import SCRAMBLE


# =============================================================================
# FIXTURES
# =============================================================================

class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if isinstance(self.body, Exception):
            raise self.body
        return self.body


@pytest.fixture
def fake_post(monkeypatch):
    """Install a recording `requests.post` replacement; set `.response` per test."""

    class Recorder:
        response = FakeResponse(body={"completion": "{}"})
        error = None
        calls = []

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.error is not None:
                raise self.error
            return self.response

    recorder = Recorder()
    recorder.calls = []
    monkeypatch.setattr(llm_client.requests, "post", recorder)
    monkeypatch.delenv("RECIPE_API_KEY", raising=False)
    return recorder


# =============================================================================
# PAYLOAD
# =============================================================================

def test_payload_has_system_and_user_messages():
    payload = build_payload("hello")

    assert payload == {
        "messages": [
            {"role": "system", "content": SYSTEM_MESSAGE},
            {"role": "user", "content": "hello"},
        ]
    }


# =============================================================================
# REQUEST FLOW
# =============================================================================

def test_scramble_scenario(fake_post, fenced_completion):
    fake_post.response = FakeResponse(body={"completion": fenced_completion})

    result = request_recipe("eggs, spinach, feta")

    assert result == SCRAMBLE
    assert len(fake_post.calls) == 1
    url, kwargs = fake_post.calls[0]
    assert url == LLM_URL
    user_message = kwargs["json"]["messages"][1]
    assert user_message["role"] == "user"
    assert "eggs, spinach, feta" in user_message["content"]
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert "Authorization" not in kwargs["headers"]


def test_api_key_is_sent_as_bearer(fake_post, monkeypatch, fenced_completion):
    monkeypatch.setenv("RECIPE_API_KEY", "secret")
    fake_post.response = FakeResponse(body={"completion": fenced_completion})

    request_recipe("eggs")

    assert fake_post.calls[0][1]["headers"]["Authorization"] == "Bearer secret"


@pytest.mark.parametrize("ingredients", ["", "   ", "\n\t", None])
def test_empty_input_makes_no_request(fake_post, ingredients):
    with pytest.raises(InputError):
        request_recipe(ingredients)

    assert fake_post.calls == []


def test_input_error_is_a_generation_error(fake_post):
    with pytest.raises(GenerationError):
        request_recipe("")


def test_network_failure(fake_post):
    fake_post.error = requests.exceptions.ConnectionError("down")

    with pytest.raises(GenerationError):
        request_recipe("eggs")


def test_non_2xx_status(fake_post):
    fake_post.response = FakeResponse(status_code=502, body={"completion": "{}"})

    with pytest.raises(GenerationError):
        request_recipe("eggs")


def test_body_is_not_json(fake_post):
    fake_post.response = FakeResponse(body=ValueError("Expecting value"))

    with pytest.raises(GenerationError):
        request_recipe("eggs")


@pytest.mark.parametrize("body", [{}, {"completion": None}, {"completion": 42}, ["completion"]])
def test_missing_completion(fake_post, body):
    fake_post.response = FakeResponse(body=body)

    with pytest.raises(GenerationError):
        request_recipe("eggs")


def test_refusal_completion(fake_post):
    fake_post.response = FakeResponse(body={"completion": "I cannot help with that."})

    with pytest.raises(GenerationError, match="parse failure"):
        request_recipe("eggs")
