import asyncio
from types import SimpleNamespace

import pytest

from link_herald.clients import oai


def _completion(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def fake_create(monkeypatch):
    calls = []
    state = {"response": _completion("  Summary text \n")}

    async def create(**kwargs):
        calls.append(kwargs)
        if isinstance(state["response"], Exception):
            raise state["response"]
        return state["response"]

    fake_client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    monkeypatch.setattr(oai, "aoai", fake_client)
    return calls, state


MESSAGES = [{"role": "system", "content": "s"}, {"role": "user", "content": "u"}]


def test_api_base_url():
    assert oai.api_base_url("https://api.openai.com/v1/chat/completions") == "https://api.openai.com/v1"
    assert oai.api_base_url("https://llm.local/v1/chat/completions/") == "https://llm.local/v1"
    assert oai.api_base_url("https://llm.local/v1") == "https://llm.local/v1"


def test_generate_summary_request_shape(fake_create):
    calls, _ = fake_create

    text = asyncio.run(oai.generate_summary(MESSAGES))

    assert text == "Summary text"
    assert calls == [
        {
            "model": oai.core.AI_MODEL,
            "messages": MESSAGES,
            "max_tokens": 300,
            "temperature": 0.5,
        }
    ]


def test_generate_summary_uses_first_choice(fake_create):
    _, state = fake_create
    state["response"] = _completion("first", "second")

    assert asyncio.run(oai.generate_summary(MESSAGES)) == "first"


@pytest.mark.parametrize(
    "response",
    [
        SimpleNamespace(choices=[]),
        SimpleNamespace(),
        SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=None))]),
        SimpleNamespace(choices=[SimpleNamespace(message=None)]),
    ],
)
def test_generate_summary_malformed_response(fake_create, response):
    _, state = fake_create
    state["response"] = response

    assert asyncio.run(oai.generate_summary(MESSAGES)) is None


def test_generate_summary_propagates_api_errors(fake_create):
    _, state = fake_create
    state["response"] = RuntimeError("429 Too Many Requests")

    with pytest.raises(RuntimeError):
        asyncio.run(oai.generate_summary(MESSAGES))
