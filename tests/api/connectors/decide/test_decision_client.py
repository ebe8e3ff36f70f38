"""Testes do DecisionClient com transporte httpx simulado."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.decide import DecisionClient, DecisionClientConfig
from app.domain.decision import Verdict


def _client(handler) -> DecisionClient:
    return DecisionClient(
        DecisionClientConfig(base_url="http://decider.test"),
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_posts_question_and_returns_verdict() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"answer": "YES"})

    verdict = await _client(handler).ask("Should I eat pizza tonight?")

    assert verdict is Verdict.YES
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/api/decide"
    assert seen[0].headers["content-type"] == "application/json"
    assert json.loads(seen[0].content) == {"question": "Should I eat pizza tonight?"}


@pytest.mark.asyncio
@pytest.mark.parametrize("question", ["", "   ", "\n\t"])
async def test_blank_question_sends_nothing(question: str) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    assert await _client(handler).ask(question) is None


@pytest.mark.asyncio
async def test_transport_error_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    assert await _client(handler).ask("q") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(400, json={"error": "missing_question"}),
        httpx.Response(500, json={"error": "internal_error"}),
        httpx.Response(200, content=b"not json"),
        httpx.Response(200, json={"answer": "MAYBE"}),
        httpx.Response(200, json={}),
        httpx.Response(200, json=["YES"]),
    ],
)
async def test_unusable_responses_return_none(response: httpx.Response) -> None:
    assert await _client(lambda request: response).ask("q") is None
