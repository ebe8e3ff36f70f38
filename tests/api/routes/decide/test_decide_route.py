"""Testes do handler de POST /api/decide chamado diretamente."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest
from starlette.requests import Request

from api.routes.decide.router import decide
from app.domain.decision import Verdict
from app.services.decision_engine import DecisionEngine
from app.services.decision_strategies import QuestionHashDecisionStrategy
from tests.fakes.fake_decision_strategy import (
    ExplodingDecisionStrategy,
    FixedDecisionStrategy,
)


def _build_request(body: bytes, state: SimpleNamespace | None = None) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/api/decide",
        "raw_path": b"/api/decide",
        "query_string": b"",
        "headers": [(b"content-type", b"application/json")],
        "app": SimpleNamespace(state=state or SimpleNamespace()),
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _payload(response: Any) -> dict[str, Any]:
    return json.loads(response.body.decode("utf-8"))


@pytest.mark.asyncio
async def test_returns_verdict_from_engine_in_app_state() -> None:
    strategy = FixedDecisionStrategy(Verdict.NO)
    state = SimpleNamespace(decision_engine=DecisionEngine(strategy))

    response = await decide(_build_request(b'{"question": "Vou?"}', state))

    assert response.status_code == 200
    assert _payload(response) == {"answer": "NO"}
    assert strategy.questions == ["Vou?"]


@pytest.mark.asyncio
async def test_falls_back_to_bootstrap_engine_without_state() -> None:
    response = await decide(_build_request(b'{"question": "Should I eat pizza tonight?"}'))

    assert response.status_code == 200
    assert _payload(response)["answer"] in ("YES", "NO")


@pytest.mark.asyncio
async def test_empty_question_is_accepted() -> None:
    response = await decide(_build_request(b'{"question": ""}'))

    assert response.status_code == 200
    assert _payload(response)["answer"] in ("YES", "NO")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "code"),
    [
        (b"not json", "malformed_json"),
        (b'"not json"', "invalid_payload"),
        (b"{}", "missing_question"),
        (b'{"question": 1}', "invalid_question"),
        pytest.param(b"[" * 200_000 + b"]" * 200_000, "malformed_json", id="deeply_nested"),
    ],
)
async def test_malformed_requests_return_400(body: bytes, code: str) -> None:
    strategy = FixedDecisionStrategy()
    state = SimpleNamespace(decision_engine=DecisionEngine(strategy))

    response = await decide(_build_request(body, state))

    assert response.status_code == 400
    assert _payload(response) == {"error": code}
    assert strategy.questions == []


@pytest.mark.asyncio
async def test_unexpected_failure_is_contained_at_handler() -> None:
    state = SimpleNamespace(decision_engine=DecisionEngine(ExplodingDecisionStrategy()))

    response = await decide(_build_request(b'{"question": "q"}', state))

    assert response.status_code == 500
    assert _payload(response) == {"error": "internal_error"}


@pytest.mark.asyncio
async def test_question_text_is_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    state = SimpleNamespace(decision_engine=DecisionEngine(FixedDecisionStrategy()))

    with caplog.at_level("INFO"):
        await decide(_build_request(b'{"question": "segredo pessoal"}', state))

    served = [r for r in caplog.records if r.getMessage() == "decision_served"]
    assert len(served) == 1
    assert served[0].answer == "YES"
    assert served[0].strategy == "fixed"
    assert served[0].question_length == len("segredo pessoal")
    assert all("segredo pessoal" not in repr(r.__dict__) for r in caplog.records)


@pytest.mark.asyncio
async def test_lone_surrogate_question_gets_hash_verdict() -> None:
    state = SimpleNamespace(decision_engine=DecisionEngine(QuestionHashDecisionStrategy()))

    response = await decide(_build_request(b'{"question": "\\ud800"}', state))

    assert response.status_code == 200
    assert _payload(response)["answer"] in ("YES", "NO")


@pytest.mark.asyncio
async def test_unexpected_parse_failure_is_contained_at_handler(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _boom(raw_body: bytes) -> None:
        raise RuntimeError("parser")

    monkeypatch.setattr("api.routes.decide.router.parse_decision_request", _boom)
    strategy = FixedDecisionStrategy()
    state = SimpleNamespace(decision_engine=DecisionEngine(strategy))

    response = await decide(_build_request(b'{"question": "q"}', state))

    assert response.status_code == 500
    assert _payload(response) == {"error": "internal_error"}
    assert strategy.questions == []
