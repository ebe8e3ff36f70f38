"""Endpoint POST /api/decide — adapter HTTP do DecisionEngine."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.validators.decide import parse_decision_request
from app.bootstrap import get_decision_engine
from app.observability import get_correlation_id, record_latency, record_verdict
from utils.errors import MalformedDecisionRequestError

if TYPE_CHECKING:
    from app.services.decision_engine import DecisionEngine

logger = logging.getLogger(__name__)

router = APIRouter()


class DecideResponse(BaseModel):
    """Veredito serializado."""

    answer: Literal["YES", "NO"]


class DecideErrorResponse(BaseModel):
    """Erro de cliente ou interno (nunca um veredito)."""

    error: str


@router.post(
    "/decide",
    response_model=DecideResponse,
    responses={400: {"model": DecideErrorResponse}, 500: {"model": DecideErrorResponse}},
)
async def decide(request: Request) -> JSONResponse:
    """Recebe `{"question": str}` e responde `{"answer": "YES"|"NO"}`."""
    started_at = time.perf_counter()
    raw_body = await request.body()

    try:
        decision_request = parse_decision_request(raw_body)
    except MalformedDecisionRequestError as exc:
        logger.warning(
            "decision_request_rejected",
            extra={"component": "decide_endpoint", "reason": exc.code},
        )
        return JSONResponse({"error": exc.code}, status_code=400)
    except Exception as exc:
        return _internal_error(exc)

    try:
        engine = _resolve_engine(request)
        verdict = engine.decide(decision_request)
    except Exception as exc:
        return _internal_error(exc)

    answer = verdict.answer.value
    correlation_id = get_correlation_id()
    logger.info(
        "decision_served",
        extra={
            "component": "decide_endpoint",
            "answer": answer,
            "strategy": engine.strategy_name,
            "question_length": len(decision_request.question),
        },
    )
    record_verdict(answer, engine.strategy_name, correlation_id)
    record_latency(
        "decide_endpoint",
        "decide",
        (time.perf_counter() - started_at) * 1000,
        correlation_id,
    )
    return JSONResponse(DecideResponse(answer=answer).model_dump(), status_code=200)


def _resolve_engine(request: Request) -> DecisionEngine:
    engine = getattr(request.app.state, "decision_engine", None)
    return engine if engine is not None else get_decision_engine()


def _internal_error(exc: Exception) -> JSONResponse:
    logger.exception(
        "decision_failed",
        extra={"component": "decide_endpoint", "error_type": type(exc).__name__},
    )
    return JSONResponse({"error": "internal_error"}, status_code=500)
