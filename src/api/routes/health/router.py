"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

SERVICE_VERSION = "1.0.0"

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = SERVICE_VERSION


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    detail: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "detail": self.detail}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: pronto quando há DecisionEngine no app.state."""
    engine_check = _check_decision_engine(
        getattr(request.app.state, "decision_engine", None)
    )
    ready = engine_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"decision_engine": engine_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_decision_engine(engine: Any | None) -> DependencyCheck:
    if engine is None:
        return DependencyCheck(status="failed", detail="not_configured")
    return DependencyCheck(status="ok", detail=getattr(engine, "strategy_name", None))
