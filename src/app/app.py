"""Entrypoint da aplicação Decision Maker.

Expõe a aplicação ASGI (FastAPI) com POST /api/decide e health checks.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import CorrelationIdMiddleware
from api.routes import create_api_router
from api.routes.health.router import SERVICE_VERSION
from app.bootstrap import get_decision_engine, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Logging antes de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings e publica o DecisionEngine em app.state."""
    logger.info("app_starting", extra={"service": get_base_settings().service_name})
    validate_runtime_settings()
    app.state.decision_engine = get_decision_engine()

    yield

    logger.info("app_shutting_down", extra={"service": get_base_settings().service_name})
    app.state.decision_engine = None


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="Decision Maker",
        description="Responde YES ou NO para perguntas de sim/não",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )
    fastapi_app.add_middleware(CorrelationIdMiddleware)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": settings.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting Decision Maker in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=get_base_settings().debug,
    )


if __name__ == "__main__":
    main()
