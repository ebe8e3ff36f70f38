"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta a
estratégia configurada ao DecisionEngine.

Uso:
    from app.bootstrap import initialize_app, get_decision_engine

    initialize_app()
    engine = get_decision_engine()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from app.observability import get_correlation_id
from app.services.decision_engine import DecisionEngine
from app.services.decision_strategies import build_strategy
from config.logging import configure_logging, log_fallback
from config.settings import DecisionSettings, get_base_settings, get_decision_settings
from utils.errors import ConfigurationError

SERVICE_NAME = "decision_maker"

DEFAULT_LOG_LEVEL = "INFO"
LENIENT_VALIDATION_ENV = "development"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamada uma vez no startup."""
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validate() de todas as settings."""
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"decision: {error}" for error in get_decision_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Só `development` tolera settings inválidas (apenas registra alerta).
    Qualquer outro ambiente, inclusive um ENVIRONMENT desconhecido, falha
    rápido para impedir boot inválido.

    Raises:
        ConfigurationError: Em ambiente estrito com settings inválidas.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment != LENIENT_VALIDATION_ENV:
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfigurationError(f"Configuração inválida para {environment}:\n{details}")


def create_decision_engine(settings: DecisionSettings) -> DecisionEngine:
    """Cria o engine com a estratégia configurada.

    Settings inválidas caem na estratégia padrão (random 50/50);
    `validate_runtime_settings` já barrou esse caso em ambiente estrito.
    """
    if settings.validate():
        log_fallback(logger, "decision_strategy", reason="invalid_settings")
        return DecisionEngine()

    strategy = build_strategy(
        settings.strategy,
        yes_probability=settings.yes_probability,
        hash_salt=settings.hash_salt,
    )
    logger.info(
        "decision_engine_ready",
        extra={"component": "bootstrap", "strategy": strategy.name},
    )
    return DecisionEngine(strategy)


@lru_cache(maxsize=1)
def get_decision_engine() -> DecisionEngine:
    """Obtém o DecisionEngine do processo (singleton sem estado mutável)."""
    return create_decision_engine(get_decision_settings())
