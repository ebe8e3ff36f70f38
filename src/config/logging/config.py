"""Setup do logging do decision-maker: um único handler JSON no root.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, em app.bootstrap.initialize_app()
    configure_logging(level="INFO", service_name="decision_maker")

    # No endpoint
    logger = get_logger(__name__)
    logger.info("decision_served", extra={"answer": "YES", "question_length": 4})

O texto da pergunta nunca entra em log: só tamanho, veredito e estratégia.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "decision_maker"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no logger raiz.

    Args:
        level: Nível de log (case insensitive).
        service_name: Valor do campo `service` em todo log.
        correlation_id_getter: Função que retorna o correlation_id corrente.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes (evita logs duplicados em reload)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um valor padrão foi usado no lugar do configurado.

    Args:
        logger: Logger instance.
        component: Componente afetado (ex: "decision_strategy").
        reason: Motivo curto, sem PII (ex: "invalid_settings").
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.warning("Fallback applied for %s", component, extra=extra)
