"""Métricas via structured logging.

As métricas saem como logs JSON e são agregadas fora do processo.

- metric_latency: tempo de atendimento por componente/operação
- metric_verdict: contagem de vereditos por estratégia
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "decide_endpoint")
        operation: Nome da operação (ex: "decide")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_verdict(
    answer: str,
    strategy: str,
    correlation_id: str | None = None,
) -> None:
    """Registra um veredito servido (counter)."""
    logger.info(
        "metric_verdict",
        extra={
            "metric_type": "counter",
            "answer": answer,
            "strategy": strategy,
            "correlation_id": correlation_id,
        },
    )
