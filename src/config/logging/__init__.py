"""Logging JSON do decision-maker.

Cada linha é um objeto JSON com asctime, level, logger, message,
correlation_id e service. O correlation_id vem do header X-Correlation-ID
(ou é gerado pelo middleware). Eventos do endpoint: decision_served,
decision_request_rejected e decision_failed; métricas saem como
metric_latency e metric_verdict.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
