"""JsonFormatter (python-json-logger) das linhas de log do decision-maker.

Campos fixos em REQUIRED_LOG_FIELDS, renomeados por FIELD_RENAME_MAP.
Os campos de `extra` (answer, strategy, reason, latency_ms) entram
no mesmo objeto.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter padrão.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.routes.decide.router",
         "message": "decision_served", "correlation_id": "abc-123",
         "service": "decision_maker", "answer": "YES"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS)),
        rename_fields=FIELD_RENAME_MAP,
    )
