"""Exceções de domínio do serviço de decisão."""

from __future__ import annotations


class DecisionServiceError(Exception):
    """Base para falhas do serviço de decisão."""


class MalformedDecisionRequestError(DecisionServiceError):
    """Payload de decisão inválido (JSON malformado ou campo ausente).

    Attributes:
        code: Código estável exposto ao cliente (ex: "missing_question").
    """

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code


class ConfigurationError(DecisionServiceError):
    """Configuração inválida detectada no startup."""
