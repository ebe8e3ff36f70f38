"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    DecisionServiceError,
    MalformedDecisionRequestError,
)

__all__ = [
    "ConfigurationError",
    "DecisionServiceError",
    "MalformedDecisionRequestError",
]
