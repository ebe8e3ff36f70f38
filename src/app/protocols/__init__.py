"""Protocolos e contratos do core da aplicação."""

from .decision_strategy import DecisionStrategyProtocol

__all__ = [
    "DecisionStrategyProtocol",
]
