"""Motor de decisão — mapeia DecisionRequest para DecisionVerdict.

Função pura sobre a estratégia injetada: sem estado, sem IO, sem logs.
Trocar a regra de decisão significa trocar a estratégia, nunca o endpoint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.decision import DecisionRequest, DecisionVerdict
from app.services.decision_strategies import RandomDecisionStrategy

if TYPE_CHECKING:
    from app.protocols.decision_strategy import DecisionStrategyProtocol


class DecisionEngine:
    """Motor de decisão sim/não."""

    def __init__(self, strategy: DecisionStrategyProtocol | None = None) -> None:
        self._strategy = strategy or RandomDecisionStrategy()

    @property
    def strategy_name(self) -> str:
        return self._strategy.name

    def decide(self, request: DecisionRequest) -> DecisionVerdict:
        """Produz um veredito novo a cada chamada (sem memoização)."""
        return DecisionVerdict(answer=self._strategy.decide(request.question))
