"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto: motor de decisão e estratégias.
"""

from app.services.decision_engine import DecisionEngine
from app.services.decision_strategies import (
    QuestionHashDecisionStrategy,
    RandomDecisionStrategy,
    WeightedDecisionStrategy,
    build_strategy,
)

__all__ = [
    "DecisionEngine",
    "QuestionHashDecisionStrategy",
    "RandomDecisionStrategy",
    "WeightedDecisionStrategy",
    "build_strategy",
]
