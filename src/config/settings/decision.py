"""Settings do motor de decisão.

Seleciona a estratégia usada por POST /api/decide.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache

STRATEGY_RANDOM = "random"
STRATEGY_WEIGHTED = "weighted"
STRATEGY_HASH = "hash"

VALID_STRATEGIES = frozenset({STRATEGY_RANDOM, STRATEGY_WEIGHTED, STRATEGY_HASH})


@dataclass(frozen=True)
class DecisionSettings:
    """Configurações do motor de decisão.

    Attributes:
        strategy: Nome da estratégia (random|weighted|hash)
        yes_probability: Probabilidade de YES nas estratégias aleatórias
        hash_salt: Salt opcional da estratégia hash
    """

    strategy: str = "random"
    yes_probability: float = 0.5
    hash_salt: str = ""

    def validate(self) -> list[str]:
        """Valida configurações de decisão.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.strategy not in VALID_STRATEGIES:
            errors.append(
                f"DECISION_STRATEGY inválida: {self.strategy}. "
                f"Válidas: {', '.join(sorted(VALID_STRATEGIES))}"
            )

        if math.isnan(self.yes_probability) or not 0.0 <= self.yes_probability <= 1.0:
            errors.append("DECISION_YES_PROBABILITY deve estar entre 0 e 1")

        return errors


def _parse_probability(raw: str) -> float:
    # Valor não numérico vira NaN e é reportado por validate()
    try:
        return float(raw)
    except ValueError:
        return math.nan


def _load_decision_from_env() -> DecisionSettings:
    """Carrega DecisionSettings de variáveis de ambiente."""
    return DecisionSettings(
        strategy=os.getenv("DECISION_STRATEGY", "random").strip().lower(),
        yes_probability=_parse_probability(os.getenv("DECISION_YES_PROBABILITY", "0.5")),
        hash_salt=os.getenv("DECISION_HASH_SALT", ""),
    )


@lru_cache(maxsize=1)
def get_decision_settings() -> DecisionSettings:
    """Retorna instância cacheada de DecisionSettings."""
    return _load_decision_from_env()
