"""Estratégias de decisão sim/não.

- RandomDecisionStrategy: sorteio por chamada (50/50 por padrão)
- WeightedDecisionStrategy: sorteio com probabilidade configurada
- QuestionHashDecisionStrategy: função determinística do texto normalizado

Nenhuma estratégia faz IO ou registra logs.
"""

from __future__ import annotations

import hashlib
import random
import re
import unicodedata
from typing import TYPE_CHECKING

from app.domain.decision import Verdict
from config.settings.decision import (
    STRATEGY_HASH,
    STRATEGY_RANDOM,
    STRATEGY_WEIGHTED,
    VALID_STRATEGIES,
)

if TYPE_CHECKING:
    from app.protocols.decision_strategy import DecisionStrategyProtocol

_WHITESPACE_RE = re.compile(r"\s+")


class RandomDecisionStrategy:
    """Sorteia YES com probabilidade `yes_probability` a cada chamada.

    Sem `rng` injetado usa `random.SystemRandom`, que lê entropia do SO e
    não compartilha estado de seed entre requests concorrentes.

    Args:
        yes_probability: Probabilidade de YES em [0.0, 1.0].
        rng: Fonte aleatória opcional (ex: `random.Random(42)` em testes).

    Raises:
        ValueError: Se yes_probability estiver fora de [0.0, 1.0].
    """

    name = STRATEGY_RANDOM

    def __init__(
        self,
        yes_probability: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= yes_probability <= 1.0:
            raise ValueError(f"yes_probability fora de [0, 1]: {yes_probability}")
        self._yes_probability = yes_probability
        self._rng = rng or random.SystemRandom()

    @property
    def yes_probability(self) -> float:
        return self._yes_probability

    def decide(self, question: str) -> Verdict:
        # O texto não é inspecionado
        _ = question
        if self._rng.random() < self._yes_probability:
            return Verdict.YES
        return Verdict.NO


class WeightedDecisionStrategy(RandomDecisionStrategy):
    """Variante nomeada para sorteio com probabilidade diferente de 50%."""

    name = STRATEGY_WEIGHTED


class QuestionHashDecisionStrategy:
    """Veredito estável por pergunta: mesma pergunta, mesma resposta.

    O texto é normalizado (NFKC, casefold, espaços colapsados) antes do
    SHA-256, então "Vou? " e "vou?" produzem o mesmo veredito.
    """

    name = STRATEGY_HASH

    def __init__(self, salt: str = "") -> None:
        self._salt = salt

    def decide(self, question: str) -> Verdict:
        # surrogatepass: JSON válido pode trazer surrogates isolados ("\ud800")
        digest = hashlib.sha256(
            f"{self._salt}{normalize_question(question)}".encode("utf-8", "surrogatepass")
        ).digest()
        return Verdict.YES if digest[0] % 2 == 0 else Verdict.NO


def normalize_question(question: str) -> str:
    """Normaliza pergunta para comparação determinística."""
    text = unicodedata.normalize("NFKC", question).casefold()
    return _WHITESPACE_RE.sub(" ", text).strip()


def build_strategy(
    name: str,
    *,
    yes_probability: float = 0.5,
    hash_salt: str = "",
    rng: random.Random | None = None,
) -> DecisionStrategyProtocol:
    """Resolve o nome configurado para uma estratégia concreta.

    Args:
        name: "random", "weighted" (alias ponderado de random) ou "hash".
        yes_probability: Usado pelas estratégias aleatórias.
        hash_salt: Usado pela estratégia hash.
        rng: Fonte aleatória opcional para testes.

    Raises:
        ValueError: Se o nome for desconhecido.
    """
    normalized = name.strip().lower()
    if normalized == STRATEGY_HASH:
        return QuestionHashDecisionStrategy(salt=hash_salt)
    if normalized == STRATEGY_RANDOM:
        return RandomDecisionStrategy(yes_probability=yes_probability, rng=rng)
    if normalized == STRATEGY_WEIGHTED:
        return WeightedDecisionStrategy(yes_probability=yes_probability, rng=rng)
    raise ValueError(
        f"Estratégia de decisão desconhecida: {name}. "
        f"Válidas: {', '.join(sorted(VALID_STRATEGIES))}"
    )
