"""Protocolo para estratégias de decisão.

Define o contrato estreito usado pelo DecisionEngine. Qualquer regra
(aleatória, ponderada, derivada do texto) entra por aqui sem tocar o
endpoint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.decision import Verdict


class DecisionStrategyProtocol(Protocol):
    """Mapeia o texto de uma pergunta para um veredito.

    Implementações não fazem IO, não registram logs e não falham para
    qualquer string de entrada.
    """

    name: str

    def decide(self, question: str) -> Verdict:
        ...
