"""Estado de visualização de uma sessão de perguntas.

Três fases explícitas em vez de flags booleanas: não existe
"carregando" e "com resposta" ao mesmo tempo.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from app.domain.decision import Verdict


class ViewPhase(Enum):
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


@dataclass(frozen=True)
class DecisionView:
    """Estado imutável; cada transição devolve uma nova instância."""

    question: str = ""
    phase: ViewPhase = ViewPhase.IDLE
    answer: Verdict | None = None

    @property
    def can_submit(self) -> bool:
        return self.phase is not ViewPhase.PENDING and bool(self.question.strip())

    def with_question(self, question: str) -> DecisionView:
        if self.phase is ViewPhase.PENDING:
            return self
        return replace(self, question=question)

    def start(self) -> DecisionView:
        """IDLE/SETTLED -> PENDING. Ignorado se não houver o que enviar."""
        if not self.can_submit:
            return self
        return replace(self, phase=ViewPhase.PENDING, answer=None)

    def settle(self, answer: Verdict | None) -> DecisionView:
        """PENDING -> SETTLED. `None` = falha, área de veredito vazia."""
        if self.phase is not ViewPhase.PENDING:
            raise ValueError(f"settle() exige fase pending, atual: {self.phase.value}")
        return replace(self, phase=ViewPhase.SETTLED, answer=answer)

    def reset(self) -> DecisionView:
        """Volta a IDLE com pergunta vazia. Bloqueado enquanto PENDING."""
        if self.phase is ViewPhase.PENDING:
            return self
        return DecisionView()

    def render(self) -> str:
        """Texto da área de veredito."""
        if self.phase is ViewPhase.PENDING:
            return "Deciding..."
        if self.answer is Verdict.YES:
            return "YES ✅"
        if self.answer is Verdict.NO:
            return "NO ❌"
        return "Ask a question"
