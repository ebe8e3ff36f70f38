"""Estratégias fake para testes deterministas do motor de decisão."""

from __future__ import annotations

from app.domain.decision import Verdict


class FixedDecisionStrategy:
    """Sempre devolve o mesmo veredito e registra as perguntas recebidas."""

    name = "fixed"

    def __init__(self, answer: Verdict = Verdict.YES) -> None:
        self._answer = answer
        self.questions: list[str] = []

    def decide(self, question: str) -> Verdict:
        self.questions.append(question)
        return self._answer


class ExplodingDecisionStrategy:
    """Viola o contrato de propósito para exercitar o limite do handler."""

    name = "exploding"

    def decide(self, question: str) -> Verdict:
        raise RuntimeError("boom")
