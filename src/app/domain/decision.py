"""Modelos de domínio da decisão sim/não.

Entidades transitórias: construídas por request e descartadas após a
resposta. Nenhuma identidade além de um ciclo request/response.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Verdict(str, Enum):
    """Veredito binário. Não existe terceiro estado."""

    YES = "YES"
    NO = "NO"


class DecisionRequest(BaseModel):
    """Pergunta submetida pelo usuário."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    question: str = Field(
        ...,
        strict=True,
        description="Texto livre da pergunta. Vazio é aceito.",
    )


class DecisionVerdict(BaseModel):
    """Resposta do motor de decisão."""

    model_config = ConfigDict(frozen=True)

    answer: Verdict = Field(..., description="YES ou NO.")
