"""Validação do payload de POST /api/decide.

Converte o body cru em DecisionRequest ou levanta
MalformedDecisionRequestError com um código estável.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from app.domain.decision import DecisionRequest
from utils.errors import MalformedDecisionRequestError

ERROR_MALFORMED_JSON = "malformed_json"
ERROR_INVALID_PAYLOAD = "invalid_payload"
ERROR_MISSING_QUESTION = "missing_question"
ERROR_INVALID_QUESTION = "invalid_question"


def parse_decision_request(raw_body: bytes) -> DecisionRequest:
    """Valida o body JSON `{"question": "<string>"}`.

    String vazia é aceita. Campos extras são ignorados.

    Raises:
        MalformedDecisionRequestError: body não é JSON, não é objeto,
            ou `question` está ausente/não é string. Aninhamento
            profundo demais conta como JSON malformado.
    """
    try:
        payload: Any = json.loads(raw_body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        # RecursionError: aninhamento profundo demais para o parser
        raise MalformedDecisionRequestError(ERROR_MALFORMED_JSON) from exc

    if not isinstance(payload, dict):
        raise MalformedDecisionRequestError(ERROR_INVALID_PAYLOAD)
    if "question" not in payload:
        raise MalformedDecisionRequestError(ERROR_MISSING_QUESTION)

    try:
        return DecisionRequest.model_validate(payload)
    except ValidationError as exc:
        raise MalformedDecisionRequestError(ERROR_INVALID_QUESTION) from exc


__all__ = [
    "ERROR_INVALID_PAYLOAD",
    "ERROR_INVALID_QUESTION",
    "ERROR_MALFORMED_JSON",
    "ERROR_MISSING_QUESTION",
    "parse_decision_request",
]
