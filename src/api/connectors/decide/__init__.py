"""Cliente do endpoint de decisão e estado de visualização."""

from api.connectors.decide.client import DecisionClient, DecisionClientConfig
from api.connectors.decide.view import DecisionView, ViewPhase

__all__ = [
    "DecisionClient",
    "DecisionClientConfig",
    "DecisionView",
    "ViewPhase",
]
