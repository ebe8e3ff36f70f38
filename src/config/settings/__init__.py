"""Agregador de settings do serviço de decisão.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    VALID_ENVIRONMENTS,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Decision engine settings
from config.settings.decision import (
    VALID_STRATEGIES,
    DecisionSettings,
    get_decision_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "VALID_STRATEGIES",
    # Base
    "BaseSettings",
    # Decision
    "DecisionSettings",
    "Environment",
    "VALID_ENVIRONMENTS",
    "get_base_settings",
    "get_decision_settings",
]
