"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    DEFAULT_SERVICE_NAME,
    VALID_ENVIRONMENTS,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "BaseSettings",
    "Environment",
    "VALID_ENVIRONMENTS",
    "get_base_settings",
]
