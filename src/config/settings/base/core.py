"""Settings base do serviço de decisão.

Configurações comuns a todo o serviço (ambiente, nome, CORS).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

VALID_ENVIRONMENTS: tuple[Environment, ...] = ("development", "staging", "production")

DEFAULT_SERVICE_NAME = "decision-maker"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs e health check
        debug: Modo debug ativo
        cors_allow_origins: Origins liberadas para o cliente web
    """

    environment: str = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    debug: bool = False
    cors_allow_origins: tuple[str, ...] = ("*",)

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in VALID_ENVIRONMENTS:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not self.cors_allow_origins:
            errors.append("CORS_ALLOW_ORIGINS não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> str:
    """Resolve aliases; valores desconhecidos seguem crus para validate()."""
    env_lower = env_str.strip().lower()
    if env_lower in ("", "development", "dev"):
        return "development"
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return env_lower


def _parse_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        cors_allow_origins=_parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
