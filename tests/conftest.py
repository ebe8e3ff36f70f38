"""Configuração do pytest para o Decision Maker."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings e engine são cacheados; cada teste lê o próprio env."""
    from app.bootstrap import get_decision_engine
    from config.settings import get_base_settings, get_decision_settings

    get_base_settings.cache_clear()
    get_decision_settings.cache_clear()
    get_decision_engine.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_decision_settings.cache_clear()
    get_decision_engine.cache_clear()
