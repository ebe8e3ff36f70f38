"""Connectors — clientes HTTP de borda.

- decide/: cliente Python do contrato POST /api/decide
"""

__all__: list[str] = []
