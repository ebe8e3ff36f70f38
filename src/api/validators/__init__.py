"""Validators da camada de borda.

- decide/: payload de POST /api/decide
"""

__all__: list[str] = []
