"""API — camada de borda HTTP.

Responsabilidades:
- Receber requests e validar payloads
- Delegar ao DecisionEngine
- Serializar respostas e mapear erros para status HTTP

Subpastas:
- middleware/: middlewares ASGI (correlation_id)
- validators/: validação de payloads
- routes/: endpoints HTTP (decide, health)
- connectors/: cliente Python do contrato HTTP

NÃO PODE conter: regra de decisão.
"""
