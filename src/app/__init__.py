"""App — núcleo do serviço: domínio, motor de decisão e wiring.

Subpastas:
- bootstrap/: composition root (inicialização, wiring do engine)
- domain/: modelos de domínio (Verdict, DecisionRequest, DecisionVerdict)
- services/: DecisionEngine e estratégias (sem IO)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app decide; api adapta; config configura; utils apoia.
"""
