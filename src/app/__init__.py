"""App: domínio, contratos e wiring do gateway de votos.

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- domain/: snowflakes e DTOs do Top.gg (User, Voter, Bot, Vote)
- protocols/: contrato do handler de votos
- services/: handler padrão
- observability/: correlation_id e métricas via logs

Padrão: app define; api adapta; config configura; utils apoia.
"""
