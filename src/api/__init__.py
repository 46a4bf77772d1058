"""API: camada de borda.

Subpastas:
- connectors/: adapters HTTP e webhook do Top.gg
- routes/: endpoints HTTP (webhook de votos, health)

NÃO PODE conter: regras da aplicação consumidora (ficam no VoteHandler).
"""
