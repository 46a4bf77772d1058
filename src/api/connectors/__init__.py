"""Connectors: adapters de borda para APIs externas.

Estrutura:
- topgg/: API do Top.gg e webhook de votos

Cada serviço externo tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
