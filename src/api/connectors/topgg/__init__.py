"""Conector Top.gg - adapter de borda para a API e o webhook de votos.

Responsabilidades:
- Webhook (autenticação por segredo, decodificação de votos)
- HTTP client para a API (usuários, bots, votantes)
- Erros da API
"""

from .api_errors import TopggApiError, is_permanent_error, parse_api_error
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import TopggHttpClient, create_topgg_http_client

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "TopggApiError",
    "TopggHttpClient",
    "create_topgg_http_client",
    "is_permanent_error",
    "parse_api_error",
]
