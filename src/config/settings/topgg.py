"""Settings específicas do Top.gg.

Token da API (cliente outbound) e segredo do webhook de votos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TOPGG_API_BASE_URL: str = "https://top.gg/api"
DEFAULT_WEBHOOK_PATH: str = "/webhook"


@dataclass(frozen=True)
class TopggSettings:
    """Configurações do Top.gg.

    Attributes:
        token: Token da API (header Authorization nas chamadas outbound)
        webhook_password: Segredo compartilhado esperado no webhook
        webhook_path: Prefixo onde o router do webhook é montado
        bot_id: ID do bot dono do token (usado em votos/check)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em 429/5xx
    """

    # Credenciais
    token: str = ""
    webhook_password: str = ""

    # Webhook
    webhook_path: str = DEFAULT_WEBHOOK_PATH

    # API
    bot_id: str = ""
    api_base_url: str = TOPGG_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Top.gg.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.webhook_password:
            errors.append("TOPGG_WEBHOOK_PASSWORD não configurado")

        if not self.webhook_path.startswith("/"):
            errors.append("TOPGG_WEBHOOK_PATH deve começar com '/'")

        if self.bot_id and not self.bot_id.isdigit():
            errors.append("TOPGG_BOT_ID deve ser numérico")

        if self.request_timeout_seconds <= 0:
            errors.append("TOPGG_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("TOPGG_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> TopggSettings:
    """Carrega TopggSettings a partir de variáveis de ambiente."""
    return TopggSettings(
        token=os.getenv("TOPGG_TOKEN", ""),
        webhook_password=os.getenv("TOPGG_WEBHOOK_PASSWORD", ""),
        webhook_path=os.getenv("TOPGG_WEBHOOK_PATH", DEFAULT_WEBHOOK_PATH),
        bot_id=os.getenv("TOPGG_BOT_ID", ""),
        api_base_url=os.getenv("TOPGG_API_BASE_URL", TOPGG_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("TOPGG_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("TOPGG_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_topgg_settings() -> TopggSettings:
    """Retorna instância cacheada de TopggSettings."""
    return _load_from_env()
