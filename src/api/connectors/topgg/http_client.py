"""Cliente HTTP especializado para a API do Top.gg.

Estende HttpClient genérico com comportamentos específicos do Top.gg:
- Header Authorization com o token cru (sem esquema)
- Rate limiting (429) retentável respeitando retry-after
- Parsing dos DTOs (User, Voter, Bot) com validação de snowflakes
- Logging estruturado sem token

Todos os parâmetros de ID aceitam qualquer valor identificável
(int, str ou registro com `id`).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from api.connectors.topgg.api_errors import TopggApiError, parse_api_error
from api.connectors.topgg.http_base import HttpClient, HttpClientConfig, HttpError
from app.domain.bot import Bot
from app.domain.snowflake import as_snowflake
from app.domain.user import User, Voter

if TYPE_CHECKING:
    import httpx

    from app.domain.snowflake import SnowflakeLike
    from config.settings import TopggSettings

logger: logging.Logger = logging.getLogger(__name__)


class TopggHttpClient(HttpClient):
    """Cliente da API do Top.gg.

    Args:
        token: Token da API (painel do bot)
        bot_id: Bot padrão para `get_voters`/`has_voted`
        config: Configuração HTTP base
    """

    def __init__(
        self,
        token: str,
        bot_id: SnowflakeLike | None = None,
        config: HttpClientConfig | None = None,
    ) -> None:
        if not token or not token.strip():
            raise ValueError(
                "token é obrigatório para a API do Top.gg. "
                "Verifique se TOPGG_TOKEN está configurado."
            )
        super().__init__(config)
        self._token = token
        self._bot_id = as_snowflake(bot_id) if bot_id is not None else None

    async def get_user(self, user_id: SnowflakeLike) -> User:
        """Busca usuário pelo ID.

        Raises:
            TopggApiError: 404 se o usuário não existe, ou outro erro da API.
            HttpError: Falha de rede ou resposta inválida.
        """
        data = await self._get_json(f"/users/{as_snowflake(user_id)}")
        return self._parse(User, data, "/users")

    async def get_bot(self, bot_id: SnowflakeLike) -> Bot:
        """Busca bot listado pelo ID."""
        data = await self._get_json(f"/bots/{as_snowflake(bot_id)}")
        return self._parse(Bot, data, "/bots")

    async def get_voters(self, bot_id: SnowflakeLike | None = None) -> list[Voter]:
        """Lista os últimos votantes do bot.

        Args:
            bot_id: Bot consultado. Usa o bot do cliente se None.
        """
        target = self._resolve_bot_id(bot_id)
        data = await self._get_json(f"/bots/{target}/votes")
        if not isinstance(data, list):
            raise HttpError("unexpected_response_shape")
        return [self._parse(Voter, item, "/votes") for item in data]

    async def has_voted(
        self,
        user_id: SnowflakeLike,
        bot_id: SnowflakeLike | None = None,
    ) -> bool:
        """Indica se o usuário votou no bot nas últimas 12 horas."""
        target = self._resolve_bot_id(bot_id)
        data = await self._get_json(
            f"/bots/{target}/check",
            params={"userId": as_snowflake(user_id)},
        )
        if not isinstance(data, dict):
            raise HttpError("unexpected_response_shape")
        return bool(data.get("voted", 0))

    def _resolve_bot_id(self, bot_id: SnowflakeLike | None) -> int:
        if bot_id is not None:
            return as_snowflake(bot_id)
        if self._bot_id is None:
            raise ValueError("bot_id é obrigatório (ou configure TOPGG_BOT_ID)")
        return self._bot_id

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = await self.get(path, params=params, headers={"Authorization": self._token})
        data = _safe_json(response)

        api_error = parse_api_error(response.status_code, data)
        if api_error:
            _log_api_error(api_error, path)
            raise api_error

        if data is None:
            logger.error("topgg_response_json_invalid", extra={"endpoint": path})
            raise HttpError("Response JSON inválido", status_code=response.status_code)

        logger.debug(
            "topgg_request_ok",
            extra={"endpoint": path, "status_code": response.status_code},
        )
        return data

    @staticmethod
    def _parse(model: type[Any], data: Any, endpoint: str) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "topgg_response_invalid",
                extra={"endpoint": endpoint, "error_count": exc.error_count()},
            )
            raise HttpError("Response inválido da API do Top.gg") from exc


def _safe_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _log_api_error(api_error: TopggApiError, endpoint: str) -> None:
    logger.warning(
        "topgg_api_error",
        extra={
            "endpoint": endpoint,
            "status_code": api_error.status_code,
            "is_permanent": api_error.is_permanent,
        },
    )


def create_topgg_http_client(
    settings: TopggSettings | None = None,
) -> TopggHttpClient:
    """Factory para criar cliente Top.gg com config padrão.

    Args:
        settings: TopggSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado.
    """
    # Import local para evitar dependência circular
    from config.settings import get_topgg_settings

    topgg = settings or get_topgg_settings()
    config = HttpClientConfig(
        base_url=topgg.api_base_url,
        timeout_seconds=topgg.request_timeout_seconds,
        max_retries=topgg.max_retries,
    )
    return TopggHttpClient(
        token=topgg.token,
        bot_id=topgg.bot_id or None,
        config=config,
    )
