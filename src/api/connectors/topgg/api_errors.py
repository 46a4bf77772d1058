"""Erros e helpers de parsing para a API do Top.gg."""

from __future__ import annotations

from typing import Any


class TopggApiError(Exception):
    """Erro retornado pela API do Top.gg."""

    def __init__(self, status_code: int, error_message: str, is_permanent: bool) -> None:
        super().__init__(error_message)
        self.status_code = status_code
        self.error_message = error_message
        self.is_permanent = is_permanent  # True se erro não é retentável

    def __str__(self) -> str:
        return f"topgg_api_error ({self.status_code}): {self.error_message}"


def is_permanent_error(status_code: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404
    Erros transitórios: 429 (rate limit), 500+ (server errors)
    """
    return status_code in {400, 401, 403, 404}


def parse_api_error(status_code: int, response_data: Any) -> TopggApiError | None:
    """Extrai informações de erro do response do Top.gg.

    Args:
        status_code: Status HTTP da resposta
        response_data: JSON decodificado (ou None se o corpo não era JSON)

    Returns:
        TopggApiError se houver erro, None se sucesso
    """
    if status_code < 400:
        return None

    message = "Erro desconhecido"
    if isinstance(response_data, dict):
        message = str(response_data.get("error") or response_data.get("message") or message)

    return TopggApiError(
        status_code=status_code,
        error_message=message,
        is_permanent=is_permanent_error(status_code),
    )
