"""Autenticação do webhook do Top.gg por segredo compartilhado.

O Top.gg envia o segredo configurado no painel no header `Authorization`,
sem prefixo de esquema. A comparação é exata (tempo constante); segredo
vazio no servidor é barrado no startup por `validate_runtime_settings`.
"""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

from .errors import UnauthorizedError

if TYPE_CHECKING:
    from collections.abc import Mapping

AUTHORIZATION_HEADER = "authorization"


def _extract_authorization(headers: Mapping[str, str | bytes]) -> str | None:
    for name, value in headers.items():
        if name.lower() != AUTHORIZATION_HEADER:
            continue
        if isinstance(value, bytes):
            try:
                return value.decode("utf-8")
            except UnicodeDecodeError:
                return None
        return value
    return None


def authenticate_webhook_request(
    headers: Mapping[str, str | bytes],
    password: str,
) -> None:
    """Valida o segredo recebido contra o configurado.

    Args:
        headers: Headers do request. Valores em bytes (scope ASGI cru)
            precisam ser UTF-8 válido.
        password: Segredo configurado no servidor.

    Raises:
        UnauthorizedError: Header ausente, não UTF-8 ou divergente.
    """
    authorization = _extract_authorization(headers)
    if authorization is None:
        raise UnauthorizedError("missing_authorization")

    if not hmac.compare_digest(authorization.encode("utf-8"), password.encode("utf-8")):
        raise UnauthorizedError("authorization_mismatch")
