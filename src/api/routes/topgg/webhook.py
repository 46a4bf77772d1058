"""Endpoint do webhook de votos do Top.gg.

Endpoints:
- POST <prefixo>/: recebimento de votos

Fluxo:
1. Autenticação do header Authorization contra o segredo configurado
2. Decodificação do corpo em Vote
3. `await handler.voted(vote)` e resposta 200 vazia

Segurança:
- Segredo inválido e payload malformado respondem o mesmo 401 vazio;
  o motivo aparece apenas nos logs
- O handler é aguardado antes da resposta; exceções dele não são tratadas aqui
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from api.connectors.topgg.webhook import (
    MalformedPayloadError,
    UnauthorizedError,
    authenticate_webhook_request,
    decode_vote_payload,
)
from app.observability import (
    get_correlation_id,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from app.protocols import VoteHandlerProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WebhookState:
    """Segredo e handler compartilhados (somente leitura) entre requests."""

    password: str
    handler: VoteHandlerProtocol


def _raw_headers(request: Request) -> dict[str, bytes]:
    # Bytes crus do scope ASGI: a validação UTF-8 fica com o autenticador.
    # Header repetido: vale a primeira ocorrência.
    headers: dict[str, bytes] = {}
    for name, value in request.headers.raw:
        headers.setdefault(name.decode("latin-1").lower(), value)
    return headers


def _unauthorized() -> Response:
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


async def handle_vote_request(request: Request, state: WebhookState) -> Response:
    """Processa uma entrega do webhook de votos.

    Returns:
        200 vazio se o voto foi entregue ao handler, 401 vazio caso contrário.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        try:
            authenticate_webhook_request(_raw_headers(request), state.password)
        except UnauthorizedError as exc:
            logger.warning(
                "webhook_unauthorized",
                extra={"channel": "topgg", "error": str(exc)},
            )
            return _unauthorized()

        raw_body = await request.body()

        try:
            vote = decode_vote_payload(raw_body)
        except MalformedPayloadError as exc:
            logger.warning(
                "webhook_payload_invalid",
                extra={
                    "channel": "topgg",
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return _unauthorized()

        logger.info(
            "webhook_vote_received",
            extra={
                "channel": "topgg",
                "receiver_id": str(vote.receiver_id),
                "is_server": vote.is_server,
                "is_test": vote.is_test,
            },
        )

        started_at = time.perf_counter()
        await state.handler.voted(vote)
        record_latency(
            "vote_handler",
            "voted",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )

        return Response(status_code=status.HTTP_200_OK)

    finally:
        reset_correlation_id(token)


def create_webhook_router(
    password: str,
    handler: VoteHandlerProtocol,
    path: str = "/",
) -> APIRouter:
    """Cria router com o endpoint de votos ligado ao handler da aplicação.

    Uso:
        app.include_router(create_webhook_router(password, handler, path="/webhook"))

    Args:
        password: Segredo compartilhado configurado no painel do Top.gg
        handler: Implementação de VoteHandlerProtocol
        path: Caminho do POST dentro do router

    Returns:
        APIRouter com POST em `path`.
    """
    state = WebhookState(password=password, handler=handler)
    router = APIRouter()

    @router.post(path, response_class=Response)
    async def receive_vote(request: Request) -> Response:
        return await handle_vote_request(request, state)

    return router
