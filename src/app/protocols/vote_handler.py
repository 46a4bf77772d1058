"""Contrato do handler de votos implementado pela aplicação consumidora."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.vote import Vote


@runtime_checkable
class VoteHandlerProtocol(Protocol):
    """Recebe cada voto válido entregue pelo webhook.

    O webhook aguarda `voted` terminar antes de responder 200; handlers
    lentos devem enfileirar internamente. Exceções levantadas aqui não
    são tratadas pelo webhook.
    """

    async def voted(self, vote: Vote) -> None: ...
