"""Handler padrão: registra cada voto no log estruturado."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.vote import Vote

logger = logging.getLogger(__name__)


class LoggingVoteHandler:
    """Implementação mínima de VoteHandlerProtocol (somente IDs no log)."""

    async def voted(self, vote: Vote) -> None:
        logger.info(
            "vote_handled",
            extra={
                "receiver_id": str(vote.receiver_id),
                "voter_id": str(vote.voter_id),
                "is_server": vote.is_server,
                "is_test": vote.is_test,
                "is_weekend": vote.is_weekend,
            },
        )
