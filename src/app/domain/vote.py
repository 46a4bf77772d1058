"""Evento de voto recebido via webhook do Top.gg.

Payload de exemplo (bot):
    {"bot": "1234567890", "user": "9876543210", "type": "upvote",
     "isWeekend": false, "query": "?ref=topgg"}

Para servidores o alvo vem em `guild` no lugar de `bot`.
"""

from __future__ import annotations

from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.domain.snowflake import Snowflake

TEST_VOTE_TYPE = "test"


class Vote(BaseModel):
    """Um voto recebido (bot ou servidor).

    Construído uma vez por entrega do webhook e descartado após o handler.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    bot_id: Snowflake | None = Field(default=None, alias="bot")
    guild_id: Snowflake | None = Field(default=None, alias="guild")
    voter_id: Snowflake = Field(alias="user")
    vote_type: str = Field(alias="type")
    is_weekend: bool = Field(default=False, alias="isWeekend")
    query: str | None = None

    @model_validator(mode="after")
    def _require_receiver(self) -> Vote:
        if self.bot_id is None and self.guild_id is None:
            raise ValueError("missing_receiver")
        return self

    @property
    def receiver_id(self) -> int:
        """ID do bot ou servidor que recebeu o voto."""
        if self.bot_id is not None:
            return self.bot_id
        return self.guild_id  # type: ignore[return-value]

    @property
    def is_server(self) -> bool:
        return self.bot_id is None

    @property
    def is_test(self) -> bool:
        """True para votos simulados pelo painel do Top.gg."""
        return self.vote_type == TEST_VOTE_TYPE

    @property
    def query_params(self) -> dict[str, str]:
        """Query string repassada pelo botão de voto, já decodificada."""
        if not self.query:
            return {}
        return dict(parse_qsl(self.query.lstrip("?")))
