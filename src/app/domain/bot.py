"""Bot listado no Top.gg (GET /bots/{id})."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.snowflake import Snowflake, SnowflakeList
from app.domain.user import OptionalText, build_avatar_url


class Bot(BaseModel):
    """Bot listado.

    `owners` e `guilds` usam parse tolerante: entradas não numéricas
    enviadas pelo servidor são descartadas em vez de invalidar o bot.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Snowflake
    username: str
    prefix: OptionalText = None
    short_description: OptionalText = Field(default=None, alias="shortdesc")
    owners: SnowflakeList = Field(default_factory=list)
    guilds: SnowflakeList = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    points: int = 0
    monthly_points: int = Field(default=0, alias="monthlyPoints")
    server_count: int | None = None
    avatar: OptionalText = None

    @property
    def avatar_url(self) -> str:
        return build_avatar_url(self.avatar, self.id)
