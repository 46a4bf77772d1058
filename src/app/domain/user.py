"""Usuários e votantes retornados pela API do Top.gg.

IDs chegam como strings e são validados via `Snowflake`; um ID inválido
invalida o registro inteiro.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from app.domain.snowflake import Snowflake

DISCORD_CDN_URL = "https://cdn.discordapp.com"


def _empty_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalText = Annotated[str | None, BeforeValidator(_empty_to_none)]


def build_avatar_url(avatar_hash: str | None, user_id: int) -> str:
    """Monta URL do avatar no CDN do Discord.

    Hash com prefixo `a_` indica avatar animado (GIF). Sem hash,
    retorna o avatar padrão derivado do ID.
    """
    if avatar_hash:
        ext = "gif" if avatar_hash.startswith("a_") else "png"
        return f"{DISCORD_CDN_URL}/avatars/{user_id}/{avatar_hash}.{ext}?size=1024"
    return f"{DISCORD_CDN_URL}/embed/avatars/{(user_id >> 22) % 6}.png"


class Socials(BaseModel):
    """Links sociais do usuário."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    github: OptionalText = None
    instagram: OptionalText = None
    reddit: OptionalText = None
    twitter: OptionalText = None
    youtube: OptionalText = None


class User(BaseModel):
    """Usuário logado no Top.gg (GET /users/{id})."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Snowflake
    username: str
    bio: OptionalText = None
    banner: OptionalText = None
    socials: Socials | None = Field(default=None, alias="social")
    is_supporter: bool = Field(default=False, alias="supporter")
    is_certified_dev: bool = Field(default=False, alias="certifiedDev")
    is_moderator: bool = Field(default=False, alias="mod")
    is_web_moderator: bool = Field(default=False, alias="webMod")
    is_admin: bool = Field(default=False, alias="admin")
    avatar: OptionalText = None

    @property
    def avatar_url(self) -> str:
        """URL do avatar (PNG, ou GIF se animado)."""
        return build_avatar_url(self.avatar, self.id)


class Voter(BaseModel):
    """Usuário que votou no bot (GET /bots/{id}/votes)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Snowflake
    username: str
    avatar: OptionalText = None

    @property
    def avatar_url(self) -> str:
        return build_avatar_url(self.avatar, self.id)
