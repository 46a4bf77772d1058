"""Snowflakes: identificadores de 64 bits do Discord/Top.gg.

A API do Top.gg transmite IDs como strings para não perder precisão em
decodificadores JSON que usam float. Este módulo concentra:

- `as_snowflake`: normaliza qualquer valor "identificável" (int, str ou
  registro com `id`) para o inteiro canônico.
- `parse_snowflake`: parse estrito de texto base-10.
- `Snowflake` / `SnowflakeList`: tipos anotados para modelos pydantic
  (decodificação estrita de um ID e tolerante para listas de IDs).

Uso:
    from app.domain.snowflake import as_snowflake

    as_snowflake("264811613708746752")  # 264811613708746752
    as_snowflake(user)                  # user.id
"""

from __future__ import annotations

import re
from functools import singledispatch
from typing import Annotated, Any, Protocol, runtime_checkable

from pydantic import BeforeValidator

from utils.errors import InvalidIdentifierError

SNOWFLAKE_MAX = 2**64 - 1
_DIGITS_REGEX = re.compile(r"[0-9]+")
_MAX_DIGITS = len(str(SNOWFLAKE_MAX))


@runtime_checkable
class HasSnowflake(Protocol):
    """Registro que já carrega um snowflake validado (User, Voter, Bot)."""

    id: int


SnowflakeLike = int | str | HasSnowflake


def parse_snowflake(text: str) -> int:
    """Converte texto base-10 em snowflake.

    Args:
        text: Representação textual (somente dígitos ASCII).

    Raises:
        InvalidIdentifierError: Se o texto não for numérico ou exceder 64 bits.

    Returns:
        Inteiro no intervalo [0, 2**64 - 1].
    """
    if not _DIGITS_REGEX.fullmatch(text):
        raise InvalidIdentifierError("invalid_snowflake")

    digits = text.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS or int(digits) > SNOWFLAKE_MAX:
        raise InvalidIdentifierError("snowflake_overflow")
    return int(digits)


@singledispatch
def as_snowflake(value: Any) -> int:
    """Retorna o snowflake canônico de um valor identificável.

    Novos tipos podem se registrar com `as_snowflake.register`.

    Raises:
        InvalidIdentifierError: Se o valor não for identificável.
    """
    if isinstance(value, HasSnowflake):
        return as_snowflake(value.id)
    raise InvalidIdentifierError(f"unsupported_identifier_type:{type(value).__name__}")


@as_snowflake.register
def _(value: int) -> int:
    # Truncado para 64 bits sem sinal (complemento de dois), sem validação de faixa.
    if isinstance(value, bool):
        raise InvalidIdentifierError("unsupported_identifier_type:bool")
    return value & SNOWFLAKE_MAX


@as_snowflake.register
def _(value: str) -> int:
    return parse_snowflake(value)


def parse_snowflake_list(values: Any) -> list[int]:
    """Parse tolerante de lista de IDs.

    Cada elemento é convertido isoladamente; elementos inválidos
    (não numéricos, overflow, tipos não-string) são descartados.
    A ordem relativa dos válidos é preservada.
    """
    if not isinstance(values, list | tuple):
        raise ValueError("expected_snowflake_list")

    parsed: list[int] = []
    for item in values:
        if not isinstance(item, str):
            continue
        try:
            parsed.append(parse_snowflake(item))
        except InvalidIdentifierError:
            continue
    return parsed


def _validate_wire_snowflake(value: Any) -> int:
    if not isinstance(value, str):
        raise ValueError("snowflake_must_be_string")
    return parse_snowflake(value)


Snowflake = Annotated[int, BeforeValidator(_validate_wire_snowflake)]
SnowflakeList = Annotated[list[int], BeforeValidator(parse_snowflake_list)]
