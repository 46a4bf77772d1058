"""Decodificação do corpo do webhook em `Vote`."""

from __future__ import annotations

from pydantic import ValidationError

from app.domain.vote import Vote

from .errors import MalformedPayloadError


def decode_vote_payload(raw_body: bytes | str) -> Vote:
    """Parseia o corpo bruto do webhook.

    Campos desconhecidos são ignorados. JSON inválido, campos obrigatórios
    ausentes ou IDs malformados levantam `MalformedPayloadError` sem
    expor objeto parcial.

    Args:
        raw_body: Corpo bruto do request

    Raises:
        MalformedPayloadError: Se o corpo não representar um voto.

    Returns:
        Vote validado.
    """
    try:
        return Vote.model_validate_json(raw_body)
    except ValidationError as exc:
        reason = exc.errors()[0]["type"] if exc.error_count() else "invalid_vote"
        raise MalformedPayloadError(reason) from exc
