"""Webhook Top.gg: autenticação por segredo e decodificação de votos."""

from .auth import authenticate_webhook_request
from .errors import MalformedPayloadError, UnauthorizedError, WebhookRequestError
from .receive import decode_vote_payload

__all__ = [
    "MalformedPayloadError",
    "UnauthorizedError",
    "WebhookRequestError",
    "authenticate_webhook_request",
    "decode_vote_payload",
]
