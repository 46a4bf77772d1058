"""Erros do webhook de votos."""

from __future__ import annotations


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class UnauthorizedError(WebhookRequestError):
    """Segredo ausente, ilegível ou divergente."""


class MalformedPayloadError(WebhookRequestError):
    """Corpo não é um voto válido."""
