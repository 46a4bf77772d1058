"""Rotas do Top.gg."""

from .webhook import WebhookState, create_webhook_router, handle_vote_request

__all__ = [
    "WebhookState",
    "create_webhook_router",
    "handle_vote_request",
]
