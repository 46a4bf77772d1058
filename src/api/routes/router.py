"""Agregador de rotas: health e webhook de votos.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(handler, settings))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.topgg.webhook import create_webhook_router

if TYPE_CHECKING:
    from app.protocols import VoteHandlerProtocol
    from config.settings import TopggSettings


def create_api_router(handler: VoteHandlerProtocol, settings: TopggSettings) -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Args:
        handler: Handler de votos da aplicação
        settings: Settings do Top.gg (segredo e caminho do webhook)

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(
        create_webhook_router(
            password=settings.webhook_password,
            handler=handler,
            path=settings.webhook_path,
        ),
        tags=["topgg"],
    )

    return api_router
