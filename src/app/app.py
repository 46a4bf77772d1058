"""Entrypoint da aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Aplicações que têm o próprio handler de votos usam a factory:
    from app.app import create_app

    app = create_app(handler=MyVoteHandler())
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.services import LoggingVoteHandler
from config.settings import get_base_settings, get_topgg_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols import VoteHandlerProtocol
    from config.settings import TopggSettings

# Inicializar logging ANTES de qualquer log do módulo
initialize_app()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configurações no startup."""
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": service_name})


def create_app(
    handler: VoteHandlerProtocol | None = None,
    settings: TopggSettings | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        handler: Handler de votos. Usa LoggingVoteHandler se None.
        settings: TopggSettings opcional. Se None, carrega do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    topgg = settings or get_topgg_settings()

    fastapi_app = FastAPI(
        title="Top.gg Vote Gateway",
        description="Webhook de votos e cliente da API do Top.gg",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(create_api_router(handler or LoggingVoteHandler(), topgg))

    logger.info(
        "app_configured",
        extra={"webhook_path": topgg.webhook_path},
    )
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting Top.gg Vote Gateway in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
