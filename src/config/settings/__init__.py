"""Agregador de settings do gateway de votos.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.topgg import (
    DEFAULT_WEBHOOK_PATH,
    TOPGG_API_BASE_URL,
    TopggSettings,
    get_topgg_settings,
)

__all__ = [
    # Constants
    "DEFAULT_WEBHOOK_PATH",
    "TOPGG_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Top.gg
    "TopggSettings",
    "get_base_settings",
    "get_topgg_settings",
]
