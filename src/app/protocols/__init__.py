"""Protocolos e contratos do core da aplicação."""

from .vote_handler import VoteHandlerProtocol

__all__ = [
    "VoteHandlerProtocol",
]
