"""Serviços da aplicação."""

from .logging_vote_handler import LoggingVoteHandler

__all__ = [
    "LoggingVoteHandler",
]
