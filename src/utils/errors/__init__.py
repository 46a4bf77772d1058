"""Exceções utilitárias compartilhadas."""

from .exceptions import InvalidIdentifierError

__all__ = [
    "InvalidIdentifierError",
]
