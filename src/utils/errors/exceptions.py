"""Exceções de domínio compartilhadas entre conectores e modelos."""

from __future__ import annotations


class InvalidIdentifierError(ValueError):
    """Texto não representa um snowflake (inteiro base-10 de 64 bits sem sinal)."""
