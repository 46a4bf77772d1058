"""Testes da autenticação do webhook por segredo compartilhado."""

from __future__ import annotations

import pytest

from api.connectors.topgg.webhook import UnauthorizedError, authenticate_webhook_request


def test_matching_secret_is_admitted() -> None:
    authenticate_webhook_request({"Authorization": "secret123"}, "secret123")


def test_header_name_is_case_insensitive() -> None:
    authenticate_webhook_request({"authorization": b"secret123"}, "secret123")


def test_wrong_secret_is_rejected() -> None:
    with pytest.raises(UnauthorizedError, match="mismatch"):
        authenticate_webhook_request({"Authorization": "wrong"}, "secret123")


def test_missing_header_is_rejected() -> None:
    with pytest.raises(UnauthorizedError, match="missing_authorization"):
        authenticate_webhook_request({"content-type": "application/json"}, "secret123")


def test_non_utf8_header_is_treated_as_missing() -> None:
    with pytest.raises(UnauthorizedError, match="missing_authorization"):
        authenticate_webhook_request({"authorization": b"\xff\xfe"}, "secret123")


def test_scheme_prefix_is_not_stripped() -> None:
    with pytest.raises(UnauthorizedError):
        authenticate_webhook_request({"Authorization": "Bearer secret123"}, "secret123")


def test_empty_password_uses_exact_equality() -> None:
    authenticate_webhook_request({"Authorization": ""}, "")

    with pytest.raises(UnauthorizedError, match="mismatch"):
        authenticate_webhook_request({"Authorization": "anything"}, "")


def test_non_ascii_secret_matches_byte_for_byte() -> None:
    authenticate_webhook_request({"authorization": "sênha".encode()}, "sênha")
