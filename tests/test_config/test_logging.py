"""Testes para config.logging: configure_logging, filter e formatter."""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
)
from config.logging.config import DEFAULT_SERVICE_NAME


def _record(msg: str = "message") -> logging.LogRecord:
    return logging.LogRecord(
        name="api.routes.topgg.webhook",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    def test_default_level_is_info(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_existing_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "cid")

        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "topgg-vote-gateway"


class TestCorrelationIdFilter:
    def test_injects_service_and_correlation_id(self) -> None:
        record = _record()

        assert CorrelationIdFilter("svc", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "svc"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"

        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)

        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestJsonFormatter:
    def test_field_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_renamed_fields(self) -> None:
        record = _record("webhook_vote_received")
        record.correlation_id = "abc-123"
        record.service = "svc"
        record.receiver_id = "1234567890"

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "webhook_vote_received"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "api.routes.topgg.webhook"
        assert payload["correlation_id"] == "abc-123"
        assert payload["receiver_id"] == "1234567890"
