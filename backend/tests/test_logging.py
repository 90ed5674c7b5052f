"""Tests for structured logging setup."""

import json
import logging

from kanadojo.core.logging import CustomJsonFormatter, get_logger, setup_logging
from kanadojo.learning_engine.adaptive_selection import draw, create_seeded_rng


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_handler_installed(self, restore_root_logger):
        setup_logging(level="DEBUG", json_output=True)

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, CustomJsonFormatter)

    def test_plain_text_handler(self, restore_root_logger):
        setup_logging(level="WARNING", json_output=False)

        formatter = restore_root_logger.handlers[0].formatter
        assert not isinstance(formatter, CustomJsonFormatter)
        assert restore_root_logger.level == logging.WARNING

    def test_json_record_fields(self, restore_root_logger, capsys):
        """Records carry level, logger, message, and extra fields."""
        setup_logging(level="INFO", json_output=True)

        get_logger("kanadojo.test").info("picked item", extra={"item_id": "a"})

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["level"] == "INFO"
        assert record["logger"] == "kanadojo.test"
        assert record["message"] == "picked item"
        assert record["item_id"] == "a"
        assert "timestamp" in record

    def test_uniform_fallback_is_logged(self, restore_root_logger, capsys):
        """Degenerate weights are recovered locally and logged at DEBUG."""
        setup_logging(level="DEBUG", json_output=True)

        assert draw(["a", "b"], lambda item: 0.0, create_seeded_rng(1)) in {"a", "b"}

        records = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
        fallback = [r for r in records if r.get("pool_size") == 2]
        assert fallback
        assert fallback[0]["level"] == "DEBUG"
