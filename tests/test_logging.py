"""Tests for aireview.logging (AireviewLogging, level/format from config)."""

import logging
import sys

from aireview.config import LoggingConfig
from aireview.logging import (
    DEFAULT_FORMAT,
    DEFAULT_LEVEL,
    LEVELS,
    HTTP_LOGGERS,
    AireviewLogging,
    _resolve_level,
)


class TestConstants:
    """Module constants and level mapping."""

    def test_levels_has_four_standard_levels(self) -> None:
        assert LEVELS == {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
        }

    def test_default_level_is_info(self) -> None:
        assert DEFAULT_LEVEL == "INFO"


class TestResolveLevel:
    """_resolve_level maps level names to logging constants."""

    def test_lowercase_and_whitespace_normalized(self) -> None:
        assert _resolve_level(" debug ") == logging.DEBUG
        assert _resolve_level("\tWARNING\t") == logging.WARNING

    def test_unknown_level_returns_info(self) -> None:
        """Unknown level name falls back to INFO."""
        assert _resolve_level("TRACE") == logging.INFO
        assert _resolve_level("") == logging.INFO


class TestAireviewLogging:
    """AireviewLogging applies LoggingConfig (level + format) to root logger."""

    def test_setup_sets_root_level_from_config(self) -> None:
        for level_name, expected_num in LEVELS.items():
            AireviewLogging(LoggingConfig(level=level_name, format="%(message)s")).setup()
            assert logging.root.level == expected_num

    def test_setup_applies_format(self) -> None:
        custom = "%(levelname)s || %(message)s"
        AireviewLogging(LoggingConfig(level="INFO", format=custom)).setup()
        handler = logging.root.handlers[0]
        assert handler.formatter is not None
        assert handler.formatter._fmt == custom

    def test_empty_format_uses_default(self) -> None:
        """When config.format is empty, default format is used."""
        AireviewLogging(LoggingConfig(level="INFO", format="")).setup()
        fmt = logging.root.handlers[0].formatter
        assert fmt is not None
        assert fmt._fmt == DEFAULT_FORMAT

    def test_http_loggers_quiet_unless_debug(self) -> None:
        """HTTP client loggers stay at WARNING for INFO and follow DEBUG."""
        AireviewLogging(LoggingConfig(level="INFO")).setup()
        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        AireviewLogging(LoggingConfig(level="DEBUG")).setup()
        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG

    def test_logs_to_stderr(self) -> None:
        AireviewLogging(LoggingConfig(level="INFO")).setup()
        handler = logging.root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
