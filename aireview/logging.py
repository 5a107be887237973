"""Logging setup from LoggingConfig (config.yaml logging.* or env LOGGING_*).

Log records go to stderr so thread output on stdout stays clean. HTTP
client loggers are held at WARNING unless the level is DEBUG, where
request lines help when a page of review comments goes missing.
"""

import logging

from aireview.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers of third-party HTTP libraries used by the GitHub adapter
HTTP_LOGGERS = ("urllib3", "requests")


def _resolve_level(level: str) -> int:
    """Map level name to logging constant, INFO if unknown."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class AireviewLogging:
    """Applies LoggingConfig to the root logger and the HTTP client loggers."""

    def __init__(self, config: LoggingConfig) -> None:
        self.level = _resolve_level(config.level)
        self.format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        logging.basicConfig(level=self.level, format=self.format, force=True)
        http_level = logging.DEBUG if self.level == logging.DEBUG else logging.WARNING
        for name in HTTP_LOGGERS:
            logging.getLogger(name).setLevel(http_level)
