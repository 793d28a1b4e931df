"""
Logging configuration for graphula.

Every runner invocation gets a run_id, attached to its log records for
correlating the generation, rejection and dump messages of one graph.

Environment Variables:
    GRAPHULA_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    GRAPHULA_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from graphula.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, run_id="3f2a...")
    logger.info("Dumped graph", extra={"path": path})
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter
from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure the graphula logger.

    Explicit arguments win over the environment:
    - GRAPHULA_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
    - GRAPHULA_LOG_FORMAT: json, text (default: text)

    Only the "graphula" logger is touched, so test runner log capture keeps
    working.
    """
    log_level = (level or os.getenv("GRAPHULA_LOG_LEVEL", "WARNING")).upper()
    fmt = (log_format or os.getenv("GRAPHULA_LOG_FORMAT", "text")).lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    resolved = level_map.get(log_level, logging.WARNING)

    package_logger = logging.getLogger("graphula")
    package_logger.setLevel(resolved)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    if fmt == "json":
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s %(run_id)s",
                rename_fields={
                    "asctime": "timestamp",
                    "name": "logger",
                    "levelname": "level",
                },
            )
        )
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s [run_id=%(run_id)s]"))

    handler.setLevel(resolved)
    handler.addFilter(RunIdFilter())
    package_logger.addHandler(handler)


def get_logger(name: str, run_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger that tags records with run_id.

    Args:
        name: Logger name (typically __name__)
        run_id: Identifier of the current graph run

    Returns:
        LoggerAdapter with run_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"run_id": run_id or "N/A"})


class RunIdFilter(logging.Filter):
    """
    Logging filter that adds run_id to all log records.

    Records from plain module loggers have no run_id; formatters expecting
    one would otherwise fail.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "run_id"):
            record.run_id = "N/A"  # type: ignore
        return True
