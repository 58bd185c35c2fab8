# logger.py
# structlog on top of stdlib logging. Modules call structlog.get_logger(__name__);
# applications call setup_logging() once at startup.

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .config import LoggingConfig


def setup_logging(cfg: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """Configure stdlib logging + structlog (json or console output)."""
    cfg = cfg or LoggingConfig()
    level = getattr(logging, cfg.level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    renderer = (structlog.processors.JSONRenderer() if cfg.format.lower() == "json"
                else structlog.dev.ConsoleRenderer())
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger("oceo_export")
