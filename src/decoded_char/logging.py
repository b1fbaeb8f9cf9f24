"""Structured logging setup for decoded-char."""
from __future__ import annotations

import logging
import sys

import structlog

_DEFAULT_LEVEL = "info"


def configure_logging(level: str | None = None) -> None:
    """Route structlog through the stdlib root logger as JSON lines on stderr.

    Records carry ``ts``, ``level``, ``msg`` and ``component``. Stdout is left to
    the command output, which is itself a JSON-lines stream.
    """

    numeric_level = _numeric_level(level or _DEFAULT_LEVEL)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _numeric_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def _add_component(
    logger: logging.Logger, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    event_dict.setdefault("component", getattr(logger, "name", None) or "decoded_char")
    return event_dict


__all__ = ["configure_logging"]
