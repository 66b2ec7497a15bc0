"""
Logging setup for the operator scripts.
The root level comes from `--log-level` or `LOG_LEVEL`. The `db` and `ui` component loggers
can be raised to DEBUG on their own, so query counts and page actions show up without
turning on DEBUG output from SQLAlchemy or Selenium.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

COMPONENT_LOGGERS = ("db", "ui")

_LOGGING_CONFIGURED = False


def _resolve_level(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def configure_logging(*, level: str | None = None, component_level: str | None = None) -> None:
    """Configure process-wide logging once; settings are only read when no level is given."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    root_level = _resolve_level(level if level is not None else get_settings().LOG_LEVEL)
    logging.basicConfig(
        level=root_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if component_level is not None:
        for name in COMPONENT_LOGGERS:
            logging.getLogger(name).setLevel(_resolve_level(component_level))
    _LOGGING_CONFIGURED = True
