# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging helpers for funcopts.

Library modules log through `logging.getLogger(__name__)` under the `funcopts`
namespace and never touch the root logger. `setup_logging` is for applications
that want to see builder diagnostics (per-option DEBUG records, build failures).
"""

from __future__ import annotations

import logging
import os

LOGGER_NAMESPACE = "funcopts"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (or FUNCOPTS_LOG_LEVEL) to a logging level, WARNING when unknown."""
    name = (level or os.getenv("FUNCOPTS_LOG_LEVEL") or "WARNING").strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | None = None, *, handler: logging.Handler | None = None) -> logging.Logger:
    """
    Attach one handler to the `funcopts` logger and set its level.

    Calling it again replaces the handler installed by the previous call instead of
    stacking duplicates.
    """
    global _handler

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = handler or logging.StreamHandler()
    if _handler.formatter is None:
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(_handler)
    package_logger.setLevel(resolve_log_level(level))
    return package_logger


__all__ = ["LOGGER_NAMESPACE", "resolve_log_level", "setup_logging"]
