# fnvhash/utils/logging.py
"""
Logging Utilities — one root configuration for the table builder / IO layers

Intent
- Every module logs through `get_logger(__name__)`; handlers and format live on the root logger.
- The hash engine (fnvhash.core.fnv1a) never logs; only the layers around it do.

What this module guarantees
- **Idempotent:** repeated `configure_logging()` calls never stack a second stream handler,
  nor a second file handler for the same path.
- **Stable format:** `time | LEVEL | logger | message`.
- **Config-driven:** `configure_logging_from_params(params)` applies `params.logging`
  (level, log_file); explicit arguments override it.

Primary API
- `configure_logging(level="INFO", log_file=None) -> None`
- `configure_logging_from_params(params, level=None, log_file=None) -> None`
- `get_logger(name) -> logging.Logger` (configures with defaults on first use)

External dependencies
- Python stdlib: `logging`, `pathlib`
"""


from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_CONFIGURED = False
_CURRENT_LOG_FILE: Optional[str] = None


def _resolve_level(level: str) -> int:
    lv = logging.getLevelName(str(level).upper())
    if not isinstance(lv, int):
        raise ValueError(f"Invalid log level: {level}")
    return lv


def _attach(root: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATEFMT))
    root.addHandler(handler)


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Set the root level and make sure one stream handler (and, if requested,
    one file handler per log_file) is attached.
    """
    global _CONFIGURED, _CURRENT_LOG_FILE

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    # FileHandler subclasses StreamHandler, so exclude it when counting console output
    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    )
    if not has_console:
        _attach(root, logging.StreamHandler())

    if log_file:
        target = Path(log_file).resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        open_files = {
            Path(h.baseFilename).resolve() for h in root.handlers if isinstance(h, logging.FileHandler)
        }
        if target not in open_files:
            _attach(root, logging.FileHandler(target, encoding="utf-8"))
        _CURRENT_LOG_FILE = str(log_file)

    _CONFIGURED = True


def configure_logging_from_params(
    params: Any,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Duck-typed over ParametersConfig: only `params.logging.level` / `.log_file` are read.
    """
    cfg = getattr(params, "logging", None)
    configure_logging(
        level=level or getattr(cfg, "level", None) or "INFO",
        log_file=log_file if log_file is not None else getattr(cfg, "log_file", None),
    )


def get_logger(name: str) -> logging.Logger:
    if not _CONFIGURED:
        configure_logging()
    return logging.getLogger(name)


__all__ = ["get_logger", "configure_logging", "configure_logging_from_params"]
