from __future__ import annotations

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import LogConfig

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    @property  # type: ignore[override]
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def _json_safe(value: Any) -> Any:
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _json_safe(item) for key, item in value.items()}
    return str(value)


def format_event(event: str, **fields: Any) -> str:
    """Render a structured event as a single JSON line."""
    payload: dict[str, Any] = {"event": event}
    for key, value in fields.items():
        if value is None:
            continue
        payload[key] = _json_safe(value)
    return json.dumps(payload, sort_keys=False, ensure_ascii=False)


def log_event(
    logger: logging.Logger, level: int, event: str, **fields: Any
) -> None:
    if not logger.isEnabledFor(level):
        return
    exc = fields.get("exc")
    exc_info = None
    if isinstance(exc, BaseException) and level >= logging.ERROR:
        exc_info = exc
    logger.log(level, format_event(event, **fields), exc_info=exc_info)


def setup_rotating_logger(name: str, log_config: "LogConfig") -> logging.Logger:
    """Configure ``name`` once; repeated calls return the same logger untouched."""
    logger = logging.getLogger(name)
    logger.setLevel(log_config.level)
    if getattr(logger, "_tgbind_configured", False):
        return logger

    handler: logging.Handler
    if log_config.path is not None:
        log_config.path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_config.path,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding="utf-8",
        )
    else:
        handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    setattr(logger, "_tgbind_configured", True)
    return logger


__all__ = ["format_event", "log_event", "setup_rotating_logger"]
