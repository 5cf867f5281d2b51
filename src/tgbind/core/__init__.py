"""Core runtime primitives."""

from .config import CommandsConfig, ConfigError, LogConfig, TgbindConfig, load_config
from .exceptions import PermanentError, TgbindError
from .logging_utils import log_event, setup_rotating_logger

__all__ = [
    "CommandsConfig",
    "ConfigError",
    "LogConfig",
    "TgbindConfig",
    "load_config",
    "PermanentError",
    "TgbindError",
    "log_event",
    "setup_rotating_logger",
]
