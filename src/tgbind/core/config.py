import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from .exceptions import TgbindError

logger = logging.getLogger("tgbind.core.config")

CONFIG_FILENAME = "tgbind.yml"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 3

ENV_QUOTED_ARGS = "TGBIND_QUOTED_ARGS"
ENV_BOT_USERNAME = "TGBIND_BOT_USERNAME"
ENV_LOG_LEVEL = "TGBIND_LOG_LEVEL"
ENV_LOG_PATH = "TGBIND_LOG_PATH"
ENV_OVERRIDES = (ENV_QUOTED_ARGS, ENV_BOT_USERNAME, ENV_LOG_LEVEL, ENV_LOG_PATH)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(TgbindError):
    """Raised when configuration is invalid."""


def _section(raw: Any, key: str) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{key} must be a mapping")
    return raw


@dataclass(frozen=True)
class CommandsConfig:
    quoted_args: bool = False
    bot_username: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "CommandsConfig":
        cfg = _section(raw, "commands")
        quoted_args = cfg.get("quoted_args", False)
        if not isinstance(quoted_args, bool):
            raise ConfigError("commands.quoted_args must be a boolean")
        bot_username = cfg.get("bot_username")
        if bot_username is not None:
            if not isinstance(bot_username, str):
                raise ConfigError("commands.bot_username must be a string")
            bot_username = bot_username.strip().lstrip("@") or None
        return cls(quoted_args=quoted_args, bot_username=bot_username)


@dataclass(frozen=True)
class LogConfig:
    level: int = logging.INFO
    path: Optional[Path] = None
    max_bytes: int = DEFAULT_LOG_MAX_BYTES
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT

    @classmethod
    def from_raw(cls, raw: Any, *, root: Path) -> "LogConfig":
        cfg = _section(raw, "log")
        level_name = str(cfg.get("level", DEFAULT_LOG_LEVEL)).strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ConfigError(
                f"log.level must be a logging level name, got {level_name!r}"
            )

        path_value = cfg.get("path")
        path: Optional[Path] = None
        if path_value is not None:
            if not isinstance(path_value, str) or not path_value.strip():
                raise ConfigError("log.path must be a string path")
            path = Path(path_value).expanduser()
            if not path.is_absolute():
                path = root / path

        max_bytes = cfg.get("max_bytes", DEFAULT_LOG_MAX_BYTES)
        if isinstance(max_bytes, bool) or not isinstance(max_bytes, int):
            raise ConfigError("log.max_bytes must be an integer")
        if max_bytes < 0:
            raise ConfigError("log.max_bytes must be >= 0")
        backup_count = cfg.get("backup_count", DEFAULT_LOG_BACKUP_COUNT)
        if isinstance(backup_count, bool) or not isinstance(backup_count, int):
            raise ConfigError("log.backup_count must be an integer")
        if backup_count < 0:
            raise ConfigError("log.backup_count must be >= 0")
        return cls(
            level=level, path=path, max_bytes=max_bytes, backup_count=backup_count
        )


@dataclass(frozen=True)
class TgbindConfig:
    root: Path
    commands: CommandsConfig = field(default_factory=CommandsConfig)
    log: LogConfig = field(default_factory=LogConfig)
    raw: Dict[str, Any] = field(default_factory=dict)


def _load_yaml_dict(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a mapping: {path}")
    return data


def load_dotenv_for_root(root: Path) -> None:
    """Load ``root/.env`` without clobbering variables already set."""
    candidate = root / ".env"
    try:
        if candidate.is_file():
            load_dotenv(dotenv_path=candidate, override=False)
    except OSError as exc:
        logger.debug("Failed to load .env file: %s", exc)


def _parse_bool_text(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


def apply_env_overrides(
    data: Dict[str, Any], env: Mapping[str, str]
) -> Dict[str, Any]:
    merged = dict(data)
    commands = dict(_section(merged.get("commands"), "commands"))
    log = dict(_section(merged.get("log"), "log"))

    quoted = env.get(ENV_QUOTED_ARGS)
    if quoted is not None and quoted.strip():
        commands["quoted_args"] = _parse_bool_text(ENV_QUOTED_ARGS, quoted)
    bot_username = env.get(ENV_BOT_USERNAME)
    if bot_username is not None and bot_username.strip():
        commands["bot_username"] = bot_username
    level = env.get(ENV_LOG_LEVEL)
    if level is not None and level.strip():
        log["level"] = level
    log_path = env.get(ENV_LOG_PATH)
    if log_path is not None and log_path.strip():
        log["path"] = log_path

    merged["commands"] = commands
    merged["log"] = log
    return merged


def collect_env_overrides(*, env: Optional[Mapping[str, str]] = None) -> list[str]:
    source = env if env is not None else os.environ
    return [key for key in ENV_OVERRIDES if str(source.get(key) or "").strip()]


def load_config(
    root: Optional[Path] = None,
    *,
    path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> TgbindConfig:
    """Load ``tgbind.yml`` plus ``.env`` and environment overrides.

    A missing default config file yields defaults; an explicit ``path`` that
    does not exist is an error.
    """
    root = (root or Path.cwd()).resolve()
    if path is not None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        config_path = path
    else:
        config_path = root / CONFIG_FILENAME
    load_dotenv_for_root(root)
    data = _load_yaml_dict(config_path)
    data = apply_env_overrides(data, env if env is not None else os.environ)
    return TgbindConfig(
        root=root,
        commands=CommandsConfig.from_raw(data.get("commands")),
        log=LogConfig.from_raw(data.get("log"), root=root),
        raw=data,
    )


__all__ = [
    "CONFIG_FILENAME",
    "CommandsConfig",
    "ConfigError",
    "LogConfig",
    "TgbindConfig",
    "apply_env_overrides",
    "collect_env_overrides",
    "load_config",
    "load_dotenv_for_root",
]
