import json
import logging
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from pydantic import ValidationError

from . import __version__
from .core.config import ConfigError, collect_env_overrides, load_config
from .core.logging_utils import log_event, setup_rotating_logger
from .types.message import (
    CommandError,
    CommandNotFoundError,
    CommandParser,
    Message,
)

_UPDATE_MESSAGE_KEYS = (
    "message",
    "edited_message",
    "channel_post",
    "edited_channel_post",
)

app = typer.Typer(add_completion=False, help="Inspect Telegram message payloads.")


def raise_exit(message: str, *, cause: Optional[BaseException] = None) -> NoReturn:
    typer.echo(message, err=True)
    if cause is not None:
        raise typer.Exit(code=1) from cause
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"tgbind {__version__}")
    raise typer.Exit(code=0)


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    return


def _read_payload(path: Optional[Path]) -> Any:
    try:
        if path is None:
            raw = typer.get_text_stream("stdin").read()
        else:
            raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise_exit(f"Failed to read {path}: {exc}", cause=exc)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise_exit(f"Invalid JSON payload: {exc}", cause=exc)


def load_message(payload: Any) -> Message:
    """Accept either a bare message or an update that wraps one."""
    if not isinstance(payload, dict):
        raise_exit("Payload must be a JSON object.")
    candidate = payload
    if "message_id" not in payload:
        candidate = next(
            (
                payload[key]
                for key in _UPDATE_MESSAGE_KEYS
                if isinstance(payload.get(key), dict)
            ),
            None,
        )
        if candidate is None:
            raise_exit("Payload contains no message.")
    try:
        return Message.from_payload(candidate)
    except ValidationError as exc:
        raise_exit(f"Invalid message payload: {exc}", cause=exc)


@app.command("parse")
def parse_cmd(
    path: Optional[Path] = typer.Argument(
        None, help="Message or update JSON file; reads stdin when omitted"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Path to a tgbind.yml file"
    ),
    quoted: Optional[bool] = typer.Option(
        None,
        "--quoted/--no-quoted",
        help="Split arguments with shell-style quoting (default: commands.quoted_args)",
    ),
    output_json: bool = typer.Option(False, "--json", help="Emit JSON output"),
):
    """Parse the first bot command of a message."""
    try:
        config = load_config(path=config_path)
    except ConfigError as exc:
        raise_exit(str(exc), cause=exc)
    logger = setup_rotating_logger("tgbind", config.log)
    env_overrides = collect_env_overrides()
    if env_overrides:
        logger.debug("Environment overrides active: %s", ", ".join(env_overrides))

    message = load_message(_read_payload(path))
    parser = CommandParser(
        quoted_args=config.commands.quoted_args if quoted is None else quoted,
        bot_username=config.commands.bot_username,
    )
    try:
        command = parser.parse(message)
    except CommandNotFoundError as exc:
        raise_exit("No command found in message.", cause=exc)
    except CommandError as exc:
        log_event(
            logger,
            logging.WARNING,
            "cli.parse.failed",
            message_id=message.message_id,
            exc=exc,
        )
        raise_exit(str(exc), cause=exc)

    if output_json:
        typer.echo(
            json.dumps(
                {
                    "name": command.name,
                    "args": list(command.args),
                    "bot_name": command.bot_name,
                    "message_id": message.message_id,
                },
                ensure_ascii=False,
            )
        )
        return
    typer.echo(f"name: {command.name}")
    if command.bot_name:
        typer.echo(f"bot: {command.bot_name}")
    typer.echo(f"args: {' '.join(command.args)}")


@app.command("entities")
def entities_cmd(
    path: Optional[Path] = typer.Argument(
        None, help="Message or update JSON file; reads stdin when omitted"
    ),
):
    """List text entities with the text they cover."""
    message = load_message(_read_payload(path))
    text = message.get_text() or message.get_caption()
    if text is None or not text.entities:
        typer.echo("No entities.")
        return
    for entity in text.entities:
        try:
            covered = text.get_entity_text(entity)
        except UnicodeDecodeError as exc:
            raise_exit(
                f"Entity {entity.type} at {entity.offset} does not fit the text",
                cause=exc,
            )
        typer.echo(f"{entity.type}\t{entity.offset}+{entity.length}\t{covered}")


def main() -> None:
    """Entrypoint for CLI execution."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
