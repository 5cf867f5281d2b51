"""Slash-command extraction from inbound messages.

Only the first bot-command entity of a message is honored; every other
command entity is ignored. Everything after the command token (and its
``@botname`` suffix, when present) is treated as arguments separated by
whitespace. With ``quoted_args`` enabled, arguments are split with POSIX shell
quoting so ``'arg1 v' arg2`` yields ``("arg1 v", "arg2")``.
"""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from typing import Optional

from ...core.config import CommandsConfig
from ...core.exceptions import PermanentError
from ...core.logging_utils import log_event
from ..utf16 import utf16_len, utf16_offset_of, utf16_skip
from .message import Message

logger = logging.getLogger(__name__)


class CommandError(PermanentError):
    """Failed to parse a command from a message."""

    def __init__(self, message: str, *, user_message: Optional[str] = None) -> None:
        super().__init__(
            f"failed to parse command: {message}", user_message=user_message
        )


class CommandNotFoundError(CommandError):
    """The message has no text or no bot-command entity."""

    severity = "info"

    def __init__(self) -> None:
        super().__init__("not found")


class CommandUtf16Error(CommandError):
    """Entity offsets split the text somewhere other than a code-point boundary."""

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


class CommandMismatchedQuotesError(CommandError):
    """Quoted arguments are not balanced."""

    def __init__(self) -> None:
        super().__init__("mismatched quotes")


def normalize_bot_username(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lstrip("@").strip().lower()
    return normalized or None


@dataclass(frozen=True)
class Command:
    """A command parsed from a message.

    ``name`` keeps its leading slash; ``args`` is empty when nothing follows
    the command token.
    """

    name: str
    args: tuple[str, ...]
    message: Message
    bot_name: Optional[str] = None

    @classmethod
    def from_message(cls, message: Message, *, quoted_args: bool = False) -> "Command":
        return parse_command(message, quoted_args=quoted_args)

    def is_addressed_to(self, username: Optional[str]) -> bool:
        """Whether a bot named ``username`` should handle this command."""
        if self.bot_name is None:
            return True
        target = normalize_bot_username(username)
        if target is None:
            return True
        return self.bot_name.lower() == target


def _split_args(raw_args: str, *, quoted_args: bool) -> tuple[str, ...]:
    if not quoted_args:
        return tuple(raw_args.split())
    try:
        return tuple(shlex.split(raw_args, posix=True))
    except ValueError as exc:
        raise CommandMismatchedQuotesError() from exc


def parse_command(message: Message, *, quoted_args: bool = False) -> Command:
    """Extract the first command of ``message``.

    Raises `CommandNotFoundError` when there is nothing to parse,
    `CommandUtf16Error` when entity offsets do not line up with the text and
    `CommandMismatchedQuotesError` for unbalanced quotes in ``quoted_args``
    mode.
    """
    text = message.get_text()
    if text is None:
        raise CommandNotFoundError()
    try:
        commands = text.get_bot_commands()
    except UnicodeDecodeError as exc:
        log_event(
            logger,
            logging.WARNING,
            "command.parse.entity_decode_failed",
            message_id=message.message_id,
            exc=exc,
        )
        raise CommandUtf16Error(str(exc)) from exc
    if not commands:
        raise CommandNotFoundError()

    command = commands[0]
    name = command.command
    index = text.data.find(name)
    offset = utf16_offset_of(text.data, index) if index >= 0 else 0
    length = utf16_len(name)
    if command.bot_name is not None:
        # +1 for the '@' joining the command and the bot name
        length += utf16_len(command.bot_name) + 1
    end = offset + length
    try:
        raw_args = utf16_skip(text.data, end)
    except UnicodeDecodeError as exc:
        log_event(
            logger,
            logging.WARNING,
            "command.parse.utf16_failed",
            message_id=message.message_id,
            command=name,
            offset=end,
            exc=exc,
        )
        raise CommandUtf16Error(str(exc)) from exc

    args = _split_args(raw_args, quoted_args=quoted_args)
    log_event(
        logger,
        logging.DEBUG,
        "command.parsed",
        message_id=message.message_id,
        command=name,
        bot_name=command.bot_name,
        arg_count=len(args),
    )
    return Command(name=name, args=args, message=message, bot_name=command.bot_name)


class CommandParser:
    """Command extraction bound to a `CommandsConfig`.

    When a bot username is configured, commands explicitly addressed to a
    different bot are treated as not found.
    """

    def __init__(
        self,
        *,
        quoted_args: bool = False,
        bot_username: Optional[str] = None,
    ) -> None:
        self._quoted_args = quoted_args
        self._bot_username = normalize_bot_username(bot_username)

    @classmethod
    def from_config(cls, config: CommandsConfig) -> "CommandParser":
        return cls(quoted_args=config.quoted_args, bot_username=config.bot_username)

    @property
    def quoted_args(self) -> bool:
        return self._quoted_args

    @property
    def bot_username(self) -> Optional[str]:
        return self._bot_username

    def parse(self, message: Message) -> Command:
        command = parse_command(message, quoted_args=self._quoted_args)
        if not command.is_addressed_to(self._bot_username):
            log_event(
                logger,
                logging.DEBUG,
                "command.parse.other_bot",
                message_id=message.message_id,
                command=command.name,
                bot_name=command.bot_name,
            )
            raise CommandNotFoundError()
        return command


__all__ = [
    "Command",
    "CommandError",
    "CommandMismatchedQuotesError",
    "CommandNotFoundError",
    "CommandParser",
    "CommandUtf16Error",
    "normalize_bot_username",
    "parse_command",
]
