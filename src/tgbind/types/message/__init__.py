from .command import (
    Command,
    CommandError,
    CommandMismatchedQuotesError,
    CommandNotFoundError,
    CommandParser,
    CommandUtf16Error,
    parse_command,
)
from .message import Message

__all__ = [
    "Command",
    "CommandError",
    "CommandMismatchedQuotesError",
    "CommandNotFoundError",
    "CommandParser",
    "CommandUtf16Error",
    "Message",
    "parse_command",
]
