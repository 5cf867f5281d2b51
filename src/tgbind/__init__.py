"""Typed Telegram Bot API bindings."""

from .core.exceptions import PermanentError, TgbindError
from .types import (
    BotCommand,
    Chat,
    ChatType,
    Command,
    CommandError,
    CommandMismatchedQuotesError,
    CommandNotFoundError,
    CommandParser,
    CommandUtf16Error,
    InputMediaVideo,
    Message,
    OrderInfo,
    ParseMode,
    ShippingAddress,
    Text,
    TextEntity,
    TextEntityType,
    User,
    parse_command,
)

__version__ = "0.3.0"

__all__ = [
    "BotCommand",
    "Chat",
    "ChatType",
    "Command",
    "CommandError",
    "CommandMismatchedQuotesError",
    "CommandNotFoundError",
    "CommandParser",
    "CommandUtf16Error",
    "InputMediaVideo",
    "Message",
    "OrderInfo",
    "ParseMode",
    "PermanentError",
    "ShippingAddress",
    "Text",
    "TextEntity",
    "TextEntityType",
    "TgbindError",
    "User",
    "parse_command",
    "__version__",
]
