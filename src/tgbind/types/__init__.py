"""Telegram Bot API types."""

from .chat import Chat, ChatType
from .media import InputMediaVideo
from .message import (
    Command,
    CommandError,
    CommandMismatchedQuotesError,
    CommandNotFoundError,
    CommandParser,
    CommandUtf16Error,
    Message,
    parse_command,
)
from .payment import OrderInfo, ShippingAddress
from .primitives import Integer, ParseMode
from .text import BotCommand, Text, TextEntities, TextEntity, TextEntityType
from .user import User

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
    "Integer",
    "Message",
    "OrderInfo",
    "ParseMode",
    "ShippingAddress",
    "Text",
    "TextEntities",
    "TextEntity",
    "TextEntityType",
    "User",
    "parse_command",
]
