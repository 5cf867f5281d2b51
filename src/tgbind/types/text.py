"""Message text and the entities that annotate it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from pydantic import Field

from .base import ApiModel
from .user import User
from .utf16 import utf16_len, utf16_slice


class TextEntityType(str, Enum):
    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    BLOCKQUOTE = "blockquote"
    EXPANDABLE_BLOCKQUOTE = "expandable_blockquote"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"
    CUSTOM_EMOJI = "custom_emoji"


class TextEntity(ApiModel):
    """A span of message text; ``offset`` and ``length`` are UTF-16 code units.

    ``type`` stays a plain string so entity kinds added to the platform later
    still parse; compare it against `TextEntityType` members.
    """

    type: str
    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None
    custom_emoji_id: Optional[str] = None

    @classmethod
    def bot_command(cls, offset: int, length: int) -> "TextEntity":
        return cls(type=TextEntityType.BOT_COMMAND.value, offset=offset, length=length)

    @classmethod
    def for_token(
        cls, text: str, token: str, *, kind: TextEntityType, start: int = 0
    ) -> "TextEntity":
        """Build an entity covering the first occurrence of ``token`` in ``text``."""
        index = text.index(token, start)
        return cls(
            type=kind.value,
            offset=utf16_len(text[:index]),
            length=utf16_len(token),
        )

    @property
    def is_bot_command(self) -> bool:
        return self.type == TextEntityType.BOT_COMMAND


TextEntities = Sequence[TextEntity]


@dataclass(frozen=True)
class BotCommand:
    """A bot-command entity resolved against the text it annotates."""

    command: str
    bot_name: Optional[str] = None

    @classmethod
    def from_token(cls, token: str) -> "BotCommand":
        command, sep, bot_name = token.partition("@")
        if not sep:
            return cls(command=command)
        return cls(command=command, bot_name=bot_name)


@dataclass(frozen=True)
class Text:
    data: str
    entities: tuple[TextEntity, ...] = ()

    @classmethod
    def build(
        cls, data: str, entities: Optional[Iterable[TextEntity]] = None
    ) -> "Text":
        return cls(data=data, entities=tuple(entities or ()))

    def get_entity_text(self, entity: TextEntity) -> str:
        """Return the substring covered by ``entity``.

        Raises ``UnicodeDecodeError`` when the span splits a surrogate pair or
        lies outside the text.
        """
        return utf16_slice(self.data, entity.offset, entity.length)

    def get_bot_commands(self) -> Optional[list[BotCommand]]:
        """Resolve bot-command entities in entity-list order, or ``None``."""
        commands = [
            BotCommand.from_token(self.get_entity_text(entity))
            for entity in self.entities
            if entity.is_bot_command
        ]
        return commands or None

    def __str__(self) -> str:
        return self.data


__all__ = [
    "BotCommand",
    "Text",
    "TextEntities",
    "TextEntity",
    "TextEntityType",
]
