from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import ApiModel
from ..chat import Chat
from ..primitives import Integer
from ..text import Text, TextEntity
from ..user import User


class Message(ApiModel):
    """The subset of the platform message schema used by this library."""

    message_id: Integer
    date: Integer
    chat: Chat
    from_user: Optional[User] = Field(default=None, alias="from")
    message_thread_id: Optional[Integer] = None
    text: Optional[str] = None
    entities: Optional[tuple[TextEntity, ...]] = None
    caption: Optional[str] = None
    caption_entities: Optional[tuple[TextEntity, ...]] = None

    def get_text(self) -> Optional[Text]:
        """Return the message body with its entities, or ``None``."""
        if self.text is None:
            return None
        return Text.build(self.text, self.entities)

    def get_caption(self) -> Optional[Text]:
        if self.caption is None:
            return None
        return Text.build(self.caption, self.caption_entities)
