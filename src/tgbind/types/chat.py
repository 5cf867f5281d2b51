from __future__ import annotations

from enum import Enum
from typing import Optional

from .base import ApiModel
from .primitives import Integer


class ChatType(str, Enum):
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


class Chat(ApiModel):
    """Conversation a message belongs to."""

    id: Integer
    type: ChatType
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: Optional[bool] = None
