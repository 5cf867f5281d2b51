from __future__ import annotations

from typing import Optional

from .base import ApiModel
from .primitives import Integer


class User(ApiModel):
    """A Telegram user or bot."""

    id: Integer
    is_bot: bool = False
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None

    @property
    def full_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name
