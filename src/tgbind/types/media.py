"""Media descriptors sent alongside a file."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .base import ApiModel
from .primitives import Integer, ParseMode
from .text import TextEntity


class InputMediaVideo(ApiModel):
    """A video to be sent.

    ``caption_entities`` and ``parse_mode`` are mutually exclusive; setting
    one through its builder clears the other.
    """

    caption: Optional[str] = None
    caption_entities: Optional[tuple[TextEntity, ...]] = None
    duration: Optional[Integer] = None
    has_spoiler: Optional[bool] = None
    height: Optional[Integer] = None
    parse_mode: Optional[ParseMode] = None
    show_caption_above_media: Optional[bool] = None
    supports_streaming: Optional[bool] = None
    width: Optional[Integer] = None

    def with_caption(self, value: str) -> "InputMediaVideo":
        """Caption; 0-1024 characters after entity parsing."""
        return self._with(caption=value)

    def with_caption_entities(self, value: Iterable[TextEntity]) -> "InputMediaVideo":
        return self._with(caption_entities=tuple(value), parse_mode=None)

    def with_caption_parse_mode(self, value: ParseMode) -> "InputMediaVideo":
        return self._with(parse_mode=value, caption_entities=None)

    def with_duration(self, value: Integer) -> "InputMediaVideo":
        return self._with(duration=value)

    def with_has_spoiler(self, value: bool) -> "InputMediaVideo":
        return self._with(has_spoiler=value)

    def with_height(self, value: Integer) -> "InputMediaVideo":
        return self._with(height=value)

    def with_show_caption_above_media(self, value: bool) -> "InputMediaVideo":
        return self._with(show_caption_above_media=value)

    def with_supports_streaming(self, value: bool) -> "InputMediaVideo":
        return self._with(supports_streaming=value)

    def with_width(self, value: Integer) -> "InputMediaVideo":
        return self._with(width=value)

    def to_input_media(self, media: str) -> dict[str, Any]:
        """Render the ``InputMedia`` payload; ``media`` is a file id or URL."""
        payload: dict[str, Any] = {"type": "video", "media": media}
        payload.update(self.to_payload())
        return payload


__all__ = ["InputMediaVideo"]
