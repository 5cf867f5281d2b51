from enum import Enum

Integer = int


class ParseMode(str, Enum):
    """Formatting mode applied to message text or captions."""

    HTML = "HTML"
    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"


__all__ = ["Integer", "ParseMode"]
