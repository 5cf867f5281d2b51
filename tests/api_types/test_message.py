import pytest
from pydantic import ValidationError

from tgbind.types import ChatType, Message, TextEntityType


def test_from_payload_reads_platform_field_names() -> None:
    message = Message.from_payload(
        {
            "message_id": 10,
            "date": 1700000000,
            "chat": {"id": -100, "type": "supergroup", "title": "Ops"},
            "from": {"id": 5, "is_bot": False, "first_name": "Grace", "last_name": "H"},
            "text": "/deploy prod",
            "entities": [{"type": "bot_command", "offset": 0, "length": 7}],
            "unknown_field": {"ignored": True},
        }
    )
    assert message.chat.type is ChatType.SUPERGROUP
    assert message.from_user is not None
    assert message.from_user.full_name == "Grace H"
    assert message.entities is not None
    assert message.entities[0].type == TextEntityType.BOT_COMMAND


def test_get_text_bundles_entities() -> None:
    message = Message.from_payload(
        {
            "message_id": 1,
            "date": 0,
            "chat": {"id": 1, "type": "private"},
            "text": "/start",
            "entities": [{"type": "bot_command", "offset": 0, "length": 6}],
        }
    )
    text = message.get_text()
    assert text is not None
    assert text.data == "/start"
    assert len(text.entities) == 1


def test_get_text_is_none_for_media_messages() -> None:
    message = Message.from_payload(
        {
            "message_id": 1,
            "date": 0,
            "chat": {"id": 1, "type": "private"},
            "caption": "look /here",
            "caption_entities": [{"type": "bot_command", "offset": 5, "length": 5}],
        }
    )
    assert message.get_text() is None
    caption = message.get_caption()
    assert caption is not None
    assert caption.get_bot_commands()[0].command == "/here"


def test_payload_roundtrip_uses_alias_and_skips_none() -> None:
    payload = {
        "message_id": 3,
        "date": 0,
        "chat": {"id": 1, "type": "private"},
        "from": {"id": 2, "is_bot": True, "first_name": "bot"},
        "text": "hi",
    }
    assert Message.from_payload(payload).to_payload() == payload


def test_messages_are_frozen() -> None:
    message = Message.from_payload(
        {"message_id": 1, "date": 0, "chat": {"id": 1, "type": "private"}}
    )
    with pytest.raises(ValidationError):
        message.text = "changed"


def test_invalid_payload_raises_validation_error() -> None:
    with pytest.raises(ValidationError):
        Message.from_payload({"message_id": "nope", "date": 0})
