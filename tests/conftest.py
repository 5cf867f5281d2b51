"""Test harness configuration.

This repo uses a `src/` layout. In some developer environments an older
installed `tgbind` package can shadow the local sources.

Ensure tests always import the in-repo code.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

import pytest

DEFAULT_NON_INTEGRATION_TIMEOUT_SECONDS = 60
TGBIND_ENV_KEYS = (
    "TGBIND_QUOTED_ARGS",
    "TGBIND_BOT_USERNAME",
    "TGBIND_LOG_LEVEL",
    "TGBIND_LOG_PATH",
)


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    src_path = str(src_dir)
    if sys.path[:1] != [src_path] and src_path not in sys.path:
        sys.path.insert(0, src_path)


def pytest_collection_modifyitems(
    session: pytest.Session, config: pytest.Config, items: list[pytest.Item]
) -> None:
    """
    Apply a default per-test timeout to non-integration tests.

    This relies on `pytest-timeout` when installed; if it isn't installed, the
    marker is inert but still documents the intent.
    """
    _ = session, config
    for item in items:
        if item.get_closest_marker("integration") is not None:
            continue
        item.add_marker(pytest.mark.timeout(DEFAULT_NON_INTEGRATION_TIMEOUT_SECONDS))


@pytest.fixture(autouse=True)
def _clean_tgbind_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in TGBIND_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def message_payload(
    text: Optional[str],
    entities: Sequence[dict[str, Any]] = (),
    *,
    message_id: int = 1,
    chat_type: str = "private",
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "message_id": message_id,
        "date": 1700000000,
        "chat": {"id": 42, "type": chat_type},
        "from": {"id": 7, "is_bot": False, "first_name": "Ada"},
    }
    if text is not None:
        payload["text"] = text
    if entities:
        payload["entities"] = list(entities)
    return payload


def command_entity(text: str, token: str, *, start: int = 0) -> dict[str, Any]:
    """Bot-command entity for the first ``token`` in ``text`` at or after ``start``."""
    from tgbind.types import TextEntity, TextEntityType

    return TextEntity.for_token(
        text, token, kind=TextEntityType.BOT_COMMAND, start=start
    ).to_payload()


@pytest.fixture()
def make_message() -> Callable[..., Any]:
    """Build a validated `Message` from text and entity payloads."""

    # Import lazily so `pytest_configure()` can prepend the local src/ directory
    # before any `tgbind` modules are loaded.
    from tgbind.types import Message

    def _make(
        text: Optional[str],
        entities: Sequence[dict[str, Any]] = (),
        **kwargs: Any,
    ) -> Message:
        return Message.from_payload(message_payload(text, entities, **kwargs))

    return _make


@pytest.fixture()
def command_message(make_message) -> Callable[..., Any]:
    """Message whose tokens are each annotated as bot commands, in the given order."""

    def _make(text: str, *tokens: str, **kwargs: Any):
        return make_message(
            text, [command_entity(text, token) for token in tokens], **kwargs
        )

    return _make
