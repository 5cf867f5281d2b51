import pytest

from tgbind.types.utf16 import utf16_len, utf16_offset_of, utf16_skip, utf16_slice


def test_utf16_len_counts_surrogate_pairs_as_two_units() -> None:
    assert utf16_len("") == 0
    assert utf16_len("abc") == 3
    assert utf16_len("é") == 1
    assert utf16_len("\U0001f600") == 2
    assert utf16_len("a\U0001f600b") == 4


def test_offset_of_converts_python_indices() -> None:
    text = "\U0001f600 /start"
    assert utf16_offset_of(text, text.index("/start")) == 3
    assert utf16_offset_of(text, 0) == 0
    with pytest.raises(ValueError):
        utf16_offset_of(text, -1)


@pytest.mark.parametrize(
    ("text", "target"),
    [
        ("plain /cmd tail", "/cmd"),
        ("\U0001f600\U0001f680 /cmd tail", "/cmd"),
        ("日本 \U0001f1ef\U0001f1f5 /cmd", "/cmd"),
        ("\U0001f600", "\U0001f600"),
    ],
)
def test_slice_and_skip_land_on_python_boundaries(text: str, target: str) -> None:
    index = text.index(target)
    offset = utf16_offset_of(text, index)
    length = utf16_len(target)
    assert utf16_slice(text, offset, length) == target
    assert utf16_skip(text, offset + length) == text[index + len(target) :]


def test_skip_past_end_is_empty() -> None:
    assert utf16_skip("abc", 10) == ""


def test_split_surrogate_pair_fails_to_decode() -> None:
    with pytest.raises(UnicodeDecodeError):
        utf16_skip("a\U0001f600b", 2)
    with pytest.raises(UnicodeDecodeError):
        utf16_slice("\U0001f600", 0, 1)


def test_lone_surrogate_in_text_fails_on_decode_not_encode() -> None:
    text = "ok \udc00"
    assert utf16_len(text) == 4
    assert utf16_slice(text, 0, 2) == "ok"
    with pytest.raises(UnicodeDecodeError):
        utf16_skip(text, 2)


def test_negative_offsets_are_rejected() -> None:
    with pytest.raises(ValueError):
        utf16_skip("abc", -1)
    with pytest.raises(ValueError):
        utf16_slice("abc", 0, -1)


def test_slice_beyond_text_fails_to_decode() -> None:
    with pytest.raises(UnicodeDecodeError):
        utf16_slice("/ping a b", 40, 5)
    with pytest.raises(UnicodeDecodeError):
        utf16_slice("abc", 1, 3)
    assert utf16_slice("abc", 3, 0) == ""
