"""UTF-16 code-unit arithmetic.

The platform expresses entity offsets and lengths in UTF-16 code units. These
helpers are the only place such offsets are interpreted; everything they
return is plain Python text or Python string indices.
"""

from __future__ import annotations

_CODEC = "utf-16-le"
_UNIT = 2


def _encode(text: str) -> bytes:
    # surrogatepass keeps lone surrogates so they fail on decode, not here.
    return text.encode(_CODEC, "surrogatepass")


def _decode(raw: bytes) -> str:
    return raw.decode(_CODEC)


def utf16_len(text: str) -> int:
    """Return the length of ``text`` in UTF-16 code units."""
    return len(_encode(text)) // _UNIT


def utf16_offset_of(text: str, index: int) -> int:
    """Convert a Python string index into a UTF-16 offset."""
    if index < 0:
        raise ValueError("index must be >= 0")
    return utf16_len(text[:index])


def utf16_slice(text: str, offset: int, length: int) -> str:
    """Return the substring covering ``length`` code units from ``offset``.

    Raises ``UnicodeDecodeError`` when either boundary splits a surrogate pair
    or the span runs past the end of ``text``.
    """
    if offset < 0 or length < 0:
        raise ValueError("offset and length must be >= 0")
    raw = _encode(text)
    start = offset * _UNIT
    end = start + length * _UNIT
    if end > len(raw):
        raise UnicodeDecodeError(
            _CODEC, raw, min(start, len(raw)), len(raw), "span exceeds text length"
        )
    return _decode(raw[start:end])


def utf16_skip(text: str, offset: int) -> str:
    """Return the text remaining after ``offset`` code units.

    Raises ``UnicodeDecodeError`` when the remainder is not valid UTF-16.
    """
    if offset < 0:
        raise ValueError("offset must be >= 0")
    return _decode(_encode(text)[offset * _UNIT :])


__all__ = ["utf16_len", "utf16_offset_of", "utf16_skip", "utf16_slice"]
