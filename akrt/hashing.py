"""The one-at-a-time string hash used by hash tables."""

from __future__ import annotations

from typing import Callable, Union

_MASK = 0xFFFFFFFF


def _as_bytes(data: Union[str, bytes, bytearray]) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _char_value(byte: int) -> int:
    # Characters are signed, so bytes above 0x7f widen with their sign.
    return (byte - 0x100 if byte >= 0x80 else byte) & _MASK


def _hash(data: bytes, seed: int, transform: Callable[[int], int]) -> int:
    value = seed & _MASK
    for byte in data:
        value = (value + transform(byte)) & _MASK
        value = (value + (value << 10)) & _MASK
        value ^= value >> 6
    value = (value + (value << 3)) & _MASK
    value ^= value >> 11
    value = (value + (value << 15)) & _MASK
    return value


def string_hash(data: Union[str, bytes, bytearray], seed: int = 0) -> int:
    """32-bit hash of data; text is hashed as its UTF-8 bytes."""
    return _hash(_as_bytes(data), seed, _char_value)


def case_insensitive_string_hash(data: Union[str, bytes, bytearray], seed: int = 0) -> int:
    """Like string_hash, but ASCII capitals hash as their lower-case letters."""

    def lowered(byte: int) -> int:
        if ord("A") <= byte <= ord("Z"):
            return byte + 0x20
        return _char_value(byte)

    return _hash(_as_bytes(data), seed, lowered)