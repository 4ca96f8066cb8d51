"""Encoding of single code points as UTF-8."""

from __future__ import annotations


def code_point_to_utf8(code_point: int) -> bytes:
    """Encode one code point as UTF-8 bytes.

    Surrogates are encoded like any other value; code points outside
    0..0x10FFFF raise ValueError.
    """
    if code_point < 0 or code_point > 0x10FFFF:
        raise ValueError(f"code point {code_point:#x} is out of range")
    if code_point <= 0x7F:
        return bytes([code_point])
    if code_point <= 0x07FF:
        return bytes([
            ((code_point >> 6) & 0x1F) | 0xC0,
            (code_point & 0x3F) | 0x80,
        ])
    if code_point <= 0xFFFF:
        return bytes([
            ((code_point >> 12) & 0x0F) | 0xE0,
            ((code_point >> 6) & 0x3F) | 0x80,
            (code_point & 0x3F) | 0x80,
        ])
    return bytes([
        ((code_point >> 18) & 0x07) | 0xF0,
        ((code_point >> 12) & 0x3F) | 0x80,
        ((code_point >> 6) & 0x3F) | 0x80,
        (code_point & 0x3F) | 0x80,
    ])