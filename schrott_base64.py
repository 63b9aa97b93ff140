#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
schrott_base64.py — strict standard Base64 (RFC 4648 alphabet, '=' padding).

Used only to serialize the SchrottID permutation table, so decode() is strict
on purpose: no whitespace skipping, no URL-safe alphabet, no missing padding.

  encode(b"\\x00\\x01")  -> "AAE="
  decode("AAE=")        -> b"\\x00\\x01"

Errors:
  InvalidFormat  length not a multiple of 4, character outside the alphabet,
                 or '=' anywhere but the last one or two positions.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
from typing import Dict

from schrott_errors import InvalidFormat

# =========================
# Lookup tables
# =========================

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = "="

_ENCODE_LOOKUP = ALPHABET
_DECODE_LOOKUP: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}

assert len(_ENCODE_LOOKUP) == 64
assert len(_DECODE_LOOKUP) == 64

# =========================
# Encode
# =========================

def encode(data: bytes) -> str:
    """Encode bytes to padded Base64 text."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    data = bytes(data)

    out = []
    full = len(data) - len(data) % 3
    for i in range(0, full, 3):
        temp = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        out.append(_ENCODE_LOOKUP[(temp >> 18) & 0x3F])
        out.append(_ENCODE_LOOKUP[(temp >> 12) & 0x3F])
        out.append(_ENCODE_LOOKUP[(temp >> 6) & 0x3F])
        out.append(_ENCODE_LOOKUP[temp & 0x3F])

    tail = len(data) - full
    if tail == 1:
        temp = data[full] << 16
        out.append(_ENCODE_LOOKUP[(temp >> 18) & 0x3F])
        out.append(_ENCODE_LOOKUP[(temp >> 12) & 0x3F])
        out.append(PAD * 2)
    elif tail == 2:
        temp = (data[full] << 16) | (data[full + 1] << 8)
        out.append(_ENCODE_LOOKUP[(temp >> 18) & 0x3F])
        out.append(_ENCODE_LOOKUP[(temp >> 12) & 0x3F])
        out.append(_ENCODE_LOOKUP[(temp >> 6) & 0x3F])
        out.append(PAD)

    return "".join(out)

# =========================
# Decode
# =========================

def _padding_count(text: str) -> int:
    """Number of trailing '=' (0..2); rejects '=' anywhere else."""
    pad = 0
    if text.endswith(PAD * 2):
        pad = 2
    elif text.endswith(PAD):
        pad = 1
    if PAD in text[:len(text) - pad]:
        raise InvalidFormat("Invalid padding in Base64", reason="padding")
    return pad


def decode(text: str) -> bytes:
    """Decode padded Base64 text to bytes."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    if len(text) % 4 != 0:
        raise InvalidFormat("Base64 length must be a multiple of 4", reason="length")

    pad = _padding_count(text)
    out = bytearray()
    for i in range(0, len(text), 4):
        temp = 0
        for ch in text[i:i + 4]:
            if ch == PAD:
                # padding only ever sits in the final group
                temp <<= 6
                continue
            v = _DECODE_LOOKUP.get(ch)
            if v is None:
                raise InvalidFormat(f"Invalid character in Base64: {ch!r}", reason="character")
            temp = (temp << 6) | v
        out.append((temp >> 16) & 0xFF)
        out.append((temp >> 8) & 0xFF)
        out.append(temp & 0xFF)

    if pad:
        del out[-pad:]
    return bytes(out)
