#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SchrottId — reversible, scrambled identifiers for unsigned 64-bit integers.
==========================================================================

Maps 0, 1, 2, ... to short strings that do not reveal magnitude or ordering,
and back. Not encryption: anyone holding the permutation can decode.

------------------------------------------------------------------
How it works
------------------------------------------------------------------
 1) value -> big-endian digits in base len(alphabet), left-padded with zero
    digits up to min_length
 2) 3 * len(digits) rounds of:
        rotate-left, permute, rotate-left, cascade, rotate-left
 3) digits -> alphabet characters

decode() runs the inverse round (rotate-right, un-cascade, rotate-right,
un-permute, rotate-right) the same number of times.

The permutation is a keyed substitution on digit values; the cascade is a
running sum mod base, so every digit depends on all digits to its left.
Rotations move that dependency around the buffer between rounds.

------------------------------------------------------------------
Minimal Example
------------------------------------------------------------------
from schrott_alphabets import BASE64
from schrott_id import SchrottId

perm = SchrottId.generate_permutation(BASE64)   # once, offline; store it
sid = SchrottId(BASE64, perm, min_length=3)     # reuse the instance

s = sid.encode(42)
assert sid.decode(s) == 42

------------------------------------------------------------------
Public API
------------------------------------------------------------------
SchrottId(alphabet: str, permutation: str, min_length: int)
SchrottId.generate_permutation(alphabet: str, rng=None) -> str
SchrottId.encode(value: int) -> str                # 0 <= value < 2**64
SchrottId.decode(text: str) -> int
SchrottId.encode_many(values) -> list[str]
SchrottId.decode_many(texts) -> list[int]
SchrottId.info() -> dict

Instances are immutable after construction; share one across threads freely.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from types import MappingProxyType

import schrott_permutation
from schrott_errors import (
    CharacterNotInAlphabet,
    InvalidConfig,
    InvalidValue,
    ValueOverflow,
)
from schrott_permutation import RandomIndexSource

logger = logging.getLogger(__name__)

VERSION = "1.0"
U64_MAX = (1 << 64) - 1

# =========================
# Digit conversion
# =========================

def _digit_count(value: int, base: int) -> int:
    """ceil(log_base(value + 1)), exact for any size of int."""
    n = 0
    while value > 0:
        value //= base
        n += 1
    return n


def _to_digits(value: int, base: int, length: int) -> List[int]:
    buf = [0] * length
    i = length
    while value > 0:
        value, rem = divmod(value, base)
        i -= 1
        buf[i] = rem
    return buf


def _from_digits(buf: Sequence[int], base: int) -> int:
    value = 0
    for d in buf:
        value = value * base + d
    return value

# =========================
# Round steps
# =========================

def _rotate_left(buf: List[int]) -> List[int]:
    return buf[1:] + buf[:1]


def _rotate_right(buf: List[int]) -> List[int]:
    return buf[-1:] + buf[:-1]


def _permute(buf: List[int], table: Sequence[int]) -> List[int]:
    return [table[d] for d in buf]


def _cascade_forward(buf: List[int], base: int) -> List[int]:
    out = []
    last = 0
    for d in buf:
        last = (d + last) % base
        out.append(last)
    return out


def _cascade_backward(buf: List[int], base: int) -> List[int]:
    # `last` is the pre-update digit; that is what makes this the inverse
    out = []
    last = 0
    for d in buf:
        out.append((d - last + base) % base)
        last = d
    return out

# =========================
# Public codec
# =========================

class SchrottId:
    """Encoder/decoder bound to one (alphabet, permutation, min_length)."""

    __slots__ = ("_alphabet", "_inverse_alphabet", "_permutation_text",
                 "_permutation", "_inverse_permutation", "_min_length")

    def __init__(self, alphabet: str, permutation: str, min_length: int):
        schrott_permutation.validate_alphabet(alphabet)

        if not isinstance(min_length, int) or isinstance(min_length, bool):
            raise TypeError("min_length must be an int")
        if min_length <= 0:
            raise InvalidConfig("min_length must be greater than 0", reason="min_length")

        inverse_alphabet: Dict[str, int] = {ch: i for i, ch in enumerate(alphabet)}
        perm, inv = schrott_permutation.parse_permutation(permutation, len(alphabet))

        self._alphabet = alphabet
        self._inverse_alphabet: Mapping[str, int] = MappingProxyType(inverse_alphabet)
        self._permutation_text = permutation
        self._permutation: Tuple[int, ...] = perm
        self._inverse_permutation: Tuple[int, ...] = inv
        self._min_length = min_length

        logger.debug("SchrottId ready: base=%d min_length=%d", len(alphabet), min_length)

    # ---- read-only views ----

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def base(self) -> int:
        return len(self._alphabet)

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def permutation(self) -> str:
        return self._permutation_text

    def __repr__(self) -> str:
        return f"SchrottId(base={self.base}, min_length={self._min_length})"

    # ---- offline helper ----

    @staticmethod
    def generate_permutation(alphabet: str, rng: Optional[RandomIndexSource] = None) -> str:
        """Secure random permutation for `alphabet` (see schrott_permutation)."""
        return schrott_permutation.generate_permutation(alphabet, rng)

    # ---- encode / decode ----

    def encode(self, value: int) -> str:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("value must be an int")
        if value < 0 or value > U64_MAX:
            raise InvalidValue("value must be in range 0 .. 2**64-1", reason="range")

        base = self.base
        length = max(_digit_count(value, base), self._min_length)
        buf = _to_digits(value, base, length)

        for _ in range(len(buf) * 3):
            buf = _rotate_left(buf)
            buf = _permute(buf, self._permutation)
            buf = _rotate_left(buf)
            buf = _cascade_forward(buf, base)
            buf = _rotate_left(buf)

        return "".join(self._alphabet[d] for d in buf)

    def decode(self, text: str) -> int:
        if not isinstance(text, str):
            raise TypeError("text must be a string")

        buf = []
        for pos, ch in enumerate(text):
            d = self._inverse_alphabet.get(ch)
            if d is None:
                raise CharacterNotInAlphabet(ch, pos)
            buf.append(d)

        base = self.base
        for _ in range(len(buf) * 3):
            buf = _rotate_right(buf)
            buf = _cascade_backward(buf, base)
            buf = _rotate_right(buf)
            buf = _permute(buf, self._inverse_permutation)
            buf = _rotate_right(buf)

        value = _from_digits(buf, base)
        if value > U64_MAX:
            raise ValueOverflow("decoded value does not fit in 64 bits", reason="overflow")
        return value

    def encode_many(self, values: Iterable[int]) -> List[str]:
        """Encode in order; the first bad value raises."""
        return [self.encode(v) for v in values]

    def decode_many(self, texts: Iterable[str]) -> List[int]:
        """Decode in order; the first bad string raises."""
        return [self.decode(t) for t in texts]

    # Optional info hook
    def info(self) -> dict:
        return {
            "name": "SchrottId",
            "version": VERSION,
            "base": self.base,
            "min_length": self._min_length,
            "notes": "rotate/permute/cascade rounds, 3 per digit; not encryption.",
        }
