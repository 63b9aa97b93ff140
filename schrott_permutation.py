#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
schrott_permutation.py — permutation tables for SchrottID.

A permutation is one byte per alphabet position, values 0..size-1, each used
exactly once. It travels as standard Base64 text (see schrott_base64).

  generate_permutation(alphabet)   offline tool: Fisher–Yates over identity,
                                   indices drawn from a CSPRNG (secrets)
  parse_permutation(text, size)    Base64 -> validated (forward, inverse) tables

The random source is pluggable: anything with `randbelow(n) -> int` works, so
tests can pass a scripted source while production keeps `secrets`.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
import logging
import secrets
from typing import List, Optional, Protocol, Sequence, Tuple

import schrott_base64
from schrott_errors import InvalidAlphabet, InvalidPermutation

logger = logging.getLogger(__name__)

MIN_ALPHABET = 2
MAX_ALPHABET = 256

# =========================
# Alphabet checks
# =========================

def validate_alphabet(alphabet: str) -> None:
    if not isinstance(alphabet, str):
        raise TypeError("alphabet must be a string")
    if not (MIN_ALPHABET <= len(alphabet) <= MAX_ALPHABET):
        raise InvalidAlphabet("Alphabet must have 2 to 256 characters", reason="size")
    if len(set(alphabet)) != len(alphabet):
        raise InvalidAlphabet("Alphabet must have unique characters", reason="duplicate")

# =========================
# Random index source
# =========================

class RandomIndexSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        ...


class SecretsIndexSource:
    """Default source backed by the OS CSPRNG."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)

# =========================
# Generate / parse
# =========================

def shuffle_in_place(buf: List[int], rng: RandomIndexSource) -> None:
    """Swap every position with an index drawn uniformly from the whole range."""
    n = len(buf)
    for i in range(n):
        p = rng.randbelow(n)
        buf[i], buf[p] = buf[p], buf[i]


def generate_permutation(alphabet: str, rng: Optional[RandomIndexSource] = None) -> str:
    """Return a fresh Base64 permutation suitable for `alphabet`."""
    validate_alphabet(alphabet)
    rng = rng or SecretsIndexSource()

    perm = list(range(len(alphabet)))
    shuffle_in_place(perm, rng)
    logger.debug("generated permutation for %d-character alphabet", len(alphabet))
    return schrott_base64.encode(bytes(perm))


def invert_permutation(perm: Sequence[int]) -> Tuple[int, ...]:
    inv = [0] * len(perm)
    for i, v in enumerate(perm):
        inv[v] = i
    return tuple(inv)


def parse_permutation(text: str, size: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Decode and validate a Base64 permutation for an alphabet of `size` chars.
    Returns (forward, inverse). InvalidFormat from the Base64 layer propagates.
    """
    if not isinstance(text, str):
        raise TypeError("permutation must be a Base64 string")
    perm = tuple(schrott_base64.decode(text))

    if len(perm) != size:
        raise InvalidPermutation(
            "Permutation length must be equal to alphabet length. "
            "Please make sure to use a valid permutation for this alphabet",
            reason="length_mismatch",
        )
    if len(set(perm)) != len(perm):
        raise InvalidPermutation("Invalid permutation. All positions must be unique.",
                                 reason="not_unique")
    if min(perm) != 0 or max(perm) != size - 1:
        raise InvalidPermutation("Invalid permutation. Invalid indices for used alphabet.",
                                 reason="out_of_range")

    return perm, invert_permutation(perm)
