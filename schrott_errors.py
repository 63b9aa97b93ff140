#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
schrott_errors.py — exception hierarchy for the SchrottID codec.

Every error is a caller input-contract violation: raised synchronously at the
earliest point, never retried. Each one carries a short machine-readable
`reason` tag so callers (and the CLI) can branch without parsing messages.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations


class SchrottIdError(ValueError):
    """Base class for all SchrottID errors."""

    def __init__(self, message: str, *, reason: str = ""):
        super().__init__(message)
        self.reason = reason


class InvalidAlphabet(SchrottIdError):
    """Alphabet size outside 2..256, duplicate characters, or unknown preset."""


class InvalidConfig(SchrottIdError):
    """Non-positive min_length, or a missing/unreadable configuration value."""


class InvalidFormat(SchrottIdError):
    """Malformed Base64 input (length, character, or padding position)."""


class InvalidPermutation(SchrottIdError):
    """Decoded permutation has the wrong length, repeats, or out-of-range values."""


class CharacterNotInAlphabet(SchrottIdError):
    """Raised by decode() on the first character not present in the alphabet."""

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Character not in alphabet: {character!r} at position {position}",
            reason="character",
        )
        self.character = character
        self.position = position


class InvalidValue(SchrottIdError):
    """Raised by encode() for integers outside the unsigned 64-bit range."""


class ValueOverflow(SchrottIdError):
    """Raised by decode() when the decoded value does not fit in 64 bits."""
