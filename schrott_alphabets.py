#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
schrott_alphabets.py — named alphabet presets for SchrottID.

Presets are plain strings; pick one by name instead of subclassing anything:

    get_alphabet("base58")       -> "123456789ABC..."
    resolve_alphabet("base32")   -> preset
    resolve_alphabet("0123abcd") -> "0123abcd" (literal, validated later)
    resolve_alphabet("literal:BASE32") -> "BASE32" (literal even though it names a preset)

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
from typing import Dict, List

from schrott_errors import InvalidAlphabet

BASE64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE32 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

LITERAL_PREFIX = "literal:"

_PRESETS: Dict[str, str] = {
    "base64": BASE64,
    "base58": BASE58,
    "base36": BASE36,
    "base32": BASE32,
}


def available_alphabets() -> List[str]:
    return sorted(_PRESETS)


def get_alphabet(name: str) -> str:
    """Return a preset by (case-insensitive) name."""
    try:
        return _PRESETS[name.strip().lower()]
    except KeyError:
        raise InvalidAlphabet(
            f"Unknown alphabet preset {name!r} (choose from {', '.join(available_alphabets())})",
            reason="unknown_preset",
        ) from None


def resolve_alphabet(spec: str) -> str:
    """
    Preset name -> preset characters; anything else is taken literally.
    Prefix with "literal:" to keep characters that happen to spell a preset name.
    """
    if spec.startswith(LITERAL_PREFIX):
        return spec[len(LITERAL_PREFIX):]
    if spec.strip().lower() in _PRESETS:
        return get_alphabet(spec)
    return spec
