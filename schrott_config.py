#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
schrott_config.py — where SchrottID parameters come from.

Sources (all optional, merged by the caller):
  - JSON file:   {"alphabet": "base64", "permutation": "...", "min_length": 3}
  - environment: SCHROTT_ID_ALPHABET, SCHROTT_ID_PERMUTATION, SCHROTT_ID_MIN_LENGTH

The alphabet may be a preset name (see schrott_alphabets) or literal characters.
Nothing here validates the parameters beyond presence/type; SchrottId does that
when build() is called.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from schrott_alphabets import resolve_alphabet
from schrott_errors import InvalidConfig
from schrott_id import SchrottId

ENV_PREFIX = "SCHROTT_ID_"
KEYS = ("alphabet", "permutation", "min_length")


def _as_min_length(raw: Any) -> int:
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise InvalidConfig(f"min_length must be an integer, got {raw!r}", reason="min_length")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidConfig(f"min_length must be an integer, got {raw!r}", reason="min_length") from None


@dataclass(frozen=True)
class SchrottIdConfig:
    alphabet: str
    permutation: str
    min_length: int

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SchrottIdConfig":
        missing = [k for k in KEYS if data.get(k) in (None, "")]
        if missing:
            raise InvalidConfig(f"missing config value(s): {', '.join(missing)}", reason="missing_key")
        return cls(
            alphabet=resolve_alphabet(str(data["alphabet"])),
            permutation=str(data["permutation"]).strip(),
            min_length=_as_min_length(data["min_length"]),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 prefix: str = ENV_PREFIX) -> "SchrottIdConfig":
        return cls.from_mapping(read_env(environ, prefix))

    def build(self) -> SchrottId:
        return SchrottId(self.alphabet, self.permutation, self.min_length)


def read_env(environ: Optional[Mapping[str, str]] = None, prefix: str = ENV_PREFIX) -> Dict[str, str]:
    """Collect whichever SCHROTT_ID_* values are set (keys lower-cased, prefix stripped)."""
    env = os.environ if environ is None else environ
    out: Dict[str, str] = {}
    for key in KEYS:
        val = env.get(prefix + key.upper())
        if val:
            out[key] = val
    return out


def read_config_file(path: str) -> Dict[str, Any]:
    """Load a JSON object; unreadable files and bad JSON become InvalidConfig."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise InvalidConfig(f"cannot read config {path}: {e}", reason="bad_file") from e
    if not isinstance(data, dict):
        raise InvalidConfig(f"config {path} must contain a JSON object", reason="bad_file")
    return {k: data[k] for k in KEYS if k in data}


def load_config(path: str) -> SchrottIdConfig:
    return SchrottIdConfig.from_mapping(read_config_file(path))
