#!/usr/bin/env python3
"""
schrott_id_selftest.py — black-box self-test for the SchrottId codec.

Treats the codec class as a black box (constructor, encode, decode,
generate_permutation) and returns a plain report dict, so it can be run from
a script, from `schrott-id selftest`, or asserted on in the test-suite.

Usage:
    import schrott_id_selftest as sidt
    from schrott_id import SchrottId
    report = sidt.run_self_test(SchrottId)

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
import secrets
from typing import Any, Callable, Dict, Type

import schrott_base64
from schrott_alphabets import BASE32, BASE36, BASE58, BASE64
from schrott_errors import (
    CharacterNotInAlphabet,
    InvalidAlphabet,
    InvalidConfig,
    InvalidFormat,
    InvalidPermutation,
)
from schrott_id import SchrottId

ROUND_TRIP_COUNT = 10000
PERMUTATION_SAMPLES = 200


def _ok(why: str = "") -> Dict[str, Any]:
    return {"ok": True, "why": why}

def _fail(why: str) -> Dict[str, Any]:
    return {"ok": False, "why": why}

def _expect_error(exc_type: type, fn: Callable[[], Any]) -> bool:
    try:
        fn()
    except exc_type:
        return True
    return False

def run_self_test(engine_cls: Type[SchrottId] = SchrottId) -> Dict[str, Any]:
    tests: Dict[str, Dict[str, Any]] = {}
    perm = engine_cls.generate_permutation(BASE64)
    sid = engine_cls(BASE64, perm, 3)
    sample = {"permutation": perm}

    # 1) Round trip over a dense prefix plus the 64-bit edge
    try:
        bad = [v for v in range(ROUND_TRIP_COUNT) if sid.decode(sid.encode(v)) != v]
        edge = (1 << 64) - 1
        if sid.decode(sid.encode(edge)) != edge:
            bad.append(edge)
        tests["round_trip"] = _ok() if not bad else _fail(f"mismatch for {bad[:5]}")
        sample["encode(0..4)"] = [sid.encode(v) for v in range(5)]
    except Exception as e:
        tests["round_trip"] = _fail(f"exception: {e}")

    # 2) Determinism
    try:
        same = all(sid.encode(v) == sid.encode(v) for v in (0, 1, 63, 64, 123456789))
        tests["deterministic"] = _ok() if same else _fail("encode produced different output for same value")
    except Exception as e:
        tests["deterministic"] = _fail(f"exception: {e}")

    # 3) Minimum length across presets
    try:
        short = []
        for alphabet in (BASE64, BASE58, BASE36, BASE32):
            for min_len in (1, 3, 8):
                s = engine_cls(alphabet, engine_cls.generate_permutation(alphabet), min_len)
                if len(s.encode(0)) < min_len:
                    short.append((len(alphabet), min_len))
        tests["min_length"] = _ok() if not short else _fail(f"too short for {short}")
    except Exception as e:
        tests["min_length"] = _fail(f"exception: {e}")

    # 4) Generated permutations are complete
    try:
        broken = 0
        for _ in range(PERMUTATION_SAMPLES):
            raw = schrott_base64.decode(engine_cls.generate_permutation(BASE64))
            if len(raw) != len(BASE64) or len(set(raw)) != len(raw) \
                    or min(raw) != 0 or max(raw) != len(BASE64) - 1:
                broken += 1
        tests["permutation_valid"] = _ok() if not broken else _fail(f"{broken} invalid permutations")
    except Exception as e:
        tests["permutation_valid"] = _fail(f"exception: {e}")

    # 5) Base64 codec round trip
    try:
        bad_len = []
        for n in range(301):
            data = secrets.token_bytes(n)
            if schrott_base64.decode(schrott_base64.encode(data)) != data:
                bad_len.append(n)
        tests["base64_round_trip"] = _ok() if not bad_len else _fail(f"lengths {bad_len[:5]}")
    except Exception as e:
        tests["base64_round_trip"] = _fail(f"exception: {e}")

    # 6) Construction rejects bad parameters
    try:
        cases = {
            "alphabet_too_short": (InvalidAlphabet, lambda: engine_cls("A", perm, 3)),
            "alphabet_too_long": (InvalidAlphabet, lambda: engine_cls("".join(map(chr, range(257))), perm, 3)),
            "alphabet_duplicate": (InvalidAlphabet, lambda: engine_cls("AAA", perm, 3)),
            "min_length": (InvalidConfig, lambda: engine_cls(BASE64, perm, -1)),
            "perm_format": (InvalidFormat, lambda: engine_cls(BASE64, "$$$$", 3)),
            "perm_length": (InvalidPermutation, lambda: engine_cls(BASE32, perm, 3)),
            "perm_repeat": (InvalidPermutation,
                            lambda: engine_cls(BASE64, schrott_base64.encode(bytes(64)), 3)),
            "perm_range": (InvalidPermutation,
                           lambda: engine_cls(BASE64, schrott_base64.encode(bytes(range(1, 65))), 3)),
        }
        missed = [name for name, (exc, fn) in cases.items() if not _expect_error(exc, fn)]
        tests["rejects_bad_config"] = _ok() if not missed else _fail(f"accepted: {missed}")
    except Exception as e:
        tests["rejects_bad_config"] = _fail(f"exception: {e}")

    # 7) Decode rejects foreign characters
    try:
        hit = _expect_error(CharacterNotInAlphabet, lambda: sid.decode("$%&"))
        tests["rejects_bad_char"] = _ok() if hit else _fail("decode accepted characters outside the alphabet")
    except Exception as e:
        tests["rejects_bad_char"] = _fail(f"exception: {e}")

    info = sid.info()
    return {
        "engine": engine_cls.__name__,
        "version": info.get("version", "?"),
        "all_passed": all(t["ok"] for t in tests.values()),
        "tests": tests,
        "sample": sample,
    }


def print_report(rep: Dict[str, Any]) -> None:
    print(f"Engine: {rep['engine']}  Version: {rep['version']}")
    print("All passed:", rep["all_passed"])
    for name, r in rep["tests"].items():
        status = "OK " if r["ok"] else "FAIL"
        why = ("" if r["ok"] else f"  ({r['why']})")
        print(f" - {name:20s}: {status}{why}")
    print("Sample permutation:", rep["sample"]["permutation"])


if __name__ == "__main__":  # pragma: no cover
    print_report(run_self_test(SchrottId))
