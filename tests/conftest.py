#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Filename: tests/conftest.py

import os
import sys

import pytest

# Modules live flat at the project root; make them importable without installing.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from schrott_alphabets import BASE64  # noqa: E402
from schrott_id import SchrottId  # noqa: E402

# Fixed 64-entry permutation for the base64 alphabet, shared with other SchrottID ports.
KNOWN_PERMUTATION = (
    "HwEMFAcAMAYEPxc4Dy4RAxAkEgstJggbGSMiKB0yHgk7OSsNMxoYKRMWNg49LzEFFTQKPDUhHAIsICclOio+Nw=="
)


class ScriptedIndexSource:
    """Random index source that replays fixed answers and records every request."""

    def __init__(self, answers=(0,)):
        self.answers = list(answers)
        self.calls = []

    def randbelow(self, n):
        self.calls.append(n)
        value = self.answers[(len(self.calls) - 1) % len(self.answers)]
        return value % n


@pytest.fixture
def known_permutation():
    return KNOWN_PERMUTATION


@pytest.fixture
def sid():
    return SchrottId(BASE64, KNOWN_PERMUTATION, 3)


@pytest.fixture
def make_rng():
    return ScriptedIndexSource


@pytest.fixture(autouse=True)
def clean_schrott_env(monkeypatch):
    for key in ("SCHROTT_ID_ALPHABET", "SCHROTT_ID_PERMUTATION", "SCHROTT_ID_MIN_LENGTH"):
        monkeypatch.delenv(key, raising=False)
