#!/usr/bin/env python3
"""
schrott_cli.py — command line front-end for SchrottID.

Usage:
  schrott-id permutation [--alphabet A]
  schrott-id encode VALUE [VALUE ...] --permutation P [--alphabet A] [--min-length N]
  schrott-id decode ID [ID ...]       --permutation P [--alphabet A] [--min-length N]
  schrott-id selftest

Options (every subcommand):
  --config PATH      JSON file with alphabet / permutation / min_length
  --alphabet A       preset name (base64, base58, base36, base32) or literal chars;
                     a value spelling a preset name (any case) selects the preset,
                     prefix with "literal:" to force literal characters
                     (default: base64)
  --permutation P    Base64 permutation, or @path to read it from a file
  --min-length N     minimum encoded length (default: 3)
  -v, --verbose      debug logging on stderr

Precedence: command line > --config file > SCHROTT_ID_* environment > defaults.

Exit codes: 0=OK, 2=usage/error.

Copyright:
  (c) 2025 Robert Dowell. Educational use encouraged.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Any, Dict, List

import schrott_config
import schrott_id_selftest
from schrott_alphabets import LITERAL_PREFIX, available_alphabets, resolve_alphabet
from schrott_errors import SchrottIdError
from schrott_id import SchrottId

DEFAULTS = {"alphabet": "base64", "min_length": 3}


# ---------------- helpers ----------------

def _read_value_source(spec: str) -> str:
    """'@path' -> first line of the file (stripped); anything else as-is."""
    s = spec.strip()
    if s.startswith("@"):
        with open(s[1:], "r", encoding="utf-8") as f:
            return f.readline().strip()
    return s


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=None, help="JSON config file")
    common.add_argument("--alphabet", default=None,
                        help=f"Preset ({', '.join(available_alphabets())}, any case) or literal characters; "
                             f"prefix with '{LITERAL_PREFIX}' to force a literal")
    common.add_argument("--permutation", default=None, help="Base64 permutation or @path")
    common.add_argument("--min-length", dest="min_length", type=int, default=None,
                        help="Minimum encoded length (default 3)")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    ap = argparse.ArgumentParser(
        prog="schrott-id",
        description="Reversible scrambled IDs for unsigned 64-bit integers",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("permutation", parents=[common], help="Generate a random permutation for an alphabet")

    p_enc = sub.add_parser("encode", parents=[common], help="Encode integers")
    p_enc.add_argument("values", nargs="+", type=int)

    p_dec = sub.add_parser("decode", parents=[common], help="Decode IDs")
    p_dec.add_argument("ids", nargs="+")

    sub.add_parser("selftest", parents=[common], help="Run the built-in self-test")
    return ap


def _merged_settings(args) -> Dict[str, Any]:
    """Layer defaults < environment < config file < command line."""
    settings: Dict[str, Any] = dict(DEFAULTS)
    settings.update(schrott_config.read_env())
    if args.config:
        settings.update(schrott_config.read_config_file(args.config))
    if args.alphabet is not None:
        settings["alphabet"] = args.alphabet
    if args.permutation is not None:
        settings["permutation"] = _read_value_source(args.permutation)
    if args.min_length is not None:
        settings["min_length"] = args.min_length
    return settings


def _open_codec(args) -> SchrottId:
    return schrott_config.SchrottIdConfig.from_mapping(_merged_settings(args)).build()


def main(argv: List[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.cmd == "permutation":
            alphabet = resolve_alphabet(str(_merged_settings(args)["alphabet"]))
            print(SchrottId.generate_permutation(alphabet))
            return 0

        elif args.cmd == "encode":
            codec = _open_codec(args)
            for s in codec.encode_many(args.values):
                print(s)
            return 0

        elif args.cmd == "decode":
            codec = _open_codec(args)
            for v in codec.decode_many(args.ids):
                print(v)
            return 0

        elif args.cmd == "selftest":
            rep = schrott_id_selftest.run_self_test(SchrottId)
            schrott_id_selftest.print_report(rep)
            return 0 if rep["all_passed"] else 2

        else:
            print("Unknown command.", file=sys.stderr)
            return 2

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 2
    except (SchrottIdError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
