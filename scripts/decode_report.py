#!/usr/bin/env python3
"""Decode a captured Quadro status report offline.

Reads a hex dump (whitespace, ``:`` and ``0x`` prefixes are ignored) from
a file or stdin and prints every field of the report layout.

Usage
-----
::

    python scripts/decode_report.py capture.hex
    cat capture.hex | python scripts/decode_report.py --raw
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyquadro.ingestion.report import (  # noqa: E402
    FIELD_SPECS,
    MIN_REPORT_LENGTH,
    decode_fields,
    decode_status_report,
)

_HEX_NOISE = re.compile(r"0x|[\s:,]", re.IGNORECASE)


def parse_hex(text: str) -> bytes:
    return bytes.fromhex(_HEX_NOISE.sub("", text))


def main() -> int:
    parser = argparse.ArgumentParser(description="Decode a Quadro status report hex dump")
    parser.add_argument("file", nargs="?", help="Hex dump file (default: stdin)")
    parser.add_argument("--raw", action="store_true", help="Also print raw field values before conversion")
    args = parser.parse_args()

    text = Path(args.file).read_text() if args.file else sys.stdin.read()
    try:
        data = parse_hex(text)
    except ValueError as exc:
        print(f"error: invalid hex dump: {exc}", file=sys.stderr)
        return 1

    snapshot = decode_status_report(data)
    if snapshot is None:
        print(
            f"error: not a status report (size={len(data)}, need >= {MIN_REPORT_LENGTH}, "
            f"id={data[0] if data else None})",
            file=sys.stderr,
        )
        return 1

    print(snapshot.model_dump_json(indent=2))
    if args.raw:
        print()
        values = decode_fields(data)
        for spec in FIELD_SPECS:
            raw = int.from_bytes(data[spec.offset : spec.end], "big")
            print(f"  {spec.name:<20} @{spec.offset:<4} raw={raw:<10} value={values[spec.name]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
