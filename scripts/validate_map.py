#!/usr/bin/env python3
"""Validate an exported map JSON file and report how many walls it compiles to."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from pinball_editor.errors import MapFormatError  # noqa: E402
from pinball_editor.services.geometry import compile_lines  # noqa: E402
from pinball_editor.services.map_serializer import import_map  # noqa: E402


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description="Validate a pinball map JSON export.")
    parser.add_argument("input", type=Path, help="Map JSON path.")
    args = parser.parse_args(argv)

    if not args.input.exists():
        print(f"Map file does not exist: {args.input}", file=sys.stderr)
        return 1

    try:
        imported = import_map(args.input.read_text(encoding="utf-8"))
    except MapFormatError as exc:
        print(f"Invalid map: {exc}", file=sys.stderr)
        return 1

    segments = compile_lines(imported.lines, imported.thickness)
    print(f"{len(imported.lines)} lines, {len(segments)} wall segments at thickness {imported.thickness:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
