"""Launch the pinball track editor from a source checkout."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from pinball_editor.app import main
from pinball_editor.config import DEFAULT_CONFIG_FILENAME


def run() -> int:
    """Start the editor, picking up a checkout-level settings file when no --config is given."""
    argv = list(sys.argv)
    checkout_config = ROOT / DEFAULT_CONFIG_FILENAME
    if "--config" not in argv and checkout_config.exists():
        argv.extend(["--config", str(checkout_config)])
    return main(argv)


if __name__ == "__main__":
    raise SystemExit(run())
