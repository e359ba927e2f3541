"""Application bootstrap for the pinball track editor."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from pinball_editor.config import DEFAULT_CONFIG_FILENAME, EditorConfig, load_editor_config
from pinball_editor.errors import EditorConfigError
from pinball_editor.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_application(argv: Optional[Iterable[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    args = list(argv) if argv is not None else sys.argv
    app = QApplication(args)
    QApplication.setApplicationName("Pinball Track Editor")
    QApplication.setOrganizationName("PinballEditor")
    QApplication.setOrganizationDomain("pinball-editor.local")
    return app


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw pinball tracks and drop a ball on them.")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path.cwd() / DEFAULT_CONFIG_FILENAME,
        help="Editor settings YAML (defaults are used when the file is missing).",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser.parse_args(list(argv))


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point that boots the GUI event loop."""
    args_list = list(argv) if argv is not None else sys.argv
    options = parse_args(args_list[1:])
    setup_logging(logging.DEBUG if options.debug else logging.INFO, options.log_file)

    app = create_application(args_list[:1])

    try:
        config = load_editor_config(options.config)
    except EditorConfigError as exc:
        logger.error("Failed to load settings: %s", exc)
        QMessageBox.warning(None, "Invalid settings", f"{exc}\n\nDefault settings will be used.")
        config = EditorConfig()

    from pinball_editor.ui.main_window import MainWindow  # Lazy import to avoid cycles during bootstrap

    window = MainWindow(config)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
