"""
Main entry point for KnowMap application.

Usage:
    python -m knowmap_app
    knowmap  (if installed)
"""

import os
import sys
import logging
import traceback
from pathlib import Path
from datetime import datetime


def setup_exception_hook():
    """Setup global exception hook to catch Qt exceptions."""
    log_file = Path.cwd() / "crash_log.txt"

    def exception_hook(exctype, value, tb):
        # Write to log file
        error_msg = ''.join(traceback.format_exception(exctype, value, tb))
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"\n{'='*60}\n")
            f.write(f"UNHANDLED EXCEPTION at {datetime.now()}\n")
            f.write(f"{'='*60}\n")
            f.write(error_msg)
            f.write("\n")

        logging.getLogger("knowmap_app").critical(
            "Unhandled exception (log saved to %s)\n%s", log_file, error_msg
        )

        # Call default handler
        sys.__excepthook__(exctype, value, tb)

    sys.excepthook = exception_hook


def main():
    """Launch the KnowMap application."""
    # Setup exception hook first
    setup_exception_hook()

    # Ensure src is in path for development
    src_path = Path(__file__).parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    from knowmap_core.logging_config import setup_logging
    level = logging.DEBUG if os.environ.get("KNOWMAP_DEBUG") else logging.INFO
    setup_logging(level=level, log_file=os.environ.get("KNOWMAP_LOG_FILE"))

    from PyQt6.QtWidgets import QApplication
    from PyQt6.QtCore import Qt

    # High DPI support
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("KnowMap")

    # Import and apply light theme
    from knowmap_app.resources.styles import LIGHT_STYLESHEET
    app.setStyleSheet(LIGHT_STYLESHEET)

    # Import and create main window
    from knowmap_app.views.main_window import MainWindow

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
