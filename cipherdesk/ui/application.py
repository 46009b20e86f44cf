# cipherdesk/ui/application.py
import sys
from PySide6.QtWidgets import QApplication
from loguru import logger

from .windows.main_window import MainWindow
from ..config.loader import load_config

def run(argv=None):
    """Initializes and runs the QApplication."""
    if argv is None:
        argv = sys.argv

    app = QApplication(argv)
    app.setApplicationName("CipherDesk")

    try:
        load_config()
    except Exception:
        logger.exception("Fatal error loading configuration on startup.")
        QApplication.beep()
        return 1

    try:
        main_window = MainWindow()
        main_window.show()
    except Exception:
        logger.exception("Fatal error creating or showing the main window.")
        QApplication.beep()
        return 1

    exit_code = app.exec()
    logger.info(f"Application finished with exit code {exit_code}.")
    sys.exit(exit_code)
