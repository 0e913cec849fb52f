#!/usr/bin/env python3
"""
DesignOptions - Sichtbarkeit gegenseitig exklusiver Design-Optionen
Einstiegspunkt
"""

import sys
import os

# Füge Projektverzeichnis zum Pfad hinzu
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from loguru import logger


def setup_logging():
    """Konfiguriert loguru (DEBUG wenn design_options_debug aktiv)"""
    from config.feature_flags import is_enabled

    level = "DEBUG" if is_enabled("design_options_debug") else "INFO"
    logger.remove()
    logger.add(sys.stderr, format="<level>{level: <8}</level> | {message}", level=level)


def main():
    """Startet den Demo-Host"""
    from PySide6.QtCore import QLocale
    from PySide6.QtWidgets import QApplication
    from i18n import set_language
    from config.version import APP_NAME, VERSION_STRING, get_version_info

    setup_logging()
    logger.debug(f"Version: {get_version_info()}")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(VERSION_STRING)
    set_language(QLocale.system().name()[:2])

    from gui.main_window import MainWindow
    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
