"""
DesignOptions Menu Actions Module
=================================

Registriert den Einstiegspunkt des Design-Options-Tools im Host-Menü.

Usage:
    action = register_design_options_command(plugins_menu, main_window)
"""

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenu
from loguru import logger

from config.version import EXTENSION_DESCRIPTION, EXTENSION_NAME


def register_design_options_command(menu: QMenu, host) -> QAction:
    """
    Fügt den Befehl "Design Options" zu einem Menü hinzu.

    Args:
        menu: Ziel-Menü (z.B. "Plugins")
        host: Objekt mit create_options_tool() und select_tool(tool)

    Returns:
        Die erzeugte QAction
    """
    action = QAction(EXTENSION_NAME, menu)
    action.setStatusTip(EXTENSION_DESCRIPTION)
    action.setToolTip(EXTENSION_DESCRIPTION)
    action.triggered.connect(lambda _checked=False: _select_options_tool(host))
    menu.addAction(action)
    logger.debug(f"[MENU] Command registriert: {EXTENSION_NAME}")
    return action


def _select_options_tool(host):
    host.select_tool(host.create_options_tool())
