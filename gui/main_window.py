"""
DesignOptions - Main Window
===========================

Demo-Host: Tag-Viewport, Undo-Stack, Statusbar und "Plugins"-Menü mit dem
Design-Options-Befehl.
"""

from typing import List, Optional

from PySide6.QtGui import QKeySequence, QUndoStack
from PySide6.QtWidgets import QMainWindow
from loguru import logger

from config.version import APP_NAME, VERSION_FULL
from design_options import OptionsTool, TagModel
from design_options.interfaces import ITool
from gui.design_options_host import StatusBarHint, UndoStackTransaction
from gui.menu_actions import register_design_options_command
from gui.tag_viewport import TagViewport
from i18n import tr

# Demo-Modell: (Tag-Name, Entity-Name, sichtbar)
DEMO_TAGS = [
    ("Walls", "Walls", True),
    ("Option Fireplace: Farmhouse", "Fireplace\nFarmhouse", False),
    ("Option Fireplace: Scandi", "Fireplace\nScandi", True),
    ("Option Fireplace: Victorian", "Fireplace\nVictorian", False),
    ("Option Sofa: Chesterfield", "Sofa\nChesterfield", True),
    ("Option Sofa: Modern", "Sofa\nModern", False),
    ("Option Lamp: Arc", "Lamp\nArc", True),
]


class MainWindow(QMainWindow):
    """Hauptfenster des Demo-Hosts."""

    def __init__(self, demo_tags: Optional[List[tuple]] = None):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} {VERSION_FULL}")

        self.model = TagModel()
        self.undo_stack = QUndoStack(self)
        self.viewport = TagViewport(self.model, self)
        self.setCentralWidget(self.viewport)
        self.status_hint = StatusBarHint(self.statusBar())

        for tag_name, entity_name, visible in DEMO_TAGS if demo_tags is None else demo_tags:
            tag = self.model.find_tag(tag_name) or self.model.add_tag(tag_name, visible=visible)
            self.viewport.add_entity(entity_name, tag)

        self._setup_menus()
        logger.info(f"{APP_NAME} gestartet ({len(self.model)} Tags)")

    def _setup_menus(self):
        menubar = self.menuBar()

        edit_menu = menubar.addMenu(tr("Edit"))
        undo_action = self.undo_stack.createUndoAction(self, tr("Undo"))
        undo_action.setShortcut(QKeySequence.StandardKey.Undo)
        redo_action = self.undo_stack.createRedoAction(self, tr("Redo"))
        redo_action.setShortcut(QKeySequence.StandardKey.Redo)
        edit_menu.addAction(undo_action)
        edit_menu.addAction(redo_action)

        plugins_menu = menubar.addMenu(tr("Plugins"))
        self.design_options_action = register_design_options_command(plugins_menu, self)

    def create_options_tool(self) -> OptionsTool:
        transaction = UndoStackTransaction(lambda: self.model.tags, self.undo_stack, self.viewport.invalidate)
        return OptionsTool(self.model, self.viewport, transaction, self.status_hint)

    def select_tool(self, tool: Optional[ITool]):
        self.viewport.select_tool(tool)

    def closeEvent(self, event):
        # Offene Session committen damit der Undo-Stack vollständig ist
        self.viewport.select_tool(None)
        super().closeEvent(event)
