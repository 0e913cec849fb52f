"""
DesignOptions - Qt Host Adapters
================================

Verbindet das Qt-freie OptionsTool mit PySide6:
- UndoStackTransaction: Session -> ein ShowDesignOptionCommand im QUndoStack
- QtMenuAdapter: IMenu über einem QMenu (checkbare QActions)
- StatusBarHint: IStatus über einer QStatusBar
"""

from typing import Callable, Dict, Iterable, Optional

from PySide6.QtGui import QAction, QUndoStack
from PySide6.QtWidgets import QMenu, QStatusBar
from loguru import logger

from design_options.interfaces import IMenu, IStatus
from design_options.tags import Tag
from design_options.transaction import VisibilityChange, VisibilityTransaction
from gui.commands import ShowDesignOptionCommand


class UndoStackTransaction(VisibilityTransaction):
    """
    Transaktion deren Commit einen Undo-Schritt auf den QUndoStack legt.
    """

    def __init__(self, tag_source: Callable[[], Iterable[Tag]], undo_stack: QUndoStack,
                 on_changed: Optional[Callable[[], None]] = None):
        super().__init__(tag_source, on_commit=self._push)
        self.undo_stack = undo_stack
        self.on_changed = on_changed

    def _push(self, change: VisibilityChange):
        self.undo_stack.push(ShowDesignOptionCommand(change, self.on_changed))


class QtMenuAdapter(IMenu):
    """
    IMenu über einem QMenu.

    Checked-Zustände werden über Prädikate bestimmt und bei aboutToShow
    neu ausgewertet, da sich Sichtbarkeiten extern ändern können.
    """

    def __init__(self, menu: QMenu):
        self.menu = menu
        self._predicates: Dict[QAction, Callable[[], bool]] = {}
        menu.aboutToShow.connect(self.refresh_checked)

    def add_item(self, label: str, on_activate: Callable[[], object]) -> QAction:
        action = self.menu.addAction(label)
        action.triggered.connect(lambda _checked=False, callback=on_activate: callback())
        return action

    def set_checked_predicate(self, item: QAction, predicate: Callable[[], bool]) -> None:
        item.setCheckable(True)
        self._predicates[item] = predicate
        item.setChecked(bool(predicate()))

    def add_separator(self) -> None:
        self.menu.addSeparator()

    def refresh_checked(self):
        for action, predicate in self._predicates.items():
            action.setChecked(bool(predicate()))

    @property
    def is_empty(self) -> bool:
        return self.menu.isEmpty()


class StatusBarHint(IStatus):
    """IStatus über einer QStatusBar."""

    def __init__(self, status_bar: QStatusBar):
        self.status_bar = status_bar
        self.last_hint = ""

    def set_hint(self, text: str) -> None:
        self.last_hint = text
        self.status_bar.showMessage(text)
        logger.debug(f"[STATUS] {text}")
