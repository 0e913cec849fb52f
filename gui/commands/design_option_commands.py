"""
DesignOptions - Design Option Commands for Undo/Redo
====================================================

Implements QUndoCommand for undoable tag visibility changes:
- ShowDesignOptionCommand: Sichtbarkeits-Änderungen einer Tool-Session

Eine Session (activate -> deactivate) erzeugt genau einen Command.
Mergeable Commands mit gleichem Label verschmelzen mit dem vorherigen.
"""

from typing import Callable, Optional

from PySide6.QtGui import QUndoCommand
from loguru import logger

from design_options.transaction import VisibilityChange

SHOW_DESIGN_OPTION_COMMAND_ID = 0x0D0E


class ShowDesignOptionCommand(QUndoCommand):
    """
    Undoable: Tag-Sichtbarkeit einer Design-Options-Session.

    Beim ersten push() ist der Zustand bereits angewendet, redo() setzt
    denselben Zustand erneut und ist damit idempotent.
    """

    def __init__(self, change: VisibilityChange, on_changed: Optional[Callable[[], None]] = None):
        """
        Args:
            change: Differenz der Sichtbarkeit (before/after)
            on_changed: Callback für UI-Updates (z.B. viewport.update)
        """
        super().__init__(change.name)
        self.change = change
        self.on_changed = on_changed

    def id(self) -> int:
        return SHOW_DESIGN_OPTION_COMMAND_ID if self.change.mergeable else -1

    def mergeWith(self, other) -> bool:
        if not isinstance(other, ShowDesignOptionCommand):
            return False
        if not other.change.mergeable or other.text() != self.text():
            return False

        self.change.merge(other.change)
        logger.debug(f"[DESIGN-OPTIONS] Merge: {self.text()} ({len(self.change.tags)} Tag(s))")
        if self.change.is_empty:
            # Netto keine Änderung mehr, Command kann entfallen
            self.setObsolete(True)
        return True

    def redo(self):
        """Sichtbarkeit nach der Session anwenden."""
        self.change.redo()
        logger.debug(f"Redo: {self.text()} ({len(self.change.tags)} Tag(s))")
        self._notify()

    def undo(self):
        """Sichtbarkeit vor der Session wiederherstellen."""
        self.change.undo()
        logger.info(f"[DESIGN-OPTIONS] Undo: {self.text()}")
        self._notify()

    def _notify(self):
        if self.on_changed is not None:
            self.on_changed()
