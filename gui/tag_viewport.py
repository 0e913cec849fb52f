"""
DesignOptions - Tag Viewport
============================

Einfacher 2D-Viewport als Host für interaktive Tools.

- Zeichnet jedes TaggedEntity als Rechteck (nur wenn sein Tag sichtbar ist)
- Optionen einer Gruppe liegen übereinander im selben Slot
- Hit-Test (pick) auf sichtbare Entities
- Leitet Maus-, Scroll- und Kontextmenü-Events an das aktive Tool weiter
- Mittlere Maustaste (Pan) unterbricht das Tool (suspend/resume)
"""

from typing import Dict, List, Optional

from PySide6.QtCore import QPoint, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QMenu, QToolTip, QWidget
from loguru import logger

from config.tool_settings import ToolSettings
from design_options.interfaces import IPickHelper, ITool, IView
from design_options.resolver import match_option_name
from design_options.tags import Tag, TaggedEntity, TagModel
from gui.design_options_host import QtMenuAdapter


def _modifier_bits(modifiers) -> int:
    return int(modifiers.value)


def wheel_delta(angle_delta) -> int:
    """Vertikaler Wheel-Delta, sonst horizontal (macOS liefert Shift+Wheel als x)"""
    return angle_delta.y() or angle_delta.x()


class TagViewport(QWidget):
    """
    Viewport mit Tool-Host-Funktionalität.

    Erfüllt IView und IPickHelper (virtuell registriert, siehe unten).
    """

    def __init__(self, model: TagModel, parent=None):
        super().__init__(parent)
        self.model = model
        self.entities: List[TaggedEntity] = []
        self.view_scale = 1.0
        self.active_tool: Optional[ITool] = None
        self.tooltip_text = ""
        self._cursor_pos = QPoint(0, 0)
        self._slots: Dict[str, int] = {}

        self.setMouseTracking(True)
        self.setMinimumSize(ToolSettings.VIEWPORT_MIN_WIDTH, ToolSettings.VIEWPORT_MIN_HEIGHT)

    # =========================================================================
    # Entities
    # =========================================================================

    def add_entity(self, name: str, tag: Tag) -> TaggedEntity:
        """
        Fügt ein Entity hinzu. Entities derselben Options-Gruppe teilen
        sich einen Slot (gegenseitig exklusive Alternativen).
        """
        matches = match_option_name(tag.name)
        slot_key = f"group::{matches.group('group')}" if matches else f"tag::{tag.name}"
        if slot_key not in self._slots:
            self._slots[slot_key] = len(self._slots)
        slot = self._slots[slot_key]

        w = ToolSettings.VIEWPORT_ENTITY_WIDTH
        h = ToolSettings.VIEWPORT_ENTITY_HEIGHT
        gap = ToolSettings.VIEWPORT_ENTITY_SPACING
        columns = max(1, ToolSettings.VIEWPORT_MIN_WIDTH // (w + gap))
        x = gap + (slot % columns) * (w + gap)
        y = gap + (slot // columns) * (h + gap)

        entity = TaggedEntity(name=name, tag=tag, bounds=(x, y, w, h))
        self.entities.append(entity)
        return entity

    def pick(self, x: float, y: float) -> Optional[TaggedEntity]:
        """Oberstes sichtbares Entity an Bildschirm-Position (x, y)."""
        mx, my = x / self.view_scale, y / self.view_scale
        for entity in reversed(self.entities):
            if entity.tag.visible and entity.contains(mx, my):
                return entity
        return None

    # =========================================================================
    # Tool-Host
    # =========================================================================

    def select_tool(self, tool: Optional[ITool]):
        """Beendet das aktuelle Tool und aktiviert das neue."""
        if self.active_tool is not None:
            self.active_tool.deactivate(self)
        self.active_tool = tool
        if tool is not None:
            tool.activate()
            logger.debug(f"[VIEWPORT] Tool gewählt: {type(tool).__name__}")
        self.invalidate()

    def invalidate(self) -> None:
        self.update()

    def set_tooltip(self, text: str) -> None:
        self.tooltip_text = text
        if self.isVisible():
            QToolTip.showText(self.mapToGlobal(self._cursor_pos), text, self)

    def handle_wheel(self, delta: float, flags: int, x: float = 0.0, y: float = 0.0) -> bool:
        """
        Scroll-Verarbeitung: erst das Tool, sonst Zoom.

        Returns:
            True wenn das Tool das Event konsumiert hat
        """
        if self.active_tool is not None and self.active_tool.on_mouse_wheel(flags, delta, x, y, self):
            return True
        factor = 1.15 if delta > 0 else 1 / 1.15
        self.view_scale = max(0.25, min(4.0, self.view_scale * factor))
        self.invalidate()
        return False

    def build_context_menu(self) -> Optional[QMenu]:
        """Kontextmenü des aktiven Tools oder None wenn leer."""
        if self.active_tool is None:
            return None
        menu = QMenu(self)
        adapter = QtMenuAdapter(menu)
        self.active_tool.get_menu(adapter)
        if adapter.is_empty:
            menu.deleteLater()
            return None
        return menu

    # =========================================================================
    # Qt Events
    # =========================================================================

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(30, 30, 30))
        painter.scale(self.view_scale, self.view_scale)

        for entity in self.entities:
            if not entity.tag.visible:
                continue
            rect = QRectF(*entity.bounds)
            painter.setPen(QPen(QColor(0, 120, 212), 2))
            painter.fillRect(rect, QColor(45, 45, 48))
            painter.drawRect(rect)
            painter.setPen(QColor(220, 220, 220))
            painter.drawText(rect, Qt.AlignCenter, entity.name)
        painter.end()

        self.tooltip_text = ""
        if self.active_tool is not None:
            self.active_tool.draw(self)
        if not self.tooltip_text:
            QToolTip.hideText()

    def mouseMoveEvent(self, event):
        pos = event.position()
        self._cursor_pos = pos.toPoint()
        if self.active_tool is not None:
            self.active_tool.on_mouse_move(_modifier_bits(event.modifiers()), pos.x(), pos.y(), self)
        super().mouseMoveEvent(event)

    def wheelEvent(self, event):
        pos = event.position()
        self.handle_wheel(wheel_delta(event.angleDelta()), _modifier_bits(event.modifiers()), pos.x(), pos.y())
        event.accept()

    def contextMenuEvent(self, event):
        menu = self.build_context_menu()
        if menu is not None:
            menu.exec(event.globalPos())

    def mousePressEvent(self, event):
        if event.button() == Qt.MiddleButton and self.active_tool is not None:
            self.active_tool.suspend(self)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MiddleButton and self.active_tool is not None:
            self.active_tool.resume(self)
        super().mouseReleaseEvent(event)


IView.register(TagViewport)
IPickHelper.register(TagViewport)
