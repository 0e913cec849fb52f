"""
DesignOptions - Options Tool
============================

Interaktives Tool zum Verwalten der Sichtbarkeit von Design-Optionen.

Zustände: Inaktiv -> Aktiv -> Inaktiv. Während das Tool aktiv ist hält es
die "aktuell betrachtete" OptionsGroup:
- Hover: Resolver leitet die Gruppe neu ab
- Shift + Scroll: nächste/vorherige Option
- Rechtsklick: Option direkt wählen oder alle anzeigen

Alle Sichtbarkeits-Änderungen einer Session landen in einer Transaktion.
"""

from functools import partial
from typing import Dict, Optional, Tuple

from loguru import logger

from config.feature_flags import is_enabled
from config.tool_settings import ToolSettings, has_constrain_modifier
from design_options.interfaces import IMenu, IPickHelper, IStatus, ITool, ITransaction, IView
from design_options.options_group import OptionsGroup
from design_options.resolver import resolve_options_group
from i18n import tr

STATUS_HINT = "Hover a design option, press Shift and scroll, or right click to cycle."


class OptionsTool(ITool):
    """
    Session-Zustandsmaschine für Hover, Scroll und Kontextmenü.

    Usage:
        tool = OptionsTool(model, picker, transaction, status)
        host.select_tool(tool)  # ruft activate()
    """

    def __init__(self, model, picker: IPickHelper, transaction: ITransaction, status: IStatus):
        """
        Args:
            model: Host-Modell mit .tags (vollständige Tag-Sammlung)
            picker: Hit-Test
            transaction: Undo-Grenze für die Session
            status: Statuszeile
        """
        self._model = model
        self._picker = picker
        self._transaction = transaction
        self._status = status
        self._active = False
        self._options_group: Optional[OptionsGroup] = None

        # Menü-Handle-ID -> (Gruppe, Index), aufgelöst beim Auslösen
        self._menu_bindings: Dict[str, Tuple[OptionsGroup, int]] = {}
        self._menu_counter = 0

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def options_group(self) -> Optional[OptionsGroup]:
        """Aktuell betrachtete Gruppe oder None."""
        return self._options_group

    # =========================================================================
    # Lebenszyklus
    # =========================================================================

    def activate(self) -> None:
        self._transaction.start(ToolSettings.OPERATION_NAME, ToolSettings.OPERATION_MERGEABLE)
        self._active = True
        self._update_status_text()
        logger.info("[DESIGN-OPTIONS] Tool aktiviert")

    def deactivate(self, view: IView) -> None:
        self._transaction.commit()
        self._active = False
        self._options_group = None
        self._menu_bindings.clear()
        view.invalidate()
        logger.info("[DESIGN-OPTIONS] Tool deaktiviert")

    def suspend(self, view: IView) -> None:
        view.invalidate()

    def resume(self, view: IView) -> None:
        self._update_status_text()

    # =========================================================================
    # Events
    # =========================================================================

    def on_mouse_move(self, flags: int, x: float, y: float, view: IView) -> None:
        entity = self._picker.pick(x, y)
        if entity is None:
            # Gruppe behalten: die neue Option kann kleiner sein und nicht
            # mehr unter dem Cursor liegen
            return

        self._options_group = resolve_options_group(entity.tag, self._model.tags)
        if is_enabled("design_options_debug"):
            logger.debug(f"[DESIGN-OPTIONS] Hover {entity.tag.name!r} -> {self._options_group!r}")
        view.invalidate()

    def on_mouse_wheel(self, flags: int, delta: float, x: float, y: float, view: IView) -> bool:
        if self._options_group is None:
            return False
        if not has_constrain_modifier(flags):
            return False

        # Die gehaltene Gruppe wird weiter gecycled, auch wenn der Cursor
        # nicht mehr über ihr liegt
        if delta < 0:
            self._options_group.show_next()
        else:
            self._options_group.show_prev()
        view.invalidate()

        # Zoom unterdrücken
        return True

    def get_menu(self, menu: IMenu) -> None:
        group = self._options_group
        if group is None:
            return

        self._menu_bindings.clear()
        for index, name in enumerate(group.option_names):
            item_id = self._bind_menu_item(group, index)
            item = menu.add_item(name, partial(self._activate_menu_item, item_id))
            menu.set_checked_predicate(item, partial(self._menu_item_checked, item_id))

        menu.add_separator()
        menu.add_item(tr("Show All"), group.show_all)

    def draw(self, view: IView) -> None:
        if self._options_group is None:
            return
        view.set_tooltip(self._options_group.tooltip_text())

    # =========================================================================
    # Intern
    # =========================================================================

    def _bind_menu_item(self, group: OptionsGroup, index: int) -> str:
        item_id = f"option_{self._menu_counter}"
        self._menu_counter += 1
        self._menu_bindings[item_id] = (group, index)
        return item_id

    def _activate_menu_item(self, item_id: str):
        binding = self._menu_bindings.get(item_id)
        if binding is None:
            logger.debug(f"[DESIGN-OPTIONS] Menü-Eintrag {item_id} nicht mehr gebunden")
            return
        group, index = binding
        group.show_by_index(index)

    def _menu_item_checked(self, item_id: str) -> bool:
        binding = self._menu_bindings.get(item_id)
        if binding is None:
            return False
        group, index = binding
        return group.index_visible(index)

    def _update_status_text(self):
        self._status.set_hint(tr(STATUS_HINT))
