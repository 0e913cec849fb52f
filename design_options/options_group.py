"""
DesignOptions - Options Group
=============================

Eine Menge (üblicherweise) gegenseitig exklusiver Tags, die Alternativen
eines Designs repräsentieren, z.B. verschiedene Kamin-Modelle.

Lebenszyklus:
- Wird vom Resolver bei jedem relevanten Hover neu erzeugt (kein Cache)
- Wird nur über die eigenen Operationen mutiert
- Wird verworfen wenn der Cursor eine andere Gruppe trifft oder das Tool endet

Alle show_* Methoden sollten innerhalb einer offenen Transaktion
aufgerufen werden (siehe OptionsTool.activate).
"""

from typing import List, Sequence

from loguru import logger

from design_options.tags import Tag


class OptionsGroup:
    """
    Snapshot einer Options-Gruppe mit aktuellem Selektions-Index.

    option_names und option_entities sind index-aligned und nach Tag-Namen
    sortiert. Invariante: size >= 2.
    """

    def __init__(self, name: str, option_names: Sequence[str],
                 option_entities: Sequence[Tag], index_selected: int):
        """
        Args:
            name: Gruppen-Name (z.B. "Fireplace")
            option_names: Options-Namen in sortierter Reihenfolge
            option_entities: Tags, index-aligned mit option_names
            index_selected: Index der aktuell gewählten Option
        """
        self._name = name
        self._option_names: List[str] = list(option_names)
        self._option_entities: List[Tag] = list(option_entities)
        self._index = index_selected

    @property
    def name(self) -> str:
        return self._name

    @property
    def option_names(self) -> List[str]:
        return list(self._option_names)

    @property
    def option_entities(self) -> List[Tag]:
        return list(self._option_entities)

    @property
    def index(self) -> int:
        return self._index

    @property
    def size(self) -> int:
        """Anzahl der Optionen in der Gruppe."""
        return len(self._option_entities)

    @property
    def selected_name(self) -> str:
        """Name der gewählten Option."""
        return self._option_names[self._index]

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return (f"OptionsGroup(name={self._name!r}, options={self._option_names!r}, "
                f"index={self._index})")

    # =========================================================================
    # Mutationen (innerhalb einer Transaktion aufrufen)
    # =========================================================================

    def show_all(self):
        """
        Zeigt alle (typischerweise überlappenden) Optionen gleichzeitig.

        Nützlich um alle Varianten gemeinsam zu bearbeiten, z.B. alle Kamine
        verschieben wenn die Wand verschoben wird. Der Index bleibt erhalten.
        """
        for tag in self._option_entities:
            tag.visible = True
        logger.debug(f"[DESIGN-OPTIONS] {self._name}: alle {self.size} Optionen sichtbar")

    def show_next(self):
        """Zur nächsten Option wechseln."""
        self._index = (self._index + 1) % self.size
        self._apply_single_selection()

    def show_prev(self):
        """Zur vorherigen Option wechseln."""
        self._index = (self._index - 1) % self.size
        self._apply_single_selection()

    def show_by_index(self, index: int) -> bool:
        """
        Zeigt eine bestimmte Option.

        Ein Index außerhalb von [0, size) ist ein No-op: der Snapshot kann
        veraltet sein wenn sich die Tags seit dem Hover geändert haben.

        Returns:
            True wenn die Option angezeigt wurde, False bei ungültigem Index
        """
        if not 0 <= index < self.size:
            logger.warning(
                f"[DESIGN-OPTIONS] {self._name}: Index {index} außerhalb "
                f"von 0..{self.size - 1}, ignoriert"
            )
            return False
        self._index = index
        self._apply_single_selection()
        return True

    # =========================================================================
    # Abfragen
    # =========================================================================

    def index_visible(self, index: int) -> bool:
        """
        Prüft ob die Option mit diesem Index sichtbar ist.

        Mehrere Optionen können gleichzeitig sichtbar sein (show_all oder
        externe Änderungen), daher wird der Tag direkt gelesen.
        """
        return bool(self._option_entities[index].visible)

    def tooltip_text(self) -> str:
        """Tooltip: "<Gruppe>: <Option> (<n>/<size>)"."""
        return f"{self._name}: {self.selected_name} ({self._index + 1}/{self.size})"

    def _apply_single_selection(self):
        for i, tag in enumerate(self._option_entities):
            tag.visible = i == self._index
        logger.debug(
            f"[DESIGN-OPTIONS] {self._name}: {self.selected_name} "
            f"({self._index + 1}/{self.size})"
        )
