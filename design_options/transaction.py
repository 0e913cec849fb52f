"""
DesignOptions - Visibility Transaction
======================================

Transaktions-basiertes Erfassen von Tag-Sichtbarkeit.

Beim Start einer Transaktion wird die Sichtbarkeit aller Tags gesichert,
beim Commit wird die Differenz als VisibilityChange geliefert. Der Host
macht daraus einen Undo-Schritt (siehe gui.commands).
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from loguru import logger

from design_options.interfaces import ITransaction
from design_options.tags import Tag


@dataclass
class VisibilitySnapshot:
    """Sichtbarkeit einer Tag-Menge zu einem Zeitpunkt."""

    states: Dict[Tag, bool] = field(default_factory=dict)

    @classmethod
    def capture(cls, tags: Iterable[Tag]) -> 'VisibilitySnapshot':
        return cls({tag: bool(tag.visible) for tag in tags})

    def restore(self):
        for tag, visible in self.states.items():
            tag.visible = visible


@dataclass
class VisibilityChange:
    """
    Differenz zwischen zwei Snapshots.

    before/after enthalten nur Tags deren Sichtbarkeit sich geändert hat.
    """

    name: str
    mergeable: bool
    before: VisibilitySnapshot
    after: VisibilitySnapshot

    @classmethod
    def between(cls, name: str, mergeable: bool,
                before: VisibilitySnapshot, after: VisibilitySnapshot) -> 'VisibilityChange':
        changed = [t for t, v in after.states.items() if before.states.get(t, v) != v]
        return cls(
            name=name,
            mergeable=mergeable,
            before=VisibilitySnapshot({t: before.states[t] for t in changed}),
            after=VisibilitySnapshot({t: after.states[t] for t in changed}),
        )

    @property
    def tags(self) -> List[Tag]:
        return list(self.after.states)

    @property
    def is_empty(self) -> bool:
        return not self.after.states

    def merge(self, other: 'VisibilityChange'):
        """Übernimmt eine spätere Änderung; before bleibt der ältere Zustand."""
        for tag, visible in other.before.states.items():
            self.before.states.setdefault(tag, visible)
        self.after.states.update(other.after.states)
        # Tags die wieder im Ausgangszustand sind fallen heraus
        for tag in [t for t, v in self.after.states.items() if self.before.states[t] == v]:
            del self.after.states[tag]
            del self.before.states[tag]

    def undo(self):
        self.before.restore()

    def redo(self):
        self.after.restore()


class VisibilityTransaction(ITransaction):
    """
    ITransaction über einer Tag-Sammlung.

    Usage:
        tx = VisibilityTransaction(lambda: model.tags, on_commit=push_to_undo)
        tx.start("Show Design Option", mergeable=True)
        group.show_next()
        tx.commit()  # -> on_commit(VisibilityChange)

    Raises:
        RuntimeError: bei verschachteltem start()
    """

    def __init__(self, tag_source: Callable[[], Iterable[Tag]],
                 on_commit: Optional[Callable[[VisibilityChange], None]] = None):
        self._tag_source = tag_source
        self._on_commit = on_commit
        self._name: Optional[str] = None
        self._mergeable = False
        self._before: Optional[VisibilitySnapshot] = None

    @property
    def is_open(self) -> bool:
        return self._before is not None

    def start(self, name: str, mergeable: bool = False) -> None:
        if self.is_open:
            raise RuntimeError(f"Transaktion '{self._name}' ist bereits offen")
        self._name = name
        self._mergeable = mergeable
        self._before = VisibilitySnapshot.capture(self._tag_source())
        logger.debug(f"[TX] Start: {name} (mergeable={mergeable})")

    def commit(self) -> None:
        if not self.is_open:
            logger.debug("[TX] Commit ohne offene Transaktion ignoriert")
            return

        after = VisibilitySnapshot.capture(self._tag_source())
        change = VisibilityChange.between(self._name, self._mergeable, self._before, after)
        self._before = None

        if change.is_empty:
            logger.debug(f"[TX] Commit: {change.name} ohne Änderungen")
            return

        logger.info(f"[TX] Commit: {change.name} ({len(change.tags)} Tag(s) geändert)")
        if self._on_commit is not None:
            self._on_commit(change)
