"""
Tags - Host-Model Klassifikations-Entities

Ein Tag (Layer) hat einen eindeutigen Namen und ein globales
Sichtbarkeits-Flag. Design-Optionen werden über die Namenskonvention
"Option <Gruppe>: <Option>" an Tags angehängt.

Das Tool liest Namen und liest/schreibt Sichtbarkeit. Tags werden
ausschließlich vom TagModel erzeugt.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple
import uuid
from loguru import logger


@dataclass(eq=False)
class Tag:
    """
    Klassifikations-Tag des Host-Modells.

    Identitäts-Semantik (eq=False): zwei Tags mit gleichem Namen sind
    nicht dasselbe Objekt. Der Resolver sucht den Hover-Tag per Identität.
    """

    name: str
    visible: bool = True
    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])


@dataclass
class TaggedEntity:
    """
    Pickbares Entity im Viewport mit zugeordnetem Tag.

    bounds: (x, y, width, height) in Viewport-Pixeln
    """

    name: str
    tag: Tag
    bounds: Tuple[int, int, int, int] = (0, 0, 0, 0)

    def contains(self, x: float, y: float) -> bool:
        bx, by, bw, bh = self.bounds
        return bx <= x < bx + bw and by <= y < by + bh


class TagModel:
    """
    Vollständige Tag-Sammlung eines Modells (Entdeckungs-Reihenfolge).

    Usage:
        model = TagModel()
        model.add_tag("Option Fireplace: Scandi")
        group = resolve_options_group(model.find_tag(...), model.tags)
    """

    def __init__(self, names: Optional[List[str]] = None):
        self._tags: List[Tag] = []
        for name in names or []:
            self.add_tag(name)

    @property
    def tags(self) -> List[Tag]:
        """Liste aller Tags (Kopie, Reihenfolge = Entdeckung)"""
        return list(self._tags)

    def add_tag(self, name: str, visible: bool = True) -> Tag:
        """
        Fügt einen neuen Tag hinzu.

        Raises:
            ValueError: wenn bereits ein Tag mit diesem Namen existiert
        """
        if self.find_tag(name) is not None:
            raise ValueError(f"Tag '{name}' existiert bereits")
        tag = Tag(name=name, visible=visible)
        self._tags.append(tag)
        logger.debug(f"[TAGS] Tag erstellt: {name} (id={tag.id})")
        return tag

    def find_tag(self, name: str) -> Optional[Tag]:
        """Findet Tag nach Namen"""
        for tag in self._tags:
            if tag.name == name:
                return tag
        return None

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)
