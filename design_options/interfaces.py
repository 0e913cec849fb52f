"""
DesignOptions - Host Contracts
==============================

Abstrakte Schnittstellen zwischen dem Tool und dem Host.

Der Host liefert Picking, Transaktionen, Kontextmenü, Statuszeile und
Viewport. Das Tool selbst erfüllt ITool, den festen Satz an Event-Methoden
den der Host während einer Session aufruft.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class IPickHelper(ABC):
    """Hit-Test in Bildschirm-Koordinaten."""

    @abstractmethod
    def pick(self, x: float, y: float) -> Optional[Any]:
        """
        Returns:
            Getroffenes Entity (mit .tag Attribut) oder None
        """
        ...


class ITransaction(ABC):
    """Undo-Grenze des Hosts."""

    @abstractmethod
    def start(self, name: str, mergeable: bool = False) -> None:
        ...

    @abstractmethod
    def commit(self) -> None:
        ...


class IMenu(ABC):
    """Kontextmenü, das der Host beim Rechtsklick übergibt."""

    @abstractmethod
    def add_item(self, label: str, on_activate: Callable[[], Any]) -> Any:
        """Fügt einen Eintrag hinzu und gibt ein Handle zurück."""
        ...

    @abstractmethod
    def set_checked_predicate(self, item: Any, predicate: Callable[[], bool]) -> None:
        ...

    @abstractmethod
    def add_separator(self) -> None:
        ...


class IStatus(ABC):
    """Statuszeile des Hosts."""

    @abstractmethod
    def set_hint(self, text: str) -> None:
        ...


class IView(ABC):
    """Viewport in dem das Tool arbeitet."""

    @abstractmethod
    def invalidate(self) -> None:
        """Fordert ein Neuzeichnen an."""
        ...

    @abstractmethod
    def set_tooltip(self, text: str) -> None:
        ...


class ITool(ABC):
    """
    Event-Vertrag eines interaktiven Tools.

    Der Host ruft die Methoden single-threaded auf, jeder Handler läuft
    vollständig bevor das nächste Event zugestellt wird.
    """

    @abstractmethod
    def activate(self) -> None:
        ...

    @abstractmethod
    def deactivate(self, view: IView) -> None:
        ...

    @abstractmethod
    def on_mouse_move(self, flags: int, x: float, y: float, view: IView) -> None:
        ...

    @abstractmethod
    def on_mouse_wheel(self, flags: int, delta: float, x: float, y: float, view: IView) -> bool:
        """
        Returns:
            True wenn der Host sein Standard-Verhalten (Zoom) unterdrücken soll
        """
        ...

    @abstractmethod
    def get_menu(self, menu: IMenu) -> None:
        ...

    @abstractmethod
    def draw(self, view: IView) -> None:
        ...

    def suspend(self, view: IView) -> None:
        """Tool wird temporär unterbrochen (z.B. durch Orbit)."""

    def resume(self, view: IView) -> None:
        """Tool wird nach suspend fortgesetzt."""
