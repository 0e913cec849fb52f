"""
DesignOptions - Feature Flags
=============================

Feature Flags ermöglichen inkrementelle Rollouts und einfaches Rollback.
Neue Verhaltensweisen werden mit Flag=False eingeführt und erst nach
Validierung aktiviert.

Diese Datei enthält nur Debug-Flags und Verhaltens-Schalter für das
Design-Options-Tool.
"""

from typing import Dict

# Feature Flag Registry
# =====================
FEATURE_FLAGS: Dict[str, bool] = {
    # Debug-Modi
    "design_options_debug": False,  # Verbose Logging für Resolver/Tool (Hover, Scroll, Menü)

    # Resolver-Verhalten
    # Der Outer-Match akzeptiert "Option X:Y" (ohne Leerzeichen), die
    # Geschwister-Suche verlangt exakt ": ". Mit True nutzt auch die
    # Geschwister-Suche ": ?" und hebt die Asymmetrie auf.
    "lenient_sibling_separator": False,
}


def is_enabled(flag: str) -> bool:
    """
    Prüft ob ein Feature-Flag aktiviert ist.

    Args:
        flag: Name des Feature-Flags

    Returns:
        True wenn aktiviert, False wenn nicht aktiviert oder unbekannt
    """
    return FEATURE_FLAGS.get(flag, False)


def set_flag(flag: str, value: bool) -> None:
    """
    Setzt ein Feature-Flag zur Laufzeit.
    Nützlich für Tests und Debugging.

    Args:
        flag: Name des Feature-Flags
        value: Neuer Wert
    """
    FEATURE_FLAGS[flag] = value


def get_all_flags() -> Dict[str, bool]:
    """Gibt alle Feature-Flags zurück."""
    return FEATURE_FLAGS.copy()
