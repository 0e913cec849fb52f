import os

# Muss vor jedem PySide6 Import gesetzt sein
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import sys

import pytest

import i18n
from config.feature_flags import set_flag


# Global Feature Flag Defaults - Single Source of Truth for Test Isolation
# ========================================================================
# Diese Defaults müssen mit config/feature_flags.py synchron gehalten werden.
FEATURE_FLAG_DEFAULTS = {
    # Debug-Modi
    "design_options_debug": False,

    # Resolver-Verhalten
    "lenient_sibling_separator": False,
}


@pytest.fixture(autouse=True)
def _global_feature_flag_isolation():
    """
    Stellt sicher, dass jeder Test mit sauberen, deterministischen
    Feature-Flags startet.
    """
    for key, value in FEATURE_FLAG_DEFAULTS.items():
        set_flag(key, value)

    yield

    for key, value in FEATURE_FLAG_DEFAULTS.items():
        set_flag(key, value)


@pytest.fixture(autouse=True)
def _english_ui(monkeypatch):
    """UI-Texte in Tests immer auf Englisch."""
    monkeypatch.setattr(i18n, "_current_language", "en")


@pytest.fixture(scope="session")
def qt_app():
    """Session-weite QApplication Instanz."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app


@pytest.fixture
def fireplace_tags():
    """Drei Kamin-Optionen in unsortierter Entdeckungs-Reihenfolge."""
    from design_options.tags import TagModel

    return TagModel([
        "Option Fireplace: Scandi",
        "Option Fireplace: Farmhouse",
        "Option Fireplace: Victorian",
    ])
