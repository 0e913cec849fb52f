"""
i18n Tests - Übersetzung der Tool-Texte
"""

import i18n
from design_options.options_tool import STATUS_HINT
from i18n import set_language, tr


def test_english_returns_key():
    assert tr("Show All") == "Show All"


def test_german_translation(monkeypatch):
    monkeypatch.setattr(i18n, "_current_language", "de")

    assert tr("Show All") == "Alle anzeigen"
    assert tr(STATUS_HINT) != STATUS_HINT


def test_unknown_text_falls_back_to_original(monkeypatch):
    monkeypatch.setattr(i18n, "_current_language", "de")

    assert tr("Option Fireplace: Scandi") == "Option Fireplace: Scandi"


class TestSetLanguage:

    def test_switch_to_german(self):
        assert set_language("de") is True
        assert tr("Show All") == "Alle anzeigen"

    def test_unknown_language_keeps_current(self):
        assert set_language("xx") is False
        assert i18n._current_language == "en"
        assert tr("Show All") == "Show All"

    def test_does_not_write_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        set_language("de")

        assert list(tmp_path.iterdir()) == []
