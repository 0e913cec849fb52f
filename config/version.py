"""
DesignOptions - Zentrale Versionsverwaltung
===========================================

Alle Versions- und Extension-Informationen werden hier zentral gepflegt.
Import: from config.version import VERSION, EXTENSION_NAME
"""

# Haupt-Versionsnummer (Semantic Versioning: MAJOR.MINOR.PATCH)
VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0

# Release-Typ: "alpha", "beta", "rc1", "" (leer für stable release)
VERSION_SUFFIX = ""

# App-Name
APP_NAME = "DesignOptions"

# Extension-Metadaten (Menüeintrag + Statusbar-Text des Commands)
EXTENSION_CREATOR = "Eneroth"
EXTENSION_NAME = f"{EXTENSION_CREATOR} Design Options"
EXTENSION_DESCRIPTION = "Manage visibility of mutually exclusive design options."

# Abgeleitete Strings
VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"
VERSION_STRING = f"{VERSION}-{VERSION_SUFFIX}" if VERSION_SUFFIX else VERSION
VERSION_FULL = f"v{VERSION_STRING}"

# Copyright
COPYRIGHT_YEAR = "2025"
COPYRIGHT = f"© {COPYRIGHT_YEAR}, {EXTENSION_CREATOR}"


def get_version_info() -> dict:
    """
    Gibt alle Versionsinformationen als Dictionary zurück.
    Nützlich für Debug-Ausgaben und das About-Fenster.
    """
    return {
        "app_name": APP_NAME,
        "extension_name": EXTENSION_NAME,
        "description": EXTENSION_DESCRIPTION,
        "creator": EXTENSION_CREATOR,
        "version": VERSION,
        "version_string": VERSION_STRING,
        "version_full": VERSION_FULL,
        "major": VERSION_MAJOR,
        "minor": VERSION_MINOR,
        "patch": VERSION_PATCH,
        "suffix": VERSION_SUFFIX,
        "copyright": COPYRIGHT,
    }
