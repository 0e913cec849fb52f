"""
DesignOptions - Zentralisierte Tool-Konfiguration
=================================================

Alle Konstanten des Design-Options-Tools an einem Ort.

Verwendung:
    from config.tool_settings import ToolSettings

    label = ToolSettings.OPERATION_NAME
    mask = ToolSettings.CONSTRAIN_MODIFIER_MASK
"""


class ToolSettings:
    """
    Zentrale Konstanten für das Design-Options-Tool.

    Kategorien:
    - NAMING_*: Namenskonvention der Tags
    - OPERATION_*: Undo-Transaktion
    - *_MODIFIER_*: Tastatur-Modifier für Scroll
    - VIEWPORT_*: Demo-Viewport
    """

    # =========================================================================
    # Namenskonvention: "Option <GroupName>: <OptionName>"
    # =========================================================================

    NAMING_PREFIX = "Option "
    NAMING_SEPARATOR = ": "

    # =========================================================================
    # Undo-Transaktion
    # =========================================================================

    # Label der Transaktion (erscheint im Undo-Stack)
    OPERATION_NAME = "Show Design Option"

    # Aufeinanderfolgende Sessions verschmelzen zu einem Undo-Schritt
    OPERATION_MERGEABLE = True

    # =========================================================================
    # Modifier
    # =========================================================================

    # Entspricht Qt.KeyboardModifier.ShiftModifier
    CONSTRAIN_MODIFIER_MASK = 0x02000000

    # =========================================================================
    # Demo-Viewport
    # =========================================================================

    VIEWPORT_MIN_WIDTH = 640
    VIEWPORT_MIN_HEIGHT = 420
    VIEWPORT_ENTITY_WIDTH = 160
    VIEWPORT_ENTITY_HEIGHT = 110
    VIEWPORT_ENTITY_SPACING = 24


# =============================================================================
# Convenience-Funktionen
# =============================================================================

def has_constrain_modifier(flags: int) -> bool:
    """True wenn der Constrain-Modifier in flags gesetzt ist."""
    mask = ToolSettings.CONSTRAIN_MODIFIER_MASK
    return flags & mask == mask
