"""
DesignOptions - Tag Group Resolver
==================================

Erkennt ob ein Tag zu einer Options-Gruppe gehört und baut einen Snapshot.

Namenskonvention: "Option <Gruppe>: <Option>"
- <Gruppe> darf keinen Doppelpunkt enthalten
- Das Muster darf irgendwo im Tag-Namen stehen (kein Anker am Anfang)
- Der Outer-Match ist tolerant beim Leerzeichen nach dem Doppelpunkt,
  die Geschwister-Suche verlangt exakt ": " (Flag lenient_sibling_separator)

Beispiel:
    "Option Fireplace: Rustic", "Option Fireplace: Scandi",
    "Option Fireplace: Farmhouse" -> Gruppe "Fireplace" mit 3 Optionen
"""

import re
from typing import Iterable, Optional, Pattern

from loguru import logger

from config.feature_flags import is_enabled
from design_options.options_group import OptionsGroup
from design_options.tags import Tag

OPTION_PATTERN = re.compile(r"Option (?P<group>[^:]+): ?(?P<option>.+)")


def sibling_pattern(group_name: str) -> Pattern:
    """
    Pattern für alle Tags einer Gruppe.

    Der Gruppen-Name wird escaped, Regex-Steuerzeichen im Namen
    (z.B. "A+B", "Lamp (old)") matchen damit wörtlich.
    """
    separator = ": ?" if is_enabled("lenient_sibling_separator") else ": "
    return re.compile(f"Option {re.escape(group_name)}{separator}(?P<option>.+)")


def match_option_name(name: str) -> Optional[re.Match]:
    """
    Outer-Match eines Tag-Namens gegen die Namenskonvention.

    Nicht verankert: "Old Option Sofa: A" gehört zur Gruppe "Sofa".
    """
    return OPTION_PATTERN.search(name)


def resolve_options_group(tag: Tag, all_tags: Iterable[Tag]) -> Optional[OptionsGroup]:
    """
    Versucht eine OptionsGroup aus einem Tag zu erzeugen.

    Args:
        tag: Der gehoverte Tag
        all_tags: Vollständige Tag-Sammlung des Modells

    Returns:
        OptionsGroup oder None wenn der Tag keine Design-Option ist
        (kein Match, weniger als 2 Geschwister, oder der Tag selbst
        erfüllt das Geschwister-Pattern nicht)
    """
    matches = match_option_name(tag.name)
    if not matches:
        return None

    group_name = matches.group("group")
    pattern = sibling_pattern(group_name)

    # sorted() ist stabil: gleiche Namen behalten die Entdeckungs-Reihenfolge
    siblings = []
    for candidate in sorted(all_tags, key=lambda t: t.name):
        sibling_match = pattern.search(candidate.name)
        if sibling_match:
            siblings.append((candidate, sibling_match.group("option")))

    if len(siblings) < 2:
        logger.debug(f"[DESIGN-OPTIONS] '{group_name}': nur {len(siblings)} Option(en), keine Gruppe")
        return None

    option_entities = [t for t, _ in siblings]
    option_names = [name for _, name in siblings]

    index = next((i for i, t in enumerate(option_entities) if t is tag), None)
    if index is None:
        logger.debug(
            f"[DESIGN-OPTIONS] '{tag.name}' passt nicht zum Geschwister-Pattern "
            f"der Gruppe '{group_name}'"
        )
        return None

    return OptionsGroup(group_name, option_names, option_entities, index)
