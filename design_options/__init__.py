"""
DesignOptions - Core
Tag-Gruppierung und Interaktions-Tool (Qt-frei)
"""

from .tags import Tag, TagModel, TaggedEntity
from .options_group import OptionsGroup
from .resolver import resolve_options_group, sibling_pattern, OPTION_PATTERN
from .interfaces import IPickHelper, ITransaction, IMenu, IStatus, IView, ITool
from .transaction import VisibilitySnapshot, VisibilityChange, VisibilityTransaction
from .options_tool import OptionsTool, STATUS_HINT

__all__ = [
    'Tag', 'TagModel', 'TaggedEntity',
    'OptionsGroup', 'resolve_options_group', 'sibling_pattern', 'OPTION_PATTERN',
    'IPickHelper', 'ITransaction', 'IMenu', 'IStatus', 'IView', 'ITool',
    'VisibilitySnapshot', 'VisibilityChange', 'VisibilityTransaction',
    'OptionsTool', 'STATUS_HINT',
]
