# DesignOptions Command Classes for Undo/Redo
from .design_option_commands import (
    ShowDesignOptionCommand,
    SHOW_DESIGN_OPTION_COMMAND_ID,
)
