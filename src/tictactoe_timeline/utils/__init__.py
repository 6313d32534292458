"""
Utilities - constants, configuration and logging setup.
"""

from tictactoe_timeline.utils.config import (
    BOARD_SIZE,
    CELL_COUNT,
    CELL_STRINGS,
    LANGUAGES,
    Config,
    DEFAULT_CONFIG,
    configure_logging,
)

__all__ = [
    "BOARD_SIZE",
    "CELL_COUNT",
    "CELL_STRINGS",
    "LANGUAGES",
    "Config",
    "DEFAULT_CONFIG",
    "configure_logging",
]
