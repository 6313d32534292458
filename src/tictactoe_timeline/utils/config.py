"""
Configuration, constants and logging setup.
"""

import logging
from typing import Optional, Union

from tictactoe_timeline.core.types import Cell, SortOrder


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {Cell.EMPTY: " ", Cell.X: "X", Cell.O: "O"}


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

LANGUAGES = ("en", "ru")
DEFAULT_LANGUAGE = "en"

SORT_ORDERS = {
    "asc": SortOrder.ASCENDING,
    "desc": SortOrder.DESCENDING,
}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(level: Union[int, str] = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for command-line use."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        sort_order: Union[SortOrder, str] = SortOrder.ASCENDING,
        language: str = DEFAULT_LANGUAGE,
        log_level: Optional[str] = DEFAULT_LOG_LEVEL,
    ):
        if isinstance(sort_order, str):
            if sort_order not in SORT_ORDERS:
                raise ValueError(
                    f"Unknown sort order '{sort_order}'. "
                    f"Expected one of: {', '.join(SORT_ORDERS)}"
                )
            sort_order = SORT_ORDERS[sort_order]
        if language not in LANGUAGES:
            raise ValueError(
                f"Unsupported language '{language}'. "
                f"Expected one of: {', '.join(LANGUAGES)}"
            )

        self.sort_order = sort_order
        self.language = language
        log_level = (log_level or DEFAULT_LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{log_level}'. "
                f"Expected one of: {', '.join(LOG_LEVELS)}"
            )
        self.log_level = log_level


# Default configuration
DEFAULT_CONFIG = Config()
