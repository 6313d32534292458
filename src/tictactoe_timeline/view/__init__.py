"""
View module - text rendering of boards, status and the move list.
"""

from tictactoe_timeline.view.render import (
    MESSAGES,
    render,
    render_board,
    render_move_list,
    status_text,
    move_label,
    sort_label,
)

__all__ = [
    "MESSAGES",
    "render",
    "render_board",
    "render_move_list",
    "status_text",
    "move_label",
    "sort_label",
]
