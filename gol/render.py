from __future__ import annotations

from .grid import Board

CLEAR_SCREEN = "\x1b[H\x1b[2J"


def render_board(board: Board, alive: str = "O", dead: str = " ", border: str = "#") -> str:
    """Format a board as a border-framed text grid.

    One border line above and below, one border column on each side of every
    row. No trailing newline.
    """
    edge = border * (board.width + 2)
    lines = [edge]
    for row in board.cells:
        lines.append(border + ''.join(alive if v else dead for v in row.tolist()) + border)
    lines.append(edge)
    return "\n".join(lines)
