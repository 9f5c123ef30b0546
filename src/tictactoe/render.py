"""Plain-text rendering of boards and game states for the console."""
from typing import List

from .board import Board, GameState, Winner

ROW_SEPARATOR = '――― ――― ―――'


def format_board(board: Board) -> str:
    rows: List[str] = []
    for start in (0, 3, 6):
        rows.append('|'.join(f" {c.value} " if c.value else '   ' for c in board.cells[start:start + 3]))
    return f"\n{ROW_SEPARATOR}\n".join(rows)


def format_state(state: GameState) -> str:
    if not state.finished:
        return 'in progress'
    if state.winner is Winner.DRAW:
        return 'draw'
    line = '-'.join(str(i) for i in state.winning_line or ())
    return f"{state.winner.value} wins on {line}"
