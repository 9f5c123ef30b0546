"""tictactoe package.

Immutable 3x3 boards with terminal detection, an exhaustive minimax search
with a deterministic root tie-break, console rendering and a small CLI.
"""

from .board import WIN_LINES, Board, CellValue, GameState, Winner
from .errors import InvalidBoard, InvalidPosition, InvalidSymbol, InvariantViolation, TicTacToeError
from .game import GameRecord, play_game
from .search import Player, SearchResult, best_move

__all__ = [
    "Board",
    "CellValue",
    "Winner",
    "GameState",
    "WIN_LINES",
    "Player",
    "SearchResult",
    "best_move",
    "play_game",
    "GameRecord",
    "TicTacToeError",
    "InvalidPosition",
    "InvalidSymbol",
    "InvalidBoard",
    "InvariantViolation",
]
