"""
Engine-vs-engine sample games.

Both sides are played by the same Player; X maximizes, O minimizes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .board import Board, CellValue, GameState
from .search import Player


@dataclass
class GameRecord:
    moves: List[Tuple[CellValue, int]] = field(default_factory=list)
    final_board: Board = field(default_factory=Board)
    final_state: GameState = field(default_factory=lambda: GameState(finished=False))


def play_game(
    board: Optional[Board] = None,
    maximizing: Optional[bool] = None,
    player: Optional[Player] = None,
    on_move: Optional[Callable[[CellValue, int, Board], None]] = None,
) -> GameRecord:
    """Play optimal moves for both sides from `board` until the game ends.

    When `maximizing` is None the side to move is inferred from piece counts.
    """
    if board is None:
        board = Board()
    if maximizing is None:
        maximizing = board.side_to_move() is CellValue.X
    if player is None:
        player = Player()

    record = GameRecord(final_board=board, final_state=board.terminal_state())
    while not record.final_state.finished:
        result = player.choose_move(record.final_board, maximizing)
        symbol = CellValue.X if maximizing else CellValue.O
        next_board = record.final_board.with_move(symbol, result.move)
        record.moves.append((symbol, result.move))
        record.final_board = next_board
        record.final_state = next_board.terminal_state()
        logging.debug("%s plays %d (score=%d, nodes=%d)",
                      symbol.value, result.move, result.score, player.nodes_evaluated)
        if on_move is not None:
            on_move(symbol, result.move, next_board)
        maximizing = not maximizing
    return record
