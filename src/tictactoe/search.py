"""
Exhaustive minimax search over Boards, from X's point of view.

Scoring:
- X win at depth d scores 100 - d (faster wins are worth more).
- O win at depth d scores -100 + d (slower losses are worth more to X).
- Draws, and positions cut off by max_depth, score 0.

Tie-break policy at the root:
- Every root move's score is tallied as score -> [indices] in ascending move order.
- The chosen move is the first index in the bucket of the best score, so the
  lowest index wins among equally good moves. No randomness.

No pruning and no transposition table: every reachable line is walked.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .board import Board, CellValue, GameState, Winner
from .config import UNLIMITED_DEPTH, validate_max_depth
from .errors import InvariantViolation

WIN_SCORE = 100


def terminal_score(state: GameState, depth: int) -> int:
    if state.winner is Winner.X:
        return WIN_SCORE - depth
    if state.winner is Winner.O:
        return -WIN_SCORE + depth
    return 0


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a root search.

    `move` is None when the root board is already finished; `tally` maps each
    score to the root moves that reached it, in move order.
    """
    move: Optional[int]
    score: int
    tally: Dict[int, Tuple[int, ...]] = field(default_factory=dict)


def _turn(maximizing: bool):
    if maximizing:
        return -WIN_SCORE, max, CellValue.X
    return WIN_SCORE, min, CellValue.O


def _successor(board: Board, symbol: CellValue, index: int) -> Board:
    child = board.with_move(symbol, index)
    if child is None:
        raise InvariantViolation(f"Move {index} was listed as available but is occupied on {board!r}")
    return child


class Player:
    def __init__(self, max_depth: int = UNLIMITED_DEPTH) -> None:
        self.max_depth = validate_max_depth(max_depth)
        self.nodes_evaluated = 0

    def evaluate(self, board: Board, maximizing: bool, depth: int = 0) -> int:
        """Minimax value of `board` with the given side to move. No callback, no tally."""
        self.nodes_evaluated = 0
        return self._evaluate(board, maximizing, depth)

    def _evaluate(self, board: Board, maximizing: bool, depth: int) -> int:
        self.nodes_evaluated += 1
        state = board.terminal_state()
        if state.finished or (self.max_depth != UNLIMITED_DEPTH and depth >= self.max_depth):
            return terminal_score(state, depth)

        moves = board.available_moves()
        if not moves:
            raise InvariantViolation(f"No available moves on unfinished board {board!r}")

        best, op, symbol = _turn(maximizing)
        for index in moves:
            best = op(best, self._evaluate(_successor(board, symbol, index), not maximizing, depth + 1))
        return best

    def choose_move(self, board: Board, maximizing: bool = True) -> SearchResult:
        self.nodes_evaluated = 1
        state = board.terminal_state()
        if state.finished:
            return SearchResult(move=None, score=terminal_score(state, 0))

        moves = board.available_moves()
        if not moves:
            raise InvariantViolation(f"No available moves on unfinished board {board!r}")

        tally: Dict[int, List[int]] = defaultdict(list)
        best, op, symbol = _turn(maximizing)
        for index in moves:
            score = self._evaluate(_successor(board, symbol, index), not maximizing, 1)
            best = op(best, score)
            tally[score].append(index)
            logging.debug("root move=%d score=%d", index, score)

        move = tally[best][0]
        logging.debug(
            "chose move=%d score=%d nodes=%d tally=%s",
            move, best, self.nodes_evaluated, dict(tally),
        )
        return SearchResult(
            move=move,
            score=best,
            tally={s: tuple(idx) for s, idx in tally.items()},
        )

    def get_best_move(
        self,
        board: Board,
        maximizing: bool = True,
        callback: Optional[Callable[[int], None]] = None,
        depth: int = 0,
    ) -> int:
        """Root calls (depth 0) return the chosen index and pass it to `callback`;
        deeper calls return the raw score of `board`.

        A finished root board has no move: its terminal score is returned and
        `callback` is not invoked.
        """
        if depth > 0:
            return self.evaluate(board, maximizing, depth)
        result = self.choose_move(board, maximizing)
        if result.move is None:
            return result.score
        if callback is not None:
            callback(result.move)
        return result.move


def best_move(
    board: Board,
    maximizing: bool = True,
    on_result: Optional[Callable[[int], None]] = None,
    depth: int = 0,
    max_depth: int = UNLIMITED_DEPTH,
) -> int:
    return Player(max_depth=max_depth).get_best_move(board, maximizing, on_result, depth)
