from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import Optional

from .board import Board, CellValue
from .config import SearchConfig, validate_max_depth
from .errors import TicTacToeError
from .game import play_game
from .render import format_board, format_state
from .search import Player

BOARD_HELP = "Board string: 9 chars of 0/1/2 (empty/X/O) or X/O with '.' for empty"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe minimax CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Ply bound for the search, -1 for unlimited (default: $TTT_MAX_DEPTH or -1)",
    )

    p_best = sub.add_parser("best", help="Compute the best move for the side to move")
    p_best.add_argument("--board", help=BOARD_HELP + " (omit with --stdin)")
    p_best.add_argument(
        "--player",
        choices=["x", "o"],
        default=None,
        help="Side to move (default: inferred from piece counts)",
    )
    p_best.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_state = sub.add_parser("state", help="Classify a board as in progress, won or drawn")
    p_state.add_argument("--board", required=True, help=BOARD_HELP)

    p_render = sub.add_parser("render", help="Print a board as a grid")
    p_render.add_argument("--board", required=True, help=BOARD_HELP)

    p_play = sub.add_parser("play", help="Play a sample game, engine against itself")
    p_play.add_argument("--board", default=None, help=BOARD_HELP + " (default: empty board)")
    p_play.add_argument("--player", choices=["x", "o"], default=None, help="Side to move first")

    return p


def _maximizing(board: Board, player: Optional[str]) -> bool:
    if player is None:
        return board.side_to_move() is CellValue.X
    return player == "x"


def _parse_board(raw: Optional[str]) -> Board:
    return Board.from_string((raw or "").strip())


def _run_best_stdin(player: Player, side: Optional[str]) -> int:
    w = csv.writer(sys.stdout)
    w.writerow(["board", "player", "move", "score"])
    for line in sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            board = Board.from_string(raw)
        except TicTacToeError:
            continue
        maximizing = _maximizing(board, side)
        res = player.choose_move(board, maximizing)
        w.writerow([
            board.to_string(),
            "X" if maximizing else "O",
            "" if res.move is None else res.move,
            res.score,
        ])
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    try:
        cfg = SearchConfig.from_env()
        if ns.max_depth is not None:
            cfg.max_depth = validate_max_depth(ns.max_depth)
    except ValueError as e:
        logging.basicConfig(format="[%(levelname)s] %(message)s")
        logging.error("%s", e)
        return 2
    logging.basicConfig(level=logging.DEBUG if ns.verbose else cfg.log_level,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe"))
        except Exception:
            print("unknown")
        return 0

    player = Player(max_depth=cfg.max_depth)

    if ns.cmd == "best" and ns.stdin:
        return _run_best_stdin(player, ns.player)

    if ns.cmd in ("best", "state", "render", "play"):
        try:
            board = Board() if ns.cmd == "play" and ns.board is None else _parse_board(ns.board)
        except TicTacToeError as e:
            logging.error("Invalid board: %s", e)
            return 2
    else:
        parser.print_help()
        return 0

    if ns.cmd == "best":
        res = player.choose_move(board, _maximizing(board, ns.player))
        if res.move is None:
            logging.info("game over: %s score=%d", format_state(board.terminal_state()), res.score)
            return 0
        logging.info(
            "move=%d score=%d tally=%s nodes=%d",
            res.move,
            res.score,
            {s: list(m) for s, m in sorted(res.tally.items())},
            player.nodes_evaluated,
        )
        return 0

    if ns.cmd == "state":
        state = board.terminal_state()
        logging.info(
            "finished=%s winner=%s line=%s (%s)",
            state.finished,
            state.winner.value if state.winner else None,
            list(state.winning_line) if state.winning_line else None,
            format_state(state),
        )
        return 0

    if ns.cmd == "render":
        print(format_board(board))
        return 0

    print(format_board(board))

    def _show(symbol: CellValue, index: int, next_board: Board) -> None:
        print(f"\n{symbol.value} -> {index}")
        print(format_board(next_board))

    record = play_game(board, _maximizing(board, ns.player), player, on_move=_show)
    print(f"\nresult: {format_state(record.final_state)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
