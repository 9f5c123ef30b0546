from tictactoe.board import Board, CellValue, Winner
from tictactoe.game import play_game
from tictactoe.search import Player


def test_perfect_play_from_empty_board_draws():
    record = play_game()
    assert record.final_state.finished
    assert record.final_state.winner is Winner.DRAW
    assert len(record.moves) == 9
    assert [s for s, _ in record.moves] == [CellValue.X, CellValue.O] * 4 + [CellValue.X]


def test_play_from_midgame_finishes_immediately():
    seen = []
    record = play_game(
        Board.from_string("XX.OO...."),
        maximizing=True,
        player=Player(),
        on_move=lambda sym, idx, b: seen.append((sym, idx, b.to_string())),
    )
    assert record.moves == [(CellValue.X, 2)]
    assert record.final_state.winner is Winner.X
    assert record.final_state.winning_line == (0, 1, 2)
    assert seen == [(CellValue.X, 2, "XXXOO....")]


def test_side_to_move_is_inferred():
    # O to move by piece count, and O completes the top row
    record = play_game(Board.from_string("OO.XX.X.."))
    assert record.moves[0] == (CellValue.O, 2)
    assert record.final_state.winner is Winner.O


def test_finished_board_plays_no_moves():
    b = Board.from_string("XXOOOXXOX")
    record = play_game(b)
    assert record.moves == []
    assert record.final_board == b
    assert record.final_state.winner is Winner.DRAW
