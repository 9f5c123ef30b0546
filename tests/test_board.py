import pytest

from tictactoe.board import WIN_LINES, Board, CellValue, GameState, Winner
from tictactoe.errors import InvalidBoard, InvalidPosition, InvalidSymbol


def test_empty_board_basics():
    b = Board()
    assert b.is_empty()
    assert not b.is_full()
    assert b.available_moves() == list(range(9))
    assert b.terminal_state() == GameState(finished=False)
    assert b.side_to_move() is CellValue.X


def test_digit_and_symbol_notations_agree():
    assert Board.from_string("120000000") == Board.from_string("XO.......")
    assert Board.from_string("x_o------").cells[:3] == (CellValue.X, CellValue.EMPTY, CellValue.O)
    assert Board.from_string("X.O......").to_string() == "X.O......"


@pytest.mark.parametrize("bad", ["abc", "0123456789", "12345678x", "3........", ""])
def test_from_string_rejects_bad_input(bad):
    with pytest.raises(InvalidBoard):
        Board.from_string(bad)


def test_constructor_validates_cells():
    with pytest.raises(InvalidBoard):
        Board(["X"] * 8)
    with pytest.raises(InvalidBoard):
        Board(["Z"] + [""] * 8)
    b = Board(["X", "O", ""] + [CellValue.EMPTY] * 6)
    assert b[0] is CellValue.X and b[1] is CellValue.O and b[2] is CellValue.EMPTY


def test_with_move_returns_new_board_and_leaves_receiver_alone():
    b = Board.from_string("X........")
    nb = b.with_move(CellValue.O, 4)
    assert nb is not None
    assert nb.to_string() == "X...O...."
    assert b.to_string() == "X........"
    assert nb.occupied_count() == b.occupied_count() + 1


def test_with_move_on_occupied_cell_is_a_noop():
    b = Board.from_string("X........")
    assert b.with_move("O", 0) is None
    assert b.to_string() == "X........"


@pytest.mark.parametrize("pos", [-1, 9, 100, True, 1.0])
def test_with_move_invalid_position(pos):
    with pytest.raises(InvalidPosition):
        Board().with_move(CellValue.X, pos)


@pytest.mark.parametrize("sym", ["", "Z", CellValue.EMPTY, None, 1])
def test_with_move_invalid_symbol(sym):
    with pytest.raises(InvalidSymbol):
        Board().with_move(sym, 0)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        Board().with_move("X", 9)


def test_row_win_reported_before_full():
    s = Board.from_string("XXXOO....").terminal_state()
    assert s.finished
    assert s.winner is Winner.X
    assert s.winning_line == (0, 1, 2)


def test_full_board_with_line_reports_winner_not_draw():
    b = Board.from_string("XXXOOXXOO")
    assert b.is_full()
    s = b.terminal_state()
    assert s.winner is Winner.X
    assert s.winning_line == (0, 1, 2)


def test_draw():
    s = Board.from_string("XXOOOXXOX").terminal_state()
    assert s == GameState(finished=True, winner=Winner.DRAW)


def test_o_win_on_diagonal():
    s = Board.from_string("XXO.O.O..").terminal_state()
    assert s.winner is Winner.O
    assert s.winning_line == (2, 4, 6)


@pytest.mark.parametrize("raw,line", [
    ("XXXX..X..", (0, 1, 2)),  # row beats column
    ("O..OO.O.O", (0, 3, 6)),  # column beats diagonal
])
def test_first_matching_line_wins(raw, line):
    assert Board.from_string(raw).terminal_state().winning_line == line


def test_in_progress():
    assert not Board.from_string("XO..X..O.").terminal_state().finished


def test_win_lines_order():
    assert WIN_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert WIN_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert WIN_LINES[6:] == ((0, 4, 8), (2, 4, 6))


def test_boards_hash_by_cells():
    assert len({Board(), Board.from_string("........."), Board.from_string("X........")}) == 2
    assert Board().side_to_move() is CellValue.X
    assert Board.from_string("X........").side_to_move() is CellValue.O
