"""
Error types raised by the board and the search.

All of them signal caller or programming errors; none is retryable.
"""


class TicTacToeError(Exception):
    """Base class for every error raised by this package."""


class InvalidPosition(TicTacToeError, ValueError):
    def __init__(self, position: object) -> None:
        super().__init__(f"Position {position!r} does not exist (expected 0..8)")
        self.position = position


class InvalidSymbol(TicTacToeError, ValueError):
    def __init__(self, symbol: object) -> None:
        super().__init__(f"Symbol {symbol!r} is not allowed (expected X or O)")
        self.symbol = symbol


class InvalidBoard(TicTacToeError, ValueError):
    pass


class InvariantViolation(TicTacToeError, RuntimeError):
    pass
