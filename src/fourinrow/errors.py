from __future__ import annotations


class FourInRowError(Exception):
    reason = "error"


class InvalidMove(FourInRowError, ValueError):
    reason = "invalid_move"


class CellOccupied(InvalidMove):
    reason = "cell_taken"

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell {row + 1},{col + 1} is already taken.")
        self.row = row
        self.col = col


class OutOfBounds(InvalidMove):
    reason = "out_of_bounds"

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell {row + 1},{col + 1} is off the board.")
        self.row = row
        self.col = col


class GameOver(FourInRowError):
    reason = "game_over"

    def __init__(self, msg: str = "The game is already over.") -> None:
        super().__init__(msg)


GameAlreadyOver = GameOver


class StoreError(FourInRowError):
    reason = "store_error"
