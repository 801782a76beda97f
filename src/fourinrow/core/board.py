from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from fourinrow.config import BOARD_SIZE
from fourinrow.errors import CellOccupied, OutOfBounds
from fourinrow.types import EMPTY, Cell, Coord, Player


@dataclass(slots=True)
class Board:
    size: int = BOARD_SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[EMPTY for _ in range(self.size)] for _ in range(self.size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """
        Build a board from any N x N sequence of {0, 1, 2}.
        The rows are copied, so the caller's data is never aliased.
        """
        size = len(rows)
        if size != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} rows, got {size}.")
        grid: List[List[Cell]] = []
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {size}.")
            cells = [int(v) for v in row]
            for v in cells:
                if v not in (EMPTY, Player.A, Player.B):
                    raise ValueError(f"Invalid cell value {v!r} in row {r}.")
            grid.append(cells)
        return cls(size, grid)

    def copy(self) -> "Board":
        return Board(self.size, [row[:] for row in self.grid])

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def is_empty(self, r: int, c: int) -> bool:
        return self.grid[r][c] == EMPTY

    def empty_cells(self) -> List[Coord]:
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.grid[r][c] == EMPTY
        ]

    def is_full(self) -> bool:
        return all(v != EMPTY for row in self.grid for v in row)

    def place(self, r: int, c: int, player: Player) -> None:
        if not self.in_bounds(r, c):
            raise OutOfBounds(r, c)
        if self.grid[r][c] != EMPTY:
            raise CellOccupied(r, c)
        self.grid[r][c] = int(player)

    def to_rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def to_list(self) -> List[List[Cell]]:
        return [row[:] for row in self.grid]
