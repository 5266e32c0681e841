from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

Mark = str  # 'X' or 'O'
Cell = Optional[Mark]
Line = Tuple[int, int, int]

MARKS: Tuple[Mark, Mark] = ('X', 'O')
SIZE = 3

# Rows top to bottom, columns left to right, then both diagonals.
WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def check_index(index: int) -> int:
    """Validates a cell index and returns it."""
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < SIZE * SIZE:
        raise ValueError(f'cell index out of range: {index!r}')
    return index


def cell_to_row_col(index: int) -> Tuple[int, int]:
    """Converts a cell index to the 1-based (row, col) shown in the move list."""
    check_index(index)
    return index // SIZE + 1, index % SIZE + 1


@dataclass(frozen=True)
class Board:
    """The 3x3 grid of cells, row-major."""
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != SIZE * SIZE:
            raise ValueError(f'board needs {SIZE * SIZE} cells, got {len(self.cells)}')
        for cell in self.cells:
            if cell is not None and cell not in MARKS:
                raise ValueError(f'invalid cell value: {cell!r}')

    @classmethod
    def empty(cls) -> 'Board':
        return cls(cells=(None,) * (SIZE * SIZE))

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a 0-based row and column."""
        return r * SIZE + c

    def at(self, r: int, c: int) -> Cell:
        return self.cells[self.index(r, c)]

    def coords(self) -> Iterable[Tuple[int, int]]:
        for r in range(SIZE):
            for c in range(SIZE):
                yield (r, c)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def empty_cells(self) -> List[int]:
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def with_mark(self, index: int, mark: Mark) -> 'Board':
        """Returns a copy of the board with `mark` written at `index`."""
        cells = list(self.cells)
        cells[check_index(index)] = mark
        return Board(cells=tuple(cells))

    def pretty(self, winning_line: Optional[Iterable[int]] = None) -> str:
        """Generates a human-readable grid; cells on the winning line are bracketed."""
        highlight = set(winning_line or ())
        lines: List[str] = []
        for r in range(SIZE):
            row: List[str] = []
            for c in range(SIZE):
                i = self.index(r, c)
                text = self.cells[i] or '.'
                row.append(f'[{text}]' if i in highlight else f' {text} ')
            lines.append(''.join(row))
        return '\n'.join(lines)


def calculate_winner(board: Board) -> Optional[Tuple[Mark, Line]]:
    """Returns the winning mark and its line, or None if no line is complete."""
    cells = board.cells
    for line in WINNING_LINES:
        a, b, c = line
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a], line
    return None
