# board.py — the fixed puzzle board
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from models import BoardError, Cell

CellSpec = Tuple[int, int, int]  # (area, x, y)

# Largest legal coordinate; the board is an 18 × 18 grid of points 0..17.
BOARD_MAX_LEN = 17

# The 29 cells of the puzzle, in search order.
FIXED_BOARD: Tuple[CellSpec, ...] = (
    (2, 3, 0), (18, 7, 0), (12, 2, 1), (4, 13, 1), (3, 4, 2), (7, 11, 2),
    (6, 16, 2), (6, 0, 3), (9, 3, 4), (11, 9, 4), (8, 14, 5), (4, 0, 6),
    (14, 5, 6), (18, 15, 6), (20, 8, 8), (7, 1, 10), (3, 11, 10),
    (3, 16, 10), (3, 2, 11), (7, 7, 12), (10, 13, 12), (5, 16, 13),
    (4, 0, 14), (10, 5, 14), (3, 12, 14), (12, 3, 15), (7, 14, 15),
    (8, 9, 16), (2, 13, 16),
)


def check_cell_spec(area: int, x: int, y: int, max_len: int = BOARD_MAX_LEN) -> None:
    if int(area) < 1:
        raise BoardError(f"cell at ({x},{y}) has non-positive area {area}")
    # The probe square spans [x, x+1] × [y, y+1] and must stay on the board.
    if not (0 <= int(x) < max_len and 0 <= int(y) < max_len):
        raise BoardError(f"cell anchor ({x},{y}) is outside the 0..{max_len} board")


def build_board(specs: Iterable[CellSpec] = FIXED_BOARD, max_len: int = BOARD_MAX_LEN) -> List[Cell]:
    """Return populated cells (dimensions and candidates) in the given order."""
    from solver.candidates import build_cell

    return [build_cell(area, x, y, max_len) for area, x, y in specs]


def total_area(specs: Sequence[CellSpec] = FIXED_BOARD) -> int:
    return sum(int(area) for area, _x, _y in specs)


__all__ = ["BOARD_MAX_LEN", "FIXED_BOARD", "CellSpec", "build_board", "check_cell_spec", "total_area"]
