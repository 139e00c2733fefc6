# solver/candidates.py
from typing import List, Tuple

from board import BOARD_MAX_LEN, check_cell_spec
from geometry import point_in_triangle
from models import Cell, Dimension, Point, Triangle

ROTATIONS = ("upright", "right", "down", "left")

# Top-right corner of the unit square at the origin. When it sits inside an
# upright right triangle whose right angle is at or below/left of the origin,
# the whole square does.
_PROBE = Point(1, 1)


def valid_offsets(base: int, height: int) -> Tuple[Tuple[int, int], ...]:
    """All (shiftX, shiftY) translations, both <= 0, that keep the probe inside.

    Columns are scanned from shiftX = 0 leftwards; within each column shiftY
    walks down from 0 until the probe falls out.
    """
    out: List[Tuple[int, int]] = []
    sx = 0
    while point_in_triangle(_PROBE, Point(sx, 0), Point(sx, height), Point(sx + base, 0)):
        sy = 0
        while point_in_triangle(_PROBE, Point(sx, sy), Point(sx, sy + height), Point(sx + base, sy)):
            out.append((sx, sy))
            sy -= 1
        sx -= 1
    return tuple(out)


def create_dimensions(area: int) -> List[Dimension]:
    """
    Integer (base, height) legs for a right triangle of the given area.

    A base must be at least 2 wide, otherwise the unit square cannot fit; the
    ``base < 2*area`` bound keeps the height at 2 or more for the same reason.
    """
    effective = 2 * int(area)
    dims: List[Dimension] = []
    for base in range(2, effective):
        if effective % base == 0:
            height = effective // base
            dims.append(Dimension(base, height, valid_offsets(base, height)))
    return dims


def orient(x: int, y: int, dim: Dimension, offset: Tuple[int, int], rotation: str) -> Triangle:
    sx, sy = offset
    b, h = dim.base, dim.height
    if rotation == "upright":
        ax, ay = x + sx, y + sy
        return Triangle(Point(ax, ay), Point(ax + b, ay), Point(ax, ay + h))
    if rotation == "right":
        ax, ay = x + sy, y + abs(sx) + 1
        return Triangle(Point(ax, ay), Point(ax, ay - b), Point(ax + h, ay))
    if rotation == "down":
        ax, ay = x + abs(sx) + 1, y + abs(sy) + 1
        return Triangle(Point(ax, ay), Point(ax - b, ay), Point(ax, ay - h))
    if rotation == "left":
        ax, ay = x + abs(sy) + 1, y + sx
        return Triangle(Point(ax, ay), Point(ax, ay + b), Point(ax - h, ay))
    raise ValueError(f"unknown rotation {rotation!r}")


def _on_board(tri: Triangle, max_len: int) -> bool:
    return all(0 <= p.x <= max_len and 0 <= p.y <= max_len for p in tri.vertices())


def make_candidates(x: int, y: int, dimensions: List[Dimension], max_len: int = BOARD_MAX_LEN) -> List[Triangle]:
    """Every in-bounds placement; rotation-major, then dimension, then offset."""
    out: List[Triangle] = []
    for rotation in ROTATIONS:
        for dim in dimensions:
            for offset in dim.offsets:
                tri = orient(x, y, dim, offset, rotation)
                if _on_board(tri, max_len):
                    out.append(tri)
    return out


def build_cell(area: int, x: int, y: int, max_len: int = BOARD_MAX_LEN) -> Cell:
    check_cell_spec(area, x, y, max_len)
    dims = create_dimensions(area)
    return Cell(int(area), int(x), int(y), dims, make_candidates(int(x), int(y), dims, max_len))


__all__ = ["ROTATIONS", "build_cell", "create_dimensions", "make_candidates", "orient", "valid_offsets"]
