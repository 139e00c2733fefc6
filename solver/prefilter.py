# solver/prefilter.py
from typing import List, Sequence, Tuple

from geometry import segments_intersect
from models import Cell, Triangle


def crosses_probe_square(tri: Triangle, cell: Cell) -> bool:
    """
    True when any triangle edge crosses a side or a diagonal of ``cell``'s
    probe square.

    A hypotenuse running along one diagonal touches every side at a corner
    only; the other diagonal is what catches it.
    """
    sides = cell.probe_edges() + cell.probe_diagonals()
    for p, q in tri.edges():
        for a, b in sides:
            if segments_intersect(p, q, a, b):
                return True
    return False


def prefilter(cells: Sequence[Cell]) -> Tuple[int, ...]:
    """
    Drop candidates that cross another cell's probe square.

    Every probe square must end up inside its own triangle only, so such a
    candidate can never take part in a solution whatever the search does.
    Candidate lists are replaced in place with the survivors (order kept).

    Returns:
        per-cell count of removed candidates.
    """
    removed: List[int] = []
    for i, cell in enumerate(cells):
        others = [other for k, other in enumerate(cells) if k != i]
        kept = [
            tri for tri in cell.candidates
            if not any(crosses_probe_square(tri, other) for other in others)
        ]
        removed.append(len(cell.candidates) - len(kept))
        cell.candidates[:] = kept
    return tuple(removed)


__all__ = ["crosses_probe_square", "prefilter"]
