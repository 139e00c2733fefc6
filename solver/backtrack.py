# solver/backtrack.py
import time
from typing import Callable, List, Optional, Sequence, Tuple

from geometry import bboxes_overlap, segments_intersect, triangle_contains_triangle
from models import EXHAUSTED, SOLVED, Cell, Point, SearchResult, Triangle

_Prepared = Tuple[Triangle, Tuple[Tuple[Point, Point], ...], Tuple[float, float, float, float]]


def _prepare(tri: Triangle) -> _Prepared:
    return (tri, tri.edges(), tri.bbox())


def _crosses(edges_a, edges_b) -> bool:
    for p, q in edges_a:
        for r, s in edges_b:
            if segments_intersect(p, q, r, s):
                return True
    return False


def is_compatible(tri: Triangle, placed: Sequence[Triangle]) -> bool:
    """Check a new triangle against every placed one: crossings first, then containment."""
    new = _prepare(tri)
    prepared = [_prepare(t) for t in placed]
    return _fits(new, prepared, len(prepared))


def _fits(new: _Prepared, slots: Sequence[Optional[_Prepared]], depth: int) -> bool:
    tri, edges, bbox = new
    overlapping = []
    for i in range(depth):
        other = slots[i]
        if not bboxes_overlap(bbox, other[2]):
            continue
        if _crosses(edges, other[1]):
            return False
        overlapping.append(other[0])
    for other in overlapping:
        if triangle_contains_triangle(other, tri) or triangle_contains_triangle(tri, other):
            return False
    return True


def search(
    cells: Sequence[Cell],
    *,
    on_enter: Optional[Callable[[int], None]] = None,
    on_node: Optional[Callable[[int, int], None]] = None,
) -> SearchResult:
    """Depth-first assignment of one candidate per cell, in cell order.

    The first complete assignment reached in candidate order is returned; the
    search never looks for a second one. ``on_enter(depth)`` fires on every
    recursive entry and ``on_node(nodes, depth)`` after every placement.
    Exhaustion is an ordinary result with ``status == "exhausted"``.
    """
    t0 = time.time()
    n = len(cells)
    options: List[List[_Prepared]] = [[_prepare(t) for t in cell.candidates] for cell in cells]

    # One slot per cell; ``depth`` is the stack pointer, so undo is a decrement.
    slots: List[Optional[_Prepared]] = [None] * n
    nodes = 0

    def _search(depth: int) -> bool:
        nonlocal nodes
        if on_enter is not None:
            on_enter(depth)
        if depth == n:
            return True
        for cand in options[depth]:
            if not _fits(cand, slots, depth):
                continue
            slots[depth] = cand
            nodes += 1
            if on_node is not None:
                on_node(nodes, depth + 1)
            if _search(depth + 1):
                return True
            slots[depth] = None
        return False

    solved = _search(0)
    elapsed = time.time() - t0
    if solved:
        return SearchResult(
            SOLVED,
            tuple(slot[0] for slot in slots),
            nodes=nodes,
            elapsed=elapsed,
            strategy="backtrack",
        )
    return SearchResult(EXHAUSTED, (), nodes=nodes, elapsed=elapsed, strategy="backtrack")


__all__ = ["is_compatible", "search"]
