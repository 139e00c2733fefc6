# Orchestrator: generate -> prefilter -> search -> validate
from __future__ import annotations

import time
from typing import Callable, List, Optional, Sequence

from board import BOARD_MAX_LEN, FIXED_BOARD, CellSpec, build_board, total_area
from config import CFG
from geometry import point_in_triangle, triangle_area, triangles_compatible
from models import SOLVED, Cell, SearchResult, SolutionError, Triangle
from progress import (
    log_attempt_detail, set_board_size, set_message, set_phase,
    set_search_progress, set_status, set_strategy,
)
from render import format_candidates, format_dimensions
from solver.backtrack import search
from solver.prefilter import crosses_probe_square, prefilter

STRATEGIES = ("backtrack", "cp_sat")


# ---------- helpers ----------

def _resolve_strategy(strategy: Optional[str]) -> str:
    name = (strategy or CFG.STRATEGY or "backtrack").strip().lower()
    if name not in STRATEGIES:
        raise ValueError(f"unknown strategy {name!r}; expected one of {', '.join(STRATEGIES)}")
    return name


def _progress_hook(every: int) -> Callable[[int, int], None]:
    step = max(1, int(every))

    def _on_node(nodes: int, depth: int) -> None:
        if nodes % step == 0:
            set_search_progress(nodes, depth)

    return _on_node


def _log_cells(cells: Sequence[Cell]) -> None:
    for idx, cell in enumerate(cells):
        log_attempt_detail(
            "Cell candidates",
            index=idx,
            area=cell.area,
            anchor=f"({cell.x},{cell.y})",
            dimensions=format_dimensions(cell).replace("\n", "; "),
            candidates=format_candidates(cell).replace("\n", "; "),
        )


def validate_solution(
    triangles: Sequence[Triangle],
    cells: Sequence[Cell],
    max_len: int = BOARD_MAX_LEN,
) -> List[str]:
    """Return human-readable problems; an empty list means the assignment holds."""

    problems: List[str] = []
    if len(triangles) != len(cells):
        problems.append(f"expected {len(cells)} triangles, got {len(triangles)}")
        return problems

    for idx, (tri, cell) in enumerate(zip(triangles, cells)):
        for p in tri.vertices():
            if not (0 <= p.x <= max_len and 0 <= p.y <= max_len):
                problems.append(f"triangle {idx} vertex ({p.x},{p.y}) is off the board")
        if triangle_area(tri.a, tri.b, tri.c) != cell.area:
            problems.append(f"triangle {idx} area differs from cell area {cell.area}")
        a, b, c = tri.vertices()
        if not all(point_in_triangle(corner, a, b, c) for corner in cell.probe_square()):
            problems.append(f"triangle {idx} does not hold its probe square at ({cell.x},{cell.y})")
        for k, other in enumerate(cells):
            if k != idx and crosses_probe_square(tri, other):
                problems.append(f"triangle {idx} crosses the probe square of cell {k}")

    for i in range(len(triangles)):
        for j in range(i + 1, len(triangles)):
            if not triangles_compatible(triangles[i], triangles[j]):
                problems.append(f"triangles {i} and {j} cross or nest")
    return problems


# ---------- public entrypoint ----------

def solve_board(
    board: Sequence[CellSpec] = FIXED_BOARD,
    max_len: int = BOARD_MAX_LEN,
    strategy: Optional[str] = None,
    *,
    on_enter: Optional[Callable[[int], None]] = None,
) -> SearchResult:
    """
    Run the whole pipeline over ``board`` and return the search outcome.

    A solved result has been validated; an invalid assignment raises
    ``SolutionError`` instead of being returned.
    """
    name = _resolve_strategy(strategy)
    t0 = time.time()
    log_attempt_detail(
        "Run setup",
        cells=len(board),
        total_area=total_area(board),
        max_len=max_len,
        strategy=name,
    )
    set_status("Solving")
    set_strategy(name)

    set_phase("generate")
    cells = build_board(board, max_len)
    generated = sum(len(c.candidates) for c in cells)
    log_attempt_detail("Candidates generated", candidates=generated)
    if CFG.LOG_CANDIDATES:
        _log_cells(cells)

    set_phase("prefilter")
    removed = prefilter(cells)
    alive = sum(len(c.candidates) for c in cells)
    set_board_size(len(cells), alive)
    log_attempt_detail("Prefilter finished", removed=sum(removed), remaining=alive)
    empty = [idx for idx, c in enumerate(cells) if not c.candidates]
    if empty:
        log_attempt_detail("Cells without candidates", cells=",".join(str(i) for i in empty))

    set_phase("search")
    if name == "cp_sat":
        from solver.cp_sat import solve_cp_sat

        result = solve_cp_sat(cells)
    else:
        result = search(cells, on_enter=on_enter, on_node=_progress_hook(CFG.PROGRESS_EVERY))
    result.removed = removed
    set_search_progress(result.nodes, len(result.triangles))

    if result.status == SOLVED:
        set_phase("validate")
        problems = validate_solution(result.triangles, cells, max_len)
        if problems:
            log_attempt_detail("Validation failed", problems="; ".join(problems))
            raise SolutionError("; ".join(problems))

    set_message(result.status)
    log_attempt_detail(
        "Search finished",
        status=result.status,
        nodes=result.nodes,
        duration=f"{time.time() - t0:.2f}s",
    )
    return result


__all__ = ["STRATEGIES", "solve_board", "validate_solution"]
