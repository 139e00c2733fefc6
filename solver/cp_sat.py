import time
from typing import List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model as _cp

from config import CFG
from geometry import bboxes_overlap, triangles_compatible
from models import EXHAUSTED, SOLVED, TIMEOUT, Cell, SearchResult, Triangle

# ---------------- helpers ----------------

def conflict_pairs(cells: Sequence[Cell]) -> List[Tuple[int, int, int, int]]:
    """Every (i, k, j, m) with i < j where candidate k of cell i and m of cell j clash."""
    boxes = [[t.bbox() for t in cell.candidates] for cell in cells]
    out: List[Tuple[int, int, int, int]] = []
    for i in range(len(cells)):
        for j in range(i + 1, len(cells)):
            for k, ti in enumerate(cells[i].candidates):
                bi = boxes[i][k]
                for m, tj in enumerate(cells[j].candidates):
                    if not bboxes_overlap(bi, boxes[j][m]):
                        continue
                    if not triangles_compatible(ti, tj):
                        out.append((i, k, j, m))
    return out


def solve_cp_sat(
    cells: Sequence[Cell],
    *,
    max_seconds: Optional[float] = None,
    workers: Optional[int] = None,
) -> SearchResult:
    """
    Pick one candidate per cell with OR-Tools CP-SAT.

    Returns a ``SearchResult`` whose status is ``solved``, ``exhausted``
    (proven infeasible) or ``timeout`` (no verdict inside the time limit).
    The chosen assignment is not necessarily the first one the ordered
    backtracking search would find.
    """
    t0 = time.time()
    if any(not cell.candidates for cell in cells):
        return SearchResult(EXHAUSTED, (), elapsed=time.time() - t0, strategy="cp_sat")

    m = _cp.CpModel()
    p = [[m.NewBoolVar(f"p_{i}_{k}") for k in range(len(cell.candidates))] for i, cell in enumerate(cells)]

    # exactly one placement per cell
    for i in range(len(cells)):
        m.Add(sum(p[i]) == 1)

    # no two clashing placements together
    conflicts = conflict_pairs(cells)
    for i, k, j, mm in conflicts:
        m.AddBoolOr([p[i][k].Not(), p[j][mm].Not()])

    seconds = float(CFG.CP_MAX_SECONDS if max_seconds is None else max_seconds)
    solver = _cp.CpSolver()
    solver.parameters.max_time_in_seconds = seconds
    solver.parameters.max_memory_in_mb = int(getattr(CFG, "MAX_MEMORY_MB", 2048))
    solver.parameters.num_search_workers = int(CFG.WORKERS if workers is None else workers)
    solver.parameters.log_search_progress = False

    status = solver.Solve(m)
    elapsed = time.time() - t0
    branches = int(solver.NumBranches())

    if status in (_cp.OPTIMAL, _cp.FEASIBLE):
        chosen: List[Triangle] = []
        for i, cell in enumerate(cells):
            picks = [k for k in range(len(cell.candidates)) if solver.Value(p[i][k])]
            chosen.append(cell.candidates[picks[0]])
        return SearchResult(SOLVED, tuple(chosen), nodes=branches, elapsed=elapsed, strategy="cp_sat")
    if status == _cp.INFEASIBLE:
        return SearchResult(EXHAUSTED, (), nodes=branches, elapsed=elapsed, strategy="cp_sat")
    return SearchResult(TIMEOUT, (), nodes=branches, elapsed=elapsed, strategy="cp_sat")


__all__ = ["conflict_pairs", "solve_cp_sat"]
