# app.py — command-line entry point; prints the first solution found
from __future__ import annotations

import os
import sys
from typing import Optional

from config import CFG
from io_files import write_coords
from models import EXHAUSTED, SOLVED
from progress import log_attempt_detail, reset, set_done, start_timer
from render import NO_SOLUTION, render_solution
from solver.orchestrator import solve_board

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

EXIT_OK = 0
EXIT_TIMEOUT = 2


def _print_depth(depth: int) -> None:
    print("-" * depth + str(depth))


def main(strategy: Optional[str] = None) -> int:
    reset()
    start_timer()
    on_enter = _print_depth if CFG.TRACE_DEPTH else None
    try:
        result = solve_board(strategy=strategy, on_enter=on_enter)
    except Exception as exc:
        log_attempt_detail("Run crashed", error=f"{type(exc).__name__}: {exc}")
        set_done(False, reason=f"{type(exc).__name__}: {exc}")
        raise

    if result.status == SOLVED:
        sys.stdout.write(render_solution(result.triangles))
        set_done(True, reason=f"solved in {result.elapsed_str()}")
    else:
        print(NO_SOLUTION)
        set_done(reason=result.status, status="Exhausted" if result.status == EXHAUSTED else "Timeout")
    sys.stdout.flush()

    path = write_coords(result.triangles, BASE_DIR)
    if path:
        log_attempt_detail("Coordinates written", path=path)

    return EXIT_OK if result.status in (SOLVED, EXHAUSTED) else EXIT_TIMEOUT


if __name__ == "__main__":
    sys.exit(main())
