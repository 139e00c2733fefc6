from __future__ import annotations

import logging
import os
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional

# ------------------------------
# Thread-safe global progress state
# ------------------------------

PROGRESS_LOCK = threading.Lock()


def _log_file_path() -> Optional[Path]:
    configured = os.environ.get("TRI_LOG_FILE")
    if configured is not None:
        return Path(configured) if configured.strip() else None
    return Path(__file__).resolve().parent / "logs" / "solver_attempts.log"


def _init_logger() -> logging.Logger:
    logger = logging.getLogger("solver.attempt_log")
    if logger.handlers:
        return logger

    log_path = _log_file_path()
    if log_path is None:
        return logger
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    except OSError:
        # An unwritable log location must not stop the solver.
        logger.handlers.clear()
    return logger


ATTEMPT_LOGGER = _init_logger()


def _log_enabled() -> bool:
    return bool(ATTEMPT_LOGGER.handlers)


def _fmt_seconds(seconds: Optional[float]) -> Optional[str]:
    if seconds is None:
        return None
    try:
        return f"{float(seconds):.2f}s"
    except (TypeError, ValueError):
        return None


def _emit_log(event: str, **fields: Any) -> None:
    if not _log_enabled():
        return
    extras = [
        f"{key}={value}"
        for key, value in fields.items()
        if value is not None and value != ""
    ]
    try:
        if extras:
            ATTEMPT_LOGGER.info("%s | %s", event, " ".join(extras))
        else:
            ATTEMPT_LOGGER.info("%s", event)
    except Exception:
        # Logging failures must never bubble back to callers.
        pass


def log_attempt_detail(event: str, **fields: Any) -> None:
    _emit_log(event, **fields)


LOG_STATE: Dict[str, Any] = {
    "run_start": None,
    "phase": "",
    "phase_start": None,
}


def _log_phase_transition_locked(new_phase: str) -> None:
    prev_phase = LOG_STATE.get("phase") or ""
    if new_phase == prev_phase:
        return
    now = _now()
    if prev_phase and LOG_STATE.get("phase_start"):
        duration = max(0.0, now - float(LOG_STATE["phase_start"]))
        _emit_log(
            "Phase finished",
            phase=prev_phase,
            duration=_fmt_seconds(duration),
        )
    LOG_STATE["phase"] = new_phase
    LOG_STATE["phase_start"] = now
    if new_phase:
        _emit_log("Phase started", phase=new_phase)

# Single source of truth for progress snapshots
PROGRESS: Dict[str, Any] = {
    "status": "Idle",          # Idle | Solving | Solved | Exhausted | Error
    "phase": "",               # generate | prefilter | search | report
    "strategy": "",            # backtrack | cp_sat
    "cells": 0,                # cells on the board
    "candidates": 0,           # candidates alive for the search
    "depth": 0,                # current search depth
    "best_depth": 0,           # deepest partial assignment so far
    "nodes": 0,                # placements tried
    "elapsed_start": None,     # t0 (float) when solving started
    "elapsed": 0.0,            # seconds snapshot
    "message": "",             # optional note
    "done": False,             # run completed
    "ok": None,                # success flag if known
    "run_id": 0,               # monotonically increasing identifier
}

# ------------------------------
# Helpers
# ------------------------------

def _now() -> float:
    return time.time()

def _fmt_elapsed(seconds: float) -> str:
    seconds = max(0.0, float(seconds))
    if seconds < 60:
        return f"{int(seconds)}s"
    m, s = divmod(int(seconds), 60)
    if m < 60:
        return f"{m}m {s}s"
    h, m = divmod(m, 60)
    return f"{h}h {m}m"

def reset() -> None:
    with PROGRESS_LOCK:
        new_run_id = int(PROGRESS.get("run_id", 0)) + 1
        PROGRESS.update({
            "status": "Idle",
            "phase": "",
            "strategy": "",
            "cells": 0,
            "candidates": 0,
            "depth": 0,
            "best_depth": 0,
            "nodes": 0,
            "elapsed_start": None,
            "elapsed": 0.0,
            "message": "",
            "done": False,
            "ok": None,
            "run_id": new_run_id,
        })
        LOG_STATE.update({
            "phase": "",
            "phase_start": None,
            "run_start": None,
        })
        _emit_log("Progress reset")

def start_timer() -> None:
    with PROGRESS_LOCK:
        now = _now()
        PROGRESS["elapsed_start"] = now
        PROGRESS["elapsed"] = 0.0
        LOG_STATE["run_start"] = now
        _emit_log("Run timer started")

def _touch_elapsed_locked() -> None:
    t0 = PROGRESS.get("elapsed_start")
    if t0 is not None:
        PROGRESS["elapsed"] = _now() - float(t0)

# ------------------------------
# Setters
# ------------------------------

def set_status(v: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["status"] = str(v)

def set_phase(v: Any) -> None:
    with PROGRESS_LOCK:
        phase_str = "" if v is None else str(v)
        PROGRESS["phase"] = phase_str
        _log_phase_transition_locked(phase_str)

def set_strategy(v: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["strategy"] = "" if v is None else str(v)

def set_board_size(cells: int, candidates: int) -> None:
    with PROGRESS_LOCK:
        PROGRESS["cells"] = max(0, int(cells))
        PROGRESS["candidates"] = max(0, int(candidates))

def set_search_progress(nodes: int, depth: int) -> None:
    with PROGRESS_LOCK:
        PROGRESS["nodes"] = max(0, int(nodes))
        PROGRESS["depth"] = max(0, int(depth))
        if PROGRESS["depth"] > PROGRESS["best_depth"]:
            PROGRESS["best_depth"] = PROGRESS["depth"]
        _touch_elapsed_locked()

def set_message(msg: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["message"] = "" if msg is None else str(msg)

def set_done(ok: Optional[bool] = None, *, reason: Any = None, status: Optional[str] = None) -> None:
    """Mark the run complete.

    ``ok`` picks the final status (``Solved`` / ``Error``) when given; when
    omitted the current status is kept, defaulting to ``Solved`` from an idle
    state. An explicit ``status`` (e.g. ``Exhausted``) wins over both.
    ``reason`` is surfaced through the ``message`` field.
    """
    with PROGRESS_LOCK:
        _touch_elapsed_locked()
        now = _now()
        if ok is not None:
            PROGRESS["status"] = "Solved" if ok else "Error"
            PROGRESS["ok"] = bool(ok)
        elif PROGRESS.get("status") in ("", "Idle", None):
            PROGRESS["status"] = "Solved"
            PROGRESS["ok"] = True
        if status is not None:
            PROGRESS["status"] = str(status)
        if reason is not None:
            PROGRESS["message"] = str(reason)
        PROGRESS["done"] = True
        run_start = LOG_STATE.get("run_start")
        total = max(0.0, now - float(run_start)) if isinstance(run_start, (int, float)) else None
        _log_phase_transition_locked("")
        LOG_STATE["run_start"] = None
        _emit_log(
            "Run finished",
            status=PROGRESS.get("status"),
            ok=PROGRESS.get("ok"),
            duration=_fmt_seconds(total),
            nodes=PROGRESS.get("nodes"),
            best_depth=PROGRESS.get("best_depth"),
            message=PROGRESS.get("message"),
        )

# ------------------------------
# Snapshots
# ------------------------------

def snapshot() -> Dict[str, Any]:
    with PROGRESS_LOCK:
        _touch_elapsed_locked()
        snap = {k: v for k, v in PROGRESS.items() if k != "elapsed_start"}
        snap["elapsed_str"] = _fmt_elapsed(PROGRESS["elapsed"])
        return snap
