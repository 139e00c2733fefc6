import os

# ======= Search strategy =======
# "backtrack" runs the ordered depth-first search; "cp_sat" hands the
# pre-filtered candidates to OR-Tools.
STRATEGY = os.getenv("TRI_STRATEGY", "backtrack").strip().lower() or "backtrack"

# ======= Instrumentation =======
TRACE_DEPTH    = int(os.getenv("TRI_TRACE_DEPTH", "1")) != 0
PROGRESS_EVERY = int(os.getenv("TRI_PROGRESS_EVERY", "2000"))
LOG_CANDIDATES = int(os.getenv("TRI_LOG_CANDIDATES", "0")) != 0

# ======= CP-SAT caps =======
CP_MAX_SECONDS = float(os.getenv("TRI_CP_MAX_SECONDS", "120"))
WORKERS        = int(os.getenv("TRI_WORKERS", "1"))
MAX_MEMORY_MB  = int(os.getenv("TRI_MAX_MEMORY_MB", "2048"))

# ======= Output names =======
# Empty means the solution only goes to stdout.
COORDS_OUT = os.getenv("TRI_COORDS_OUT", "")

class CFG:
    STRATEGY = STRATEGY

    TRACE_DEPTH    = TRACE_DEPTH
    PROGRESS_EVERY = PROGRESS_EVERY
    LOG_CANDIDATES = LOG_CANDIDATES

    CP_MAX_SECONDS = CP_MAX_SECONDS
    WORKERS        = WORKERS
    MAX_MEMORY_MB  = MAX_MEMORY_MB

    COORDS_OUT = COORDS_OUT

__all__ = ["CFG"]
