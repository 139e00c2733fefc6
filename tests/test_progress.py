from progress import (
    reset, set_board_size, set_done, set_phase, set_search_progress,
    set_status, set_strategy, snapshot, start_timer,
)


def test_set_done_no_args_defaults_to_solved():
    reset()
    set_done()
    snap = snapshot()
    assert snap["status"] == "Solved"
    assert snap["done"] is True
    assert snap["ok"] is True


def test_set_done_failure_records_reason():
    reset()
    set_status("Solving")
    set_done(False, reason="boom")
    snap = snapshot()
    assert snap["status"] == "Error"
    assert snap["message"] == "boom"
    assert snap["done"] is True
    assert snap["ok"] is False


def test_set_done_explicit_status_keeps_ok_unknown():
    reset()
    set_status("Solving")
    set_done(reason="exhausted", status="Exhausted")
    snap = snapshot()
    assert snap["status"] == "Exhausted"
    assert snap["ok"] is None
    assert snap["message"] == "exhausted"


def test_reset_increments_run_identifier():
    reset()
    first = snapshot()["run_id"]
    reset()
    second = snapshot()["run_id"]
    assert isinstance(first, int)
    assert second == first + 1


def test_search_progress_tracks_best_depth():
    reset()
    start_timer()
    set_phase("search")
    set_strategy("backtrack")
    set_board_size(29, 400)
    set_search_progress(10, 7)
    set_search_progress(20, 3)
    snap = snapshot()
    assert snap["phase"] == "search"
    assert snap["nodes"] == 20
    assert snap["depth"] == 3
    assert snap["best_depth"] == 7
    assert snap["cells"] == 29
    assert snap["candidates"] == 400
    assert snap["elapsed"] >= 0.0
    assert "elapsed_start" not in snap
    assert snap["elapsed_str"].endswith("s")
