import pytest

pytest.importorskip("ortools")

from board import BOARD_MAX_LEN, FIXED_BOARD, build_board
from models import EXHAUSTED, SOLVED
from solver.cp_sat import conflict_pairs, solve_cp_sat
from solver.orchestrator import validate_solution
from solver.prefilter import prefilter


def _prepared(specs, max_len=BOARD_MAX_LEN):
    cells = build_board(specs, max_len)
    prefilter(cells)
    return cells


def test_conflict_pairs_flags_identical_placements():
    cells = _prepared([(2, 0, 0), (2, 0, 0)])
    assert conflict_pairs(cells) == [(0, 0, 1, 0)]


def test_cp_sat_solves_small_board():
    cells = _prepared([(2, 0, 0), (2, 1, 1)])
    result = solve_cp_sat(cells, max_seconds=10.0)
    assert result.status == SOLVED
    assert result.strategy == "cp_sat"
    assert validate_solution(result.triangles, cells) == []


def test_cp_sat_proves_infeasible_board():
    cells = _prepared([(2, 0, 0), (2, 0, 0)])
    result = solve_cp_sat(cells, max_seconds=10.0)
    assert result.status == EXHAUSTED
    assert result.triangles == ()


def test_cp_sat_short_circuits_empty_cell():
    cells = _prepared([(2, 0, 0), (1, 4, 4)])
    assert solve_cp_sat(cells).status == EXHAUSTED


def test_cp_sat_solves_fixed_board():
    cells = _prepared(FIXED_BOARD)
    result = solve_cp_sat(cells, max_seconds=300.0, workers=4)
    assert result.status == SOLVED
    assert len(result.triangles) == 29
    assert sum(len(t.vertices()) for t in result.triangles) == 87
    assert validate_solution(result.triangles, cells) == []
