import pytest

from board import BOARD_MAX_LEN, FIXED_BOARD, build_board
from geometry import point_in_triangle, triangle_area
from models import BoardError, Dimension, Point, Triangle
from solver.candidates import build_cell, create_dimensions, orient, valid_offsets


def T(a, b, c):
    return Triangle(Point(*a), Point(*b), Point(*c))


def test_area_two_yields_single_square_leg_dimension():
    dims = create_dimensions(2)
    assert [(d.base, d.height) for d in dims] == [(2, 2)]
    assert dims[0].offsets == ((0, 0),)
    # a height-1 triangle cannot hold the unit square, so (4, 1) never shows up
    assert valid_offsets(4, 1) == ()


def test_area_one_has_no_dimension():
    assert create_dimensions(1) == []


def test_prime_area_factors_only_through_two():
    assert [(d.base, d.height) for d in create_dimensions(7)] == [(2, 7), (7, 2)]


def test_dimensions_ascend_by_base():
    bases = [d.base for d in create_dimensions(20)]
    assert bases == [2, 4, 5, 8, 10, 20]


@pytest.mark.parametrize("area", range(1, 25))
def test_dimensions_multiply_to_twice_the_area(area):
    for dim in create_dimensions(area):
        assert dim.base * dim.height == 2 * area
        assert dim.base >= 2
        assert dim.height >= 2


def test_valid_offsets_scan_columns_then_rows():
    assert valid_offsets(4, 4) == ((0, 0), (0, -1), (0, -2), (-1, 0), (-1, -1), (-2, 0))
    assert valid_offsets(2, 4) == ((0, 0), (0, -1))


def test_cell_at_three_zero_keeps_in_bounds_rotations():
    cell = build_cell(2, 3, 0)
    assert cell.candidates == [
        T((3, 0), (5, 0), (3, 2)),
        T((4, 0), (4, 2), (2, 0)),
    ]


def test_candidates_are_rotation_major():
    cell = build_cell(2, 1, 1)
    assert cell.candidates == [
        T((1, 1), (3, 1), (1, 3)),   # upright
        T((1, 2), (1, 0), (3, 2)),   # right
        T((2, 2), (0, 2), (2, 0)),   # down
        T((2, 1), (2, 3), (0, 1)),   # left
    ]


def test_orient_rejects_unknown_rotation():
    with pytest.raises(ValueError):
        orient(0, 0, Dimension(2, 2, ((0, 0),)), (0, 0), "sideways")


def test_fixed_board_candidates_hold_every_invariant():
    cells = build_board(FIXED_BOARD, BOARD_MAX_LEN)
    assert len(cells) == 29
    for cell in cells:
        assert cell.candidates, f"cell ({cell.x},{cell.y}) has no candidates"
        for tri in cell.candidates:
            for v in tri.vertices():
                assert 0 <= v.x <= BOARD_MAX_LEN and 0 <= v.y <= BOARD_MAX_LEN
            assert triangle_area(tri.a, tri.b, tri.c) == cell.area
            assert tri.area() == cell.area
            for corner in cell.probe_square():
                assert point_in_triangle(corner, tri.a, tri.b, tri.c)


def test_smaller_board_bound_clips_candidates():
    wide = build_cell(6, 2, 2, max_len=17)
    narrow = build_cell(6, 2, 2, max_len=4)
    assert len(narrow.candidates) < len(wide.candidates)
    assert all(v.x <= 4 and v.y <= 4 for t in narrow.candidates for v in t.vertices())


@pytest.mark.parametrize("area, x, y", [(0, 1, 1), (-3, 1, 1), (2, 17, 0), (2, 0, -1)])
def test_invalid_cells_raise_board_error(area, x, y):
    with pytest.raises(BoardError):
        build_cell(area, x, y)
