"""Planar predicates used by candidate generation, pre-filtering and search.

Everything here is pure. Touching is never treated as crossing: two segments
that share an endpoint, or where an endpoint of one lies on the other, do not
intersect. Point-in-triangle is boundary-inclusive.
"""

from __future__ import annotations

from typing import Tuple

from models import Point, Triangle

COLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2

BBox = Tuple[float, float, float, float]


def orientation(p: Point, q: Point, r: Point) -> int:
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return COLINEAR
    return CLOCKWISE if val > 0 else COUNTERCLOCKWISE


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Return ``True`` when ``q`` falls inside the bounding box of ``p``–``r``.

    Meaningful only for colinear points. ``segments_intersect`` does not call
    it because colinear contact never counts as a crossing; it stays public
    for callers asking whether a colinear point lies on a segment.
    """
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def segments_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """Transversal crossing of two segments.

    Any colinear triple means the segments at most touch or overlap along a
    line, which is allowed between triangles.
    """
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    if o1 == COLINEAR or o2 == COLINEAR or o3 == COLINEAR or o4 == COLINEAR:
        return False
    return o1 != o2 and o3 != o4


def sign(p1: Point, p2: Point, p3: Point) -> float:
    return (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)


def point_in_triangle(pt: Point, v1: Point, v2: Point, v3: Point) -> bool:
    d1 = sign(pt, v1, v2)
    d2 = sign(pt, v2, v3)
    d3 = sign(pt, v3, v1)

    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def triangle_contains_triangle(outer: Triangle, inner: Triangle) -> bool:
    a, b, c = outer.vertices()
    return all(point_in_triangle(v, a, b, c) for v in inner.vertices())


def triangle_area(a: Point, b: Point, c: Point) -> float:
    return abs((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2.0


def edges_cross(t1: Triangle, t2: Triangle) -> bool:
    for p, q in t1.edges():
        for r, s in t2.edges():
            if segments_intersect(p, q, r, s):
                return True
    return False


def bboxes_overlap(b1: BBox, b2: BBox) -> bool:
    # Boxes that only share a side cannot host a crossing or a containment.
    return not (b1[2] <= b2[0] or b2[2] <= b1[0] or b1[3] <= b2[1] or b2[3] <= b1[1])


def triangles_compatible(t1: Triangle, t2: Triangle) -> bool:
    if not bboxes_overlap(t1.bbox(), t2.bbox()):
        return True
    if edges_cross(t1, t2):
        return False
    if triangle_contains_triangle(t1, t2) or triangle_contains_triangle(t2, t1):
        return False
    return True


__all__ = [
    "COLINEAR",
    "CLOCKWISE",
    "COUNTERCLOCKWISE",
    "orientation",
    "on_segment",
    "segments_intersect",
    "sign",
    "point_in_triangle",
    "triangle_contains_triangle",
    "triangle_area",
    "edges_cross",
    "bboxes_overlap",
    "triangles_compatible",
]
