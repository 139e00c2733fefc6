from typing import List, Sequence

from models import Cell, Point, Triangle

NO_SOLUTION = "No solution"


def _num(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else f"{v:g}"


def format_point(p: Point) -> str:
    return f"({_num(p.x)},{_num(p.y)})"


def format_triangle(tri: Triangle) -> str:
    return "Printing Triangle Coordinates: " + " | ".join(format_point(p) for p in tri.vertices())


def render_solution(triangles: Sequence[Triangle]) -> str:
    """One line per triangle in cell order, followed by a blank line."""
    lines: List[str] = [format_triangle(t) for t in triangles]
    return "\n".join(lines) + "\n\n"


def format_dimensions(cell: Cell) -> str:
    rows = []
    for dim in cell.dimensions:
        shifts = " ".join(f"{sx} {sy}" for sx, sy in dim.offsets)
        rows.append(f"{dim.base} {dim.height} = {shifts}".rstrip())
    return "\n".join(rows)


def format_candidates(cell: Cell) -> str:
    return "\n".join(" | ".join(format_point(p) for p in t.vertices()) for t in cell.candidates)
