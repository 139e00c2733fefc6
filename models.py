from dataclasses import dataclass, field
from typing import List, Tuple

SOLVED = "solved"
EXHAUSTED = "exhausted"
TIMEOUT = "timeout"


class BoardError(ValueError):
    """A cell definition cannot exist on the board."""


class SolutionError(RuntimeError):
    """A search produced an assignment that fails validation."""


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Dimension:
    base: int
    height: int
    offsets: Tuple[Tuple[int, int], ...] = ()


@dataclass(frozen=True)
class Triangle:
    # ``a`` is the right-angle vertex.
    a: Point
    b: Point
    c: Point

    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    def edges(self) -> Tuple[Tuple[Point, Point], ...]:
        return ((self.a, self.b), (self.a, self.c), (self.b, self.c))

    def bbox(self) -> Tuple[float, float, float, float]:
        xs = (self.a.x, self.b.x, self.c.x)
        ys = (self.a.y, self.b.y, self.c.y)
        return (min(xs), min(ys), max(xs), max(ys))

    def area(self) -> float:
        from geometry import triangle_area
        return triangle_area(self.a, self.b, self.c)


@dataclass
class Cell:
    area: int
    x: int
    y: int
    dimensions: List[Dimension] = field(default_factory=list)
    candidates: List[Triangle] = field(default_factory=list)

    def probe_square(self) -> Tuple[Point, Point, Point, Point]:
        """Corners of the 1×1 probe square, counter-clockwise from the anchor."""
        return (
            Point(self.x, self.y),
            Point(self.x + 1, self.y),
            Point(self.x + 1, self.y + 1),
            Point(self.x, self.y + 1),
        )

    def probe_edges(self) -> Tuple[Tuple[Point, Point], ...]:
        a, b, c, d = self.probe_square()
        return ((a, b), (b, c), (c, d), (d, a))

    def probe_diagonals(self) -> Tuple[Tuple[Point, Point], ...]:
        a, b, c, d = self.probe_square()
        return ((a, c), (b, d))


@dataclass
class SearchResult:
    status: str
    triangles: Tuple[Triangle, ...] = ()
    nodes: int = 0
    elapsed: float = 0.0
    strategy: str = "backtrack"
    removed: Tuple[int, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == SOLVED

    def elapsed_str(self) -> str:
        return f"{int(self.elapsed // 60)}m {int(self.elapsed % 60)}s"
