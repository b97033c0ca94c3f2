"""
Digital space Z^n and the little point algebra needed by topology.

Points and vectors are plain tuples of ints, see localtypes.
"""

from dataclasses import dataclass

from localtypes import Point, Vector


def _check_dimensions(p: tuple[int, ...], q: tuple[int, ...]) -> None:
    if len(p) != len(q):
        raise ValueError(f"Dimension mismatch between {p} and {q}")


def translate(p: Point, v: Vector) -> Point:
    _check_dimensions(p, v)
    return tuple(a + b for a, b in zip(p, v))


def difference(p: Point, q: Point) -> Vector:
    """Vector going from q to p."""
    _check_dimensions(p, q)
    return tuple(a - b for a, b in zip(p, q))


def norm1(v: Vector) -> int:
    return sum(abs(c) for c in v)


def norm_inf(v: Vector) -> int:
    return max((abs(c) for c in v), default=0)


@dataclass(frozen=True)
class SpaceND:
    """The digital space Z^dimension."""

    dimension: int

    def __post_init__(self):
        if self.dimension < 1:
            raise ValueError(f"A digital space has dimension >= 1, got {self.dimension}")

    def origin(self) -> Point:
        return (0,) * self.dimension

    def is_point(self, p: object) -> bool:
        return (
            isinstance(p, tuple)
            and len(p) == self.dimension
            and all(isinstance(c, int) for c in p)
        )

    def __str__(self) -> str:
        return f"[SpaceND dim={self.dimension}]"

