from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, TypeVar
import math
import random

T = TypeVar("T")


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def finite_or(v: float, default: float = 0.0) -> float:
    """`v` as a float, or `default` when it is NaN or infinite."""
    v = float(v)
    return v if math.isfinite(v) else default


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


@dataclass
class Bounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def bounds_overlap(a: Bounds, b: Bounds) -> bool:
    """Strict AABB test: boxes that only touch along an edge do not overlap."""
    return (
        a.x < b.right
        and a.right > b.x
        and a.y < b.bottom
        and a.bottom > b.y
    )


def random_int(rng: random.Random, lo: int, hi: int) -> int:
    # inclusive on both ends
    return rng.randint(lo, hi)


def random_choice(rng: random.Random, items: Sequence[T]) -> T:
    if not items:
        raise ValueError("random_choice() needs a non-empty sequence")
    return items[rng.randrange(len(items))]


def format_number(num: int) -> str:
    return f"{int(num):,}"
