"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import List, Optional, TypeVar
import numpy as np

T = TypeVar("T")


class Vec2:
    """2D point/vector.

    The fluent methods (add, subtract, scale, normalize) mutate the receiver
    and return it for chaining; call copy() first to keep the original.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    def add(self, other: "Vec2") -> "Vec2":
        self.x += other.x
        self.y += other.y
        return self

    def subtract(self, other: "Vec2") -> "Vec2":
        self.x -= other.x
        self.y -= other.y
        return self

    def scale(self, mult: float) -> "Vec2":
        self.x *= mult
        self.y *= mult
        return self

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vec2":
        """Scale to unit length; a zero vector is left unchanged."""
        l = self.length()
        if l != 0:
            self.scale(1.0 / l)
        return self

    @staticmethod
    def distance(a: "Vec2", b: "Vec2") -> float:
        return math.hypot(b.x - a.x, b.y - a.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        return f"Vec2({self.x:g}, {self.y:g})"


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def circles_overlap(center_a: Vec2, radius_a: float, center_b: Vec2, radius_b: float) -> bool:
    """Check if two circles touch or overlap"""
    return Vec2.distance(center_a, center_b) <= radius_a + radius_b


def point_in_circle(point: Vec2, center: Vec2, radius: float) -> bool:
    """Check if a point lies inside (or on) a circle"""
    return Vec2.distance(point, center) <= radius


def remove_random(items: List[T], rng: random.Random) -> T:
    """Remove and return a uniformly random element of the list"""
    return items.pop(rng.randrange(len(items)))


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
