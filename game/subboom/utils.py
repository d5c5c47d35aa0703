"""
Geometry helpers for the simulation
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Optional


def clamp(x: int, lo: int, hi: int) -> int:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Independent PRNG for one simulation; unseeded when seed is None"""
    return random.Random(seed)


@dataclass
class Rect:
    """Axis-aligned integer rectangle, y grows downward"""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @right.setter
    def right(self, value: int):
        self.x = value - self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center_x(self) -> int:
        return self.x + self.width // 2

    def intersects(self, other: Rect) -> bool:
        """True when the overlap has positive area; shared edges don't count"""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def copy(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def as_tuple(self):
        return self.x, self.y, self.width, self.height
