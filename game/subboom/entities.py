"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum

from .utils import Rect


class Heading(Enum):
    LEFT = -1
    RIGHT = 1


class Status(Enum):
    """Lifecycle tag shared by everything an explosion can destroy"""
    ALIVE = "alive"
    PENDING_DESTRUCTION = "pending"  # hit this tick, explosion not spawned yet
    DESTROYED = "destroyed"


@dataclass
class Destroyer:
    """The player's ship on the surface"""
    rect: Rect


@dataclass
class Submarine:
    """Enemy that patrols underwater and fires missiles upward"""
    rect: Rect
    missile_countdown: int
    heading: Heading = Heading.LEFT
    status: Status = Status.ALIVE

    @property
    def destroyed(self) -> bool:
        return self.status is not Status.ALIVE


@dataclass
class Bomb:
    """Depth charge dropped by the destroyer"""
    rect: Rect
    max_age: int
    age: int = 0
    status: Status = Status.ALIVE

    @property
    def destroyed(self) -> bool:
        return self.status is not Status.ALIVE


@dataclass
class Missile:
    """Projectile rising from a submarine towards the surface"""
    rect: Rect
    status: Status = Status.ALIVE

    @property
    def destroyed(self) -> bool:
        return self.status is not Status.ALIVE


@dataclass
class Bubble:
    """Cosmetic 1x1 particle"""
    rect: Rect
    max_age: int
    age: int = 0


@dataclass
class Explosion:
    """Growing blast; its rect is the blast rectangle used for collisions"""
    rect: Rect
    max_age: int
    age: int = 0
