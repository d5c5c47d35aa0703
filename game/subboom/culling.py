"""
End-of-tick removal of expired and destroyed entities (mark-and-compact)
"""

from typing import Callable, List, TypeVar

from .state import SimulationState

T = TypeVar("T")


def compact(items: List[T], keep: Callable[[T], bool]) -> int:
    """Drop items failing `keep` in place, preserving order; returns removed count"""
    before = len(items)
    items[:] = [item for item in items if keep(item)]
    return before - len(items)


def cull(state: SimulationState) -> int:
    water = state.config.water_level
    removed = compact(state.submarines, lambda s: not s.destroyed)
    removed += compact(state.bombs, lambda b: not b.destroyed and b.age <= b.max_age)
    removed += compact(state.missiles, lambda m: not m.destroyed and m.rect.y > water)
    removed += compact(state.bubbles, lambda b: b.age <= b.max_age and b.rect.y > water)
    removed += compact(state.explosions, lambda e: e.age <= e.max_age)
    return removed
