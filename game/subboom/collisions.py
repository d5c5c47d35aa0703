"""
Explosion-mediated collision resolution.

Only explosions that were active when the tick started are tested, so a
blast spawned this tick cannot chain into another hit until the next tick.
Hits are tagged PENDING_DESTRUCTION first and resolved into explosions in a
single pass per entity kind.
"""

import logging
from typing import Iterable, List, Sequence, Tuple

from .entities import Destroyer, Explosion, Status
from .spawner import Detonatable, detonate
from .state import SimulationState

logger = logging.getLogger(__name__)


def hit_by_explosion(entity, explosions: Iterable[Explosion]) -> bool:
    return any(entity.rect.intersects(e.rect) for e in explosions)


def destroyer_hit(destroyer: Destroyer, explosions: Iterable[Explosion]) -> bool:
    return hit_by_explosion(destroyer, explosions)


def mark_hits(entities: Iterable[Detonatable], explosions: Sequence[Explosion]) -> int:
    """Tag live entities caught in a blast; returns how many were tagged"""
    hits = 0
    for entity in entities:
        if entity.status is Status.ALIVE and hit_by_explosion(entity, explosions):
            entity.status = Status.PENDING_DESTRUCTION
            hits += 1
    return hits


def resolve_pending(state: SimulationState, entities: Iterable[Detonatable], max_age: int) -> List[Explosion]:
    """One explosion per pending entity, at the rect it had when hit"""
    return [
        detonate(state, entity, max_age)
        for entity in entities
        if entity.status is Status.PENDING_DESTRUCTION
    ]


def resolve_collisions(state: SimulationState, active: Sequence[Explosion]) -> bool:
    """
    Run the collision pass against the explosions in `active`.
    Returns True when the destroyer was caught, which ends the round before
    anything else is resolved.
    """
    if destroyer_hit(state.destroyer, active):
        logger.info("Destroyer caught in an explosion at tick %d", state.tick)
        return True

    cfg = state.config
    kinds: Tuple[Tuple[list, int], ...] = (
        (state.submarines, cfg.sub_explosion_age),
        (state.missiles, cfg.missile_explosion_age),
        (state.bombs, cfg.bomb_explosion_age),
    )
    for entities, max_age in kinds:
        mark_hits(entities, active)
        resolve_pending(state, list(entities), max_age)
    return False
