"""
Entity creation: submarines on a timer, bombs on input, missiles from
submarines, and cosmetic bubbles from motion and explosions.
"""

import logging
from typing import Optional, Union

from .config import (
    BOMB_SIZE,
    BUBBLE_SIZE,
    EXPLOSION_BUBBLES,
    DESTROYER_WAKE_BUBBLES,
    MIN_BUBBLE_AGE,
    MISSILE_SIZE,
    SUB_SIZE,
)
from .entities import Bomb, Bubble, Explosion, Heading, Missile, Status, Submarine
from .state import SimulationState
from .utils import Rect

logger = logging.getLogger(__name__)

Detonatable = Union[Submarine, Missile, Bomb]


def bubble_lifespan(state: SimulationState) -> int:
    """Random lifespan in [MIN_BUBBLE_AGE, fps)"""
    hi = max(MIN_BUBBLE_AGE + 1, state.config.fps)
    return state.rng.randrange(MIN_BUBBLE_AGE, hi)


def spawn_bubble(state: SimulationState, x: int, y: int, max_age: Optional[int] = None) -> Bubble:
    if max_age is None:
        max_age = bubble_lifespan(state)
    bubble = Bubble(rect=Rect(x, y, *BUBBLE_SIZE), max_age=max_age)
    state.bubbles.append(bubble)
    return bubble


def spawn_submarine(state: SimulationState) -> Submarine:
    cfg = state.config
    w, h = SUB_SIZE
    x = state.rng.randint(0, cfg.display_width - w)
    y = state.rng.randint(cfg.min_sub_depth, cfg.display_height - h)
    sub = Submarine(rect=Rect(x, y, w, h), missile_countdown=cfg.missile_countdown)
    state.submarines.append(sub)
    logger.info("Submarine spawned at (%d, %d); %d in play", x, y, len(state.submarines))
    return sub


def tick_submarine_spawner(state: SimulationState) -> Optional[Submarine]:
    """Advance the spawn counter; emits one submarine every add_sub_frequency ticks"""
    state.sub_spawn_counter += 1
    if state.sub_spawn_counter >= state.config.add_sub_frequency:
        state.sub_spawn_counter = 0
        return spawn_submarine(state)
    return None


def drop_bomb(state: SimulationState) -> Bomb:
    hull = state.destroyer.rect
    bomb = Bomb(rect=Rect(hull.x, hull.bottom, *BOMB_SIZE), max_age=state.config.bomb_max_age)
    state.bombs.append(bomb)
    return bomb


def fire_missile(state: SimulationState, sub: Submarine) -> Missile:
    w, h = MISSILE_SIZE
    missile = Missile(rect=Rect(sub.rect.center_x - w // 2, sub.rect.y, w, h))
    state.missiles.append(missile)
    return missile


def spawn_explosion(state: SimulationState, rect: Rect, max_age: int) -> Explosion:
    """New blast at a copy of rect, scattering bubbles inside it"""
    explosion = Explosion(rect=rect.copy(), max_age=max_age)
    state.explosions.append(explosion)
    rng = state.rng
    for _ in range(EXPLOSION_BUBBLES):
        spawn_bubble(
            state,
            rng.randint(rect.x, rect.right - 1),
            rng.randint(rect.y, rect.bottom - 1),
            max_age=state.config.explosion_bubble_age,
        )
    return explosion


def detonate(state: SimulationState, entity: Detonatable, max_age: int) -> Explosion:
    """Turn an entity into an explosion at its current rect and mark it destroyed"""
    explosion = spawn_explosion(state, entity.rect, max_age)
    entity.status = Status.DESTROYED
    return explosion


def wake_bubbles(state: SimulationState, heading: Heading):
    """Churn behind the destroyer's stern, just under the surface"""
    hull = state.destroyer.rect
    water = state.config.water_level
    stern = hull.right - 20 if heading is Heading.LEFT else hull.x
    rng = state.rng
    for _ in range(DESTROYER_WAKE_BUBBLES):
        spawn_bubble(state, rng.randint(stern, stern + 19), rng.randint(water + 1, water + 6))


def sub_bubble(state: SimulationState, sub: Submarine) -> Bubble:
    stern = sub.rect.right if sub.heading is Heading.LEFT else sub.rect.x - 1
    y = state.rng.randint(sub.rect.y, sub.rect.bottom - 1)
    return spawn_bubble(state, stern, y)


def trail_bubble(state: SimulationState, projectile: Union[Missile, Bomb]) -> Bubble:
    """Bubble at the tail: below a rising missile, above a sinking bomb"""
    rect = projectile.rect
    y = rect.bottom if isinstance(projectile, Missile) else rect.y - 1
    return spawn_bubble(state, rect.center_x, y)
