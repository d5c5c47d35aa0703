"""
Per-tick motion and lifecycle updates
"""

import random
from typing import Iterable

from .config import (
    BOMB_SPEED,
    DESTROYER_MIN_RIGHT,
    EXPLOSION_GROWTH,
    MISSILE_SPEED,
    SUB_MIN_RIGHT,
    SUB_SPEED,
)
from .entities import Bomb, Bubble, Explosion, Heading, Missile, Submarine
from .spawner import detonate, fire_missile, sub_bubble, trail_bubble, wake_bubbles
from .state import SimulationState
from .utils import clamp


def move_destroyer(state: SimulationState, heading: Heading):
    """One move input: shift by destroyer_speed, right edge kept in [100, width]"""
    hull = state.destroyer.rect
    right = hull.right + heading.value * state.config.destroyer_speed
    hull.right = clamp(right, DESTROYER_MIN_RIGHT, state.config.display_width)
    wake_bubbles(state, heading)


def move_submarine(sub: Submarine, display_width: int):
    """Patrol one unit; the heading flips only on the tick the right edge clamps"""
    rect = sub.rect
    rect.x += sub.heading.value * SUB_SPEED
    if rect.right >= display_width:
        rect.right = display_width
        sub.heading = Heading.LEFT
    elif rect.right <= SUB_MIN_RIGHT:
        rect.right = SUB_MIN_RIGHT
        sub.heading = Heading.RIGHT


def update_submarine(state: SimulationState, sub: Submarine):
    if sub.destroyed:
        return
    move_submarine(sub, state.config.display_width)
    sub.missile_countdown -= 1
    if sub.missile_countdown <= 0:
        fire_missile(state, sub)
        sub.missile_countdown = state.config.missile_countdown
    sub_bubble(state, sub)


def update_missile(state: SimulationState, missile: Missile):
    if missile.destroyed:
        return
    water = state.config.water_level
    missile.rect.y -= MISSILE_SPEED
    if missile.rect.y <= water:
        missile.rect.y = water
        detonate(state, missile, state.config.missile_explosion_age)
        return
    trail_bubble(state, missile)


def update_bomb(state: SimulationState, bomb: Bomb):
    if bomb.destroyed:
        return
    bomb.age += 1
    if bomb.age > bomb.max_age:
        detonate(state, bomb, state.config.bomb_explosion_age)
        return
    bomb.rect.y += BOMB_SPEED
    trail_bubble(state, bomb)


def update_bubble(bubble: Bubble, rng: random.Random):
    bubble.age += 1
    bubble.rect.x += rng.choice((-1, 0, 1))
    bubble.rect.y += rng.choice((-1, 0))


def update_explosion(explosion: Explosion):
    """Grow one unit outward on every side while the blast is alive"""
    explosion.age += 1
    if explosion.age > explosion.max_age:
        return
    rect = explosion.rect
    rect.x -= EXPLOSION_GROWTH
    rect.y -= EXPLOSION_GROWTH
    rect.width += 2 * EXPLOSION_GROWTH
    rect.height += 2 * EXPLOSION_GROWTH


def update_entities(state: SimulationState, explosions: Iterable[Explosion]):
    """
    Advance every live entity one tick. Only the given explosions grow;
    entities spawned during this pass start moving next tick.
    """
    for bubble in list(state.bubbles):
        update_bubble(bubble, state.rng)
    for explosion in explosions:
        update_explosion(explosion)
    for missile in list(state.missiles):
        update_missile(state, missile)
    for bomb in list(state.bombs):
        update_bomb(state, bomb)
    for sub in list(state.submarines):
        update_submarine(state, sub)
