"""Tests for entity spawning."""

from game.subboom import config as C
from game.subboom.config import DESTROYER_WAKE_BUBBLES, EXPLOSION_BUBBLES
from game.subboom.entities import Heading, Submarine
from game.subboom.motion import move_destroyer, update_submarine
from game.subboom.spawner import (
    drop_bomb,
    spawn_explosion,
    spawn_submarine,
    tick_submarine_spawner,
)
from game.subboom.utils import Rect


class TestSubmarineSpawner:
    def test_one_submarine_every_fifteen_seconds(self, state):
        period = state.config.add_sub_frequency
        assert period == C.ADD_SUB_FREQUENCY == 15 * 30

        for _ in range(period - 1):
            assert tick_submarine_spawner(state) is None
        sub = tick_submarine_spawner(state)

        assert sub is not None
        assert state.submarines == [sub]
        assert state.sub_spawn_counter == 0

        for _ in range(period):
            tick_submarine_spawner(state)
        assert len(state.submarines) == 2

    def test_new_submarine_fields(self, state):
        for _ in range(200):
            sub = spawn_submarine(state)
            assert 0 <= sub.rect.x <= 800 - 50
            assert C.MIN_SUB_DEPTH <= sub.rect.y <= 600 - 20
            assert (sub.rect.width, sub.rect.height) == (50, 20)
            assert sub.heading is Heading.LEFT
            assert sub.missile_countdown == 10 * 30


class TestProjectiles:
    def test_bomb_dropped_at_destroyer_bottom(self, state):
        hull = state.destroyer.rect

        bomb = drop_bomb(state)

        assert bomb.rect.as_tuple() == (hull.x, hull.bottom, 10, 10)
        assert bomb.max_age == 5 * 30
        assert state.bombs == [bomb]

    def test_submarine_fires_when_countdown_runs_out(self, state):
        sub = Submarine(rect=Rect(300, 200, 50, 20), missile_countdown=2)
        state.submarines.append(sub)

        update_submarine(state, sub)
        assert state.missiles == []
        assert sub.missile_countdown == 1

        update_submarine(state, sub)
        assert len(state.missiles) == 1
        missile = state.missiles[0]
        assert (missile.rect.width, missile.rect.height) == (6, 12)
        assert missile.rect.y == sub.rect.y
        assert sub.rect.x <= missile.rect.x < sub.rect.right
        assert sub.missile_countdown == 10 * 30


class TestBubbles:
    def test_explosion_scatters_bubbles_inside_blast(self, state):
        rect = Rect(200, 300, 40, 30)

        explosion = spawn_explosion(state, rect, 60)

        assert explosion.rect == rect
        assert explosion.rect is not rect
        assert len(state.bubbles) == EXPLOSION_BUBBLES
        for bubble in state.bubbles:
            assert rect.x <= bubble.rect.x < rect.right
            assert rect.y <= bubble.rect.y < rect.bottom
            assert bubble.max_age == state.config.fps

    def test_destroyer_move_churns_wake(self, state):
        move_destroyer(state, Heading.RIGHT)

        assert len(state.bubbles) == DESTROYER_WAKE_BUBBLES
        for bubble in state.bubbles:
            assert bubble.rect.y > state.config.water_level
            assert state.destroyer.rect.x <= bubble.rect.x < state.destroyer.rect.right

    def test_submarine_leaves_one_bubble_per_tick(self, state):
        sub = Submarine(rect=Rect(300, 200, 50, 20), missile_countdown=300)
        state.submarines.append(sub)

        update_submarine(state, sub)

        assert len(state.bubbles) == 1
        bubble = state.bubbles[0]
        assert bubble.rect.x == sub.rect.right
        assert 10 <= bubble.max_age < 30
