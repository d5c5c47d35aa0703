"""Tests for end-of-tick culling."""

from game.subboom.culling import compact, cull
from game.subboom.entities import Bomb, Bubble, Explosion, Missile, Status, Submarine
from game.subboom.utils import Rect


def populate(state):
    state.submarines += [
        Submarine(rect=Rect(100, 200, 50, 20), missile_countdown=300),
        Submarine(rect=Rect(200, 200, 50, 20), missile_countdown=300, status=Status.DESTROYED),
    ]
    state.bombs += [
        Bomb(rect=Rect(100, 100, 10, 10), max_age=150, age=150),
        Bomb(rect=Rect(100, 100, 10, 10), max_age=150, age=151),
    ]
    state.missiles += [
        Missile(rect=Rect(100, 100, 6, 12)),
        Missile(rect=Rect(100, 70, 6, 12)),
        Missile(rect=Rect(100, 100, 6, 12), status=Status.PENDING_DESTRUCTION),
    ]
    state.bubbles += [
        Bubble(rect=Rect(5, 71, 1, 1), max_age=10, age=10),
        Bubble(rect=Rect(5, 70, 1, 1), max_age=10),
        Bubble(rect=Rect(5, 200, 1, 1), max_age=10, age=11),
    ]
    state.explosions += [
        Explosion(rect=Rect(0, 0, 5, 5), max_age=30, age=30),
        Explosion(rect=Rect(0, 0, 5, 5), max_age=30, age=31),
    ]


class TestCull:
    def test_keeps_only_live_entities(self, state):
        populate(state)

        removed = cull(state)

        assert removed == 7
        assert [s.rect.x for s in state.submarines] == [100]
        assert [b.age for b in state.bombs] == [150]
        assert [m.rect.y for m in state.missiles] == [100]
        assert [b.rect.y for b in state.bubbles] == [71]
        assert [e.age for e in state.explosions] == [30]

    def test_cull_is_idempotent(self, state):
        populate(state)

        cull(state)
        snapshot = (
            list(state.submarines), list(state.bombs), list(state.missiles),
            list(state.bubbles), list(state.explosions),
        )

        assert cull(state) == 0
        assert snapshot == (
            state.submarines, state.bombs, state.missiles,
            state.bubbles, state.explosions,
        )


def test_compact_is_in_place_and_stable():
    items = [1, 2, 3, 4, 5, 6]
    alias = items

    assert compact(items, lambda n: n % 2 == 0) == 3
    assert alias == [2, 4, 6]
