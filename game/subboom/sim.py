"""
SubBoomSim - the frame orchestrator
-----------------------------------
- advance(): one tick of spawn -> input -> collision -> motion -> cull -> draw
- Round state machine: PLAYING -> ROUND_OVER (destroyer caught in a blast,
  next step starts a fresh round) and PLAYING -> EXIT (quit command)
- Headless rgb_array rendering through the numpy rasterizer

Quick test:
    python -m game.subboom --headless --frames 900 --seed 7
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

from . import config as C
from .collisions import resolve_collisions
from .culling import cull
from .entities import Heading
from .motion import move_destroyer, update_entities
from .render import rasterize
from .spawner import drop_bomb, tick_submarine_spawner
from .state import SimulationState, new_state
from .utils import Rect, make_rng

logger = logging.getLogger(__name__)


class InputCommand(Enum):
    NONE = "none"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    DROP_BOMB = "bomb"
    QUIT = "quit"

    @classmethod
    def parse(cls, token: str) -> InputCommand:
        """Accepts the value, the member name or a one-letter alias (L, R, B, Q, -)"""
        key = token.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        for command in cls:
            if key in (command.value, command.name.lower()):
                return command
        raise ValueError(f"unknown input command: {token!r}")


_ALIASES = {
    "": InputCommand.NONE,
    "-": InputCommand.NONE,
    "l": InputCommand.MOVE_LEFT,
    "r": InputCommand.MOVE_RIGHT,
    "b": InputCommand.DROP_BOMB,
    "q": InputCommand.QUIT,
}


class RoundState(Enum):
    PLAYING = "playing"
    ROUND_OVER = "round_over"
    EXIT = "exit"


class DrawCommand(NamedTuple):
    rect: Tuple[int, int, int, int]  # x, y, width, height
    color: Tuple[int, int, int]


@dataclass
class FrameResult:
    round_state: RoundState
    draw_commands: List[DrawCommand] = field(default_factory=list)


def _draw(rect: Rect, color) -> DrawCommand:
    return DrawCommand(rect.as_tuple(), color)


def draw_commands(state: SimulationState) -> List[DrawCommand]:
    """Draw list in z-order, back to front"""
    cfg = state.config
    out = [
        DrawCommand((0, 0, cfg.display_width, cfg.display_height), C.BACKGROUND_COLOR),
        DrawCommand(
            (0, cfg.water_level, cfg.display_width, cfg.display_height - cfg.water_level),
            C.WATER_COLOR,
        ),
        _draw(state.destroyer.rect, C.DESTROYER_COLOR),
    ]
    out += [_draw(s.rect, C.SUB_COLOR) for s in state.submarines]
    out += [_draw(m.rect, C.MISSILE_COLOR) for m in state.missiles]
    out += [_draw(b.rect, C.BOMB_COLOR) for b in state.bombs]
    out += [_draw(b.rect, C.BUBBLE_COLOR) for b in state.bubbles]
    out += [_draw(e.rect, C.EXPLOSION_COLOR) for e in state.explosions]
    return out


def apply_command(state: SimulationState, command: InputCommand):
    if command is InputCommand.MOVE_LEFT:
        move_destroyer(state, Heading.LEFT)
    elif command is InputCommand.MOVE_RIGHT:
        move_destroyer(state, Heading.RIGHT)
    elif command is InputCommand.DROP_BOMB:
        drop_bomb(state)


def advance(state: SimulationState, commands: Iterable[InputCommand] = ()) -> FrameResult:
    """
    Advance `state` by one tick in place.

    Commands are applied in arrival order; QUIT ends the tick at once. If an
    explosion that was active at the start of the tick touches the destroyer
    the round is over and nothing is drawn.
    """
    state.tick += 1
    tick_submarine_spawner(state)

    for command in commands:
        if command is InputCommand.QUIT:
            return FrameResult(RoundState.EXIT)
        apply_command(state, command)

    active = list(state.explosions)
    if resolve_collisions(state, active):
        return FrameResult(RoundState.ROUND_OVER)

    update_entities(state, active)
    cull(state)
    return FrameResult(RoundState.PLAYING, draw_commands(state))


class SubBoomSim:
    """Owns the simulation state across rounds"""

    def __init__(self, seed: Optional[int] = None, **config_kwargs):
        self.config = C.SimConfig(**config_kwargs)
        self.state: SimulationState = None  # type: ignore
        self.round_state = RoundState.PLAYING
        self.round_number = 0
        self.last_frame: List[DrawCommand] = []
        self.reset(seed)

    def reset(self, seed: Optional[int] = None):
        self._rng = make_rng(seed)
        self.round_number = 0
        self._new_round()

    def _new_round(self):
        self.state = new_state(self.config, self._rng)
        self.round_number += 1
        self.round_state = RoundState.PLAYING
        self.last_frame = draw_commands(self.state)
        logger.info("Round %d started", self.round_number)

    @property
    def tick(self) -> int:
        return self.state.tick

    def step(self, commands: Iterable[InputCommand] = ()) -> FrameResult:
        if self.round_state is RoundState.EXIT:
            raise RuntimeError("simulation has exited; call reset() to play again")
        if self.round_state is RoundState.ROUND_OVER:
            self._new_round()

        result = advance(self.state, commands)
        self.round_state = result.round_state

        if result.round_state is RoundState.PLAYING:
            self.last_frame = result.draw_commands
        elif result.round_state is RoundState.ROUND_OVER:
            logger.info("Round %d over after %d ticks", self.round_number, self.state.tick)
        else:
            logger.info("Quit requested at tick %d", self.state.tick)
        return result

    def render(self, mode: Optional[str] = "rgb_array") -> Optional[np.ndarray]:
        """Last drawn frame as an HxWx3 uint8 array"""
        if mode is None:
            return None
        if mode != "rgb_array":
            raise ValueError(f"unsupported render mode: {mode!r}")
        return rasterize(self.last_frame, self.config.display_width, self.config.display_height)

    def info(self) -> Dict[str, Any]:
        s = self.state
        return {
            "round": self.round_number,
            "round_state": self.round_state.value,
            "tick": s.tick,
            "num_submarines": len(s.submarines),
            "num_bombs": len(s.bombs),
            "num_missiles": len(s.missiles),
            "num_bubbles": len(s.bubbles),
            "num_explosions": len(s.explosions),
        }
