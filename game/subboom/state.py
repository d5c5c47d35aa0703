"""
Simulation state - every entity collection of one round, owned by value
"""

import random
from dataclasses import dataclass, field
from typing import List

from .config import DESTROYER_SIZE, SimConfig
from .entities import Bomb, Bubble, Destroyer, Explosion, Missile, Submarine
from .utils import Rect


@dataclass
class SimulationState:
    config: SimConfig
    rng: random.Random
    destroyer: Destroyer
    submarines: List[Submarine] = field(default_factory=list)
    bombs: List[Bomb] = field(default_factory=list)
    missiles: List[Missile] = field(default_factory=list)
    bubbles: List[Bubble] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)
    sub_spawn_counter: int = 0
    tick: int = 0


def new_destroyer(config: SimConfig) -> Destroyer:
    """Destroyer centered on the surface, hull bottom on the water line"""
    w, h = DESTROYER_SIZE
    return Destroyer(rect=Rect((config.display_width - w) // 2, config.water_level - h, w, h))


def new_state(config: SimConfig, rng: random.Random) -> SimulationState:
    """Fresh round: a lone destroyer and empty collections"""
    return SimulationState(config=config, rng=rng, destroyer=new_destroyer(config))
