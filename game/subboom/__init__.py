"""Sub Boom! - destroyer vs submarines arcade simulation"""

from .sim import (
    DrawCommand,
    FrameResult,
    InputCommand,
    RoundState,
    SubBoomSim,
    advance,
    draw_commands,
)
from .state import SimulationState, new_state
from .run import run_random_game

__all__ = [
    'SubBoomSim',
    'SimulationState',
    'new_state',
    'advance',
    'draw_commands',
    'InputCommand',
    'RoundState',
    'DrawCommand',
    'FrameResult',
    'run_random_game',
]
