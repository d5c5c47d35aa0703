"""
Sub Boom! constants and simulation configuration
Geometry is in display units (y grows downward, origin top-left).
Lifetimes are in ticks; one tick per rendered frame.
"""

from dataclasses import dataclass
from typing import Optional

# Display / world
DISPLAY_WIDTH = 800
DISPLAY_HEIGHT = 600
WATER_LEVEL = 70  # where the ocean starts
MIN_SUB_DEPTH = WATER_LEVEL + 20  # subs spawn at this depth or lower
FPS = 30
MS_PER_FRAME = 1000 // FPS

# Spawning
ADD_SUB_FREQUENCY = 15 * FPS  # ticks between new submarines
DESTROYER_WAKE_BUBBLES = 10  # bubbles per move input
EXPLOSION_BUBBLES = 25
MIN_BUBBLE_AGE = 10

# Motion
DESTROYER_SPEED = 2
SUB_SPEED = 1
MISSILE_SPEED = 2
BOMB_SPEED = 1
EXPLOSION_GROWTH = 1  # per side, per tick

# Sizes (width, height)
DESTROYER_SIZE = (100, 20)
SUB_SIZE = (50, 20)
BOMB_SIZE = (10, 10)
MISSILE_SIZE = (6, 12)
BUBBLE_SIZE = (1, 1)

# Reflection bounds, measured at the right edge
DESTROYER_MIN_RIGHT = 100
SUB_MIN_RIGHT = 50

# Colors (RGB)
BACKGROUND_COLOR = (255, 255, 255)
WATER_COLOR = (0, 0, 255)
DESTROYER_COLOR = (96, 96, 96)
SUB_COLOR = (20, 20, 20)
MISSILE_COLOR = (220, 40, 40)
BOMB_COLOR = (60, 60, 60)
BUBBLE_COLOR = (200, 230, 255)
EXPLOSION_COLOR = (255, 160, 0)

# Keyword arguments for SubBoomSim / SimConfig
SIM_CONFIG = {
    "display_width": DISPLAY_WIDTH,
    "display_height": DISPLAY_HEIGHT,
    "water_level": WATER_LEVEL,
    "fps": FPS,
    "destroyer_speed": DESTROYER_SPEED,
}


@dataclass(frozen=True)
class SimConfig:
    """Tunable simulation parameters; derived lifetimes scale with fps."""
    display_width: int = DISPLAY_WIDTH
    display_height: int = DISPLAY_HEIGHT
    water_level: int = WATER_LEVEL
    min_sub_depth: Optional[int] = None  # defaults to water_level + 20
    fps: int = FPS
    add_sub_frequency: Optional[int] = None  # defaults to 15 s of ticks
    destroyer_speed: int = DESTROYER_SPEED

    def __post_init__(self):
        if self.min_sub_depth is None:
            object.__setattr__(self, "min_sub_depth", self.water_level + 20)
        if self.add_sub_frequency is None:
            object.__setattr__(self, "add_sub_frequency", 15 * self.fps)
        self.validate()

    def validate(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.display_width < DESTROYER_MIN_RIGHT or self.display_height <= 0:
            raise ValueError(
                f"display {self.display_width}x{self.display_height} is too small"
            )
        if not 0 < self.water_level < self.display_height:
            raise ValueError(
                f"water_level {self.water_level} outside display height {self.display_height}"
            )
        if self.min_sub_depth > self.display_height - SUB_SIZE[1]:
            raise ValueError(
                f"min_sub_depth {self.min_sub_depth} leaves no room to spawn submarines"
            )
        if self.min_sub_depth <= self.water_level:
            raise ValueError("min_sub_depth must be below the water level")
        if self.add_sub_frequency <= 0:
            raise ValueError("add_sub_frequency must be positive")
        if self.destroyer_speed <= 0:
            raise ValueError("destroyer_speed must be positive")

    @property
    def ms_per_frame(self) -> int:
        return 1000 // self.fps

    @property
    def missile_countdown(self) -> int:
        return 10 * self.fps

    @property
    def bomb_max_age(self) -> int:
        return 5 * self.fps

    @property
    def sub_explosion_age(self) -> int:
        return 2 * self.fps

    @property
    def bomb_explosion_age(self) -> int:
        return 2 * self.fps

    @property
    def missile_explosion_age(self) -> int:
        return self.fps

    @property
    def explosion_bubble_age(self) -> int:
        return self.fps
