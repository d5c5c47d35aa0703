"""
Fixed frame-rate pacing: sleep away whatever is left of the frame budget
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class FramePacer:
    """
    Measures wall time per frame and sleeps the remainder of `target_ms`.
    Overruns are not compensated; the game just runs slow.
    """

    def __init__(
        self,
        target_ms: float,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.target_ms = target_ms
        self._clock = clock
        self._sleep = sleep
        self._frame_start: Optional[float] = None
        self.overruns = 0

    def start(self):
        self._frame_start = self._clock()

    def elapsed_ms(self) -> float:
        if self._frame_start is None:
            return 0.0
        return (self._clock() - self._frame_start) * 1000.0

    def finish(self) -> float:
        """End the frame; returns the milliseconds slept (0 on overrun)"""
        elapsed = self.elapsed_ms()
        logger.debug("Frame rendered in %.1f milliseconds.", elapsed)
        remaining = self.target_ms - elapsed
        self._frame_start = None
        if remaining <= 0:
            self.overruns += 1
            return 0.0
        logger.debug("Sleeping %.1f milliseconds until next frame loop.", remaining)
        self._sleep(remaining / 1000.0)
        return remaining
