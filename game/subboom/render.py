"""
Headless rendering of draw commands into RGB frames
"""

from typing import Iterable

import numpy as np
from PIL import Image


def rasterize(commands: Iterable, width: int, height: int) -> np.ndarray:
    """Paint (rect, color) commands in order onto a black HxWx3 uint8 frame"""
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    for rect, color in commands:
        x, y, w, h = rect
        # clip to the frame
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(width, x + w), min(height, y + h)
        if x0 < x1 and y0 < y1:
            frame[y0:y1, x0:x1] = color
    return frame


def save_frame(frame: np.ndarray, path: str):
    """Write an HxWx3 uint8 frame as an image (format from the extension)"""
    Image.fromarray(frame).save(path)
