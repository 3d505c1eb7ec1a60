"""Camera projection and view matrices and folder creation."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Sequence

import numpy as np


def create_folder(path: str | Path) -> Path:
    """Create the folder ``path`` if it does not already exist."""
    folder = Path(path)
    folder.mkdir(mode=0o777, exist_ok=True)
    return folder


def perspective(fovy_x: float, fovy_y: float, z_near: float, z_far: float) -> np.ndarray:
    """Return the OpenGL-style perspective projection for the given fields of view."""
    if not z_far > z_near:
        raise ValueError("z_far must be greater than z_near")
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / math.tan(fovy_x / 2.0)
    result[1, 1] = 1.0 / math.tan(fovy_y / 2.0)
    result[2, 2] = -(z_far + z_near) / (z_far - z_near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * z_far * z_near) / (z_far - z_near)
    return result


def _normalized(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    return vector / norm if norm > 0 else vector


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Return the view matrix of a camera at ``eye`` looking towards ``center``."""
    eye_v = np.asarray(eye, dtype=float)
    center_v = np.asarray(center, dtype=float)
    forward = _normalized(center_v - eye_v)
    up_v = _normalized(np.asarray(up, dtype=float))
    side = _normalized(np.cross(forward, up_v))
    up_v = np.cross(side, forward)
    return np.array(
        [
            [*side, -side @ eye_v],
            [*up_v, -up_v @ eye_v],
            [*(-forward), forward @ eye_v],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )