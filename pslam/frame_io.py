"""Reading of RGB-D sequence frames: file names, poses, depth masking and intrinsics."""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np

from .config import CameraParameters

_TRANSLATION_SCALE = 1000.0


def file_exists(path: str | Path) -> bool:
    """Return whether ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def _part(text: str) -> str:
    return "" if text == "/" else text


def frame_file_name(
    folder: str,
    subfolder: str,
    prefix: str,
    suffix: str,
    frame_index: int,
    number_length: int = -1,
) -> str:
    """Build the path of a frame file.

    A component equal to ``"/"`` is left out. With a negative ``number_length``
    no frame number is inserted; otherwise the frame index is zero-padded to
    that width between the prefix and the suffix.
    """
    path = _part(folder) + _part(subfolder) + _part(prefix)
    if number_length < 0:
        return path + _part(suffix)
    return path + str(frame_index).zfill(number_length) + _part(suffix)


def load_pose(path: str | Path, rotate: bool = False) -> np.ndarray:
    """Read a row-major 4x4 camera pose; the translation is converted from m to mm.

    ``rotate`` is accepted for compatibility with rotated sequences and does
    not change the pose.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise FileNotFoundError(f"cannot open pose file: {path}") from exc
    tokens = text.split()
    if len(tokens) < 16:
        raise ValueError(f"pose file {path} holds {len(tokens)} values, expected 16")
    try:
        values = [float(token) for token in tokens[:16]]
    except ValueError as exc:
        raise ValueError(f"pose file {path} holds a value that is not a number") from exc
    pose = np.array(values, dtype=np.float32).reshape(4, 4)
    pose[:3, 3] *= np.float32(_TRANSLATION_SCALE)
    return pose


def mask_depth(depth: np.ndarray, max_depth: float, inclusive: bool = False) -> np.ndarray:
    """Return a copy of ``depth`` with values beyond ``max_depth`` set to zero.

    With ``inclusive`` a value equal to ``max_depth`` is dropped as well.
    """
    masked = np.array(depth, copy=True)
    too_far = masked >= max_depth if inclusive else masked > max_depth
    masked[too_far] = 0
    return masked


def rotate_counterclockwise(image: np.ndarray) -> np.ndarray:
    """Rotate an image by 90 degrees counterclockwise."""
    return np.ascontiguousarray(np.rot90(np.asarray(image), 1, axes=(0, 1)))


def rotation_matrix_z(rot: float) -> np.ndarray:
    """Return the homogeneous 4x4 rotation by ``rot`` radians about the z axis."""
    c, s = math.cos(rot), math.sin(rot)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )


def load_scannet_intrinsics(folder: str | Path) -> CameraParameters:
    """Read ``intrinsics.txt`` (fx fy cx cy width height) from a sequence folder."""
    path = Path(folder) / "intrinsics.txt"
    try:
        tokens = path.read_text(encoding="utf-8").split()
    except OSError as exc:
        raise FileNotFoundError(f"cannot open intrinsics file: {path}") from exc
    if len(tokens) < 6:
        raise ValueError(f"intrinsics file {path} holds {len(tokens)} values, expected 6")
    try:
        fx, fy, cx, cy = (float(token) for token in tokens[:4])
        width, height = int(tokens[4]), int(tokens[5])
    except ValueError as exc:
        raise ValueError(f"intrinsics file {path} is malformed") from exc
    params = CameraParameters()
    params.set(width, height, fx, fy, cx, cy)
    return params