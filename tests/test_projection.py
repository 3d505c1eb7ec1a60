import math

import numpy as np
import pytest

from pslam.projection import create_folder, look_at, perspective


def test_create_folder(tmp_path):
    target = tmp_path / "out"
    result = create_folder(target)
    assert result.is_dir()
    assert create_folder(target) == target


def test_perspective_rejects_bad_range():
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 10.0, 5.0)
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 5.0, 5.0)


def test_perspective_layout():
    m = perspective(math.pi / 2, math.pi / 2, 0.1, 100.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert m[0, 0] == pytest.approx(1.0)
    assert m[0, 1] == 0.0


@pytest.mark.parametrize("near,far", [(0.1, 100.0), (1.0, 10.0), (5.0, 6.0)])
def test_perspective_maps_near_and_far_planes(near, far):
    m = perspective(1.2, 0.9, near, far)
    clip_near = m @ np.array([0.0, 0.0, -near, 1.0])
    clip_far = m @ np.array([0.0, 0.0, -far, 1.0])
    assert clip_near[2] / clip_near[3] == pytest.approx(-1.0)
    assert clip_far[2] / clip_far[3] == pytest.approx(1.0)


def test_look_at_sends_eye_to_origin():
    eye = [1.0, 2.0, 3.0]
    m = look_at(eye, [4.0, 2.0, -1.0], [0.0, 1.0, 0.0])
    assert np.allclose(m @ np.array([*eye, 1.0]), [0.0, 0.0, 0.0, 1.0])


def test_look_at_center_is_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, 2.0, -1.0])
    m = look_at(eye, center, [0.0, 1.0, 0.0])
    mapped = m @ np.array([*center, 1.0])
    assert mapped[0] == pytest.approx(0.0, abs=1e-9)
    assert mapped[1] == pytest.approx(0.0, abs=1e-9)
    assert mapped[2] == pytest.approx(-np.linalg.norm(center - eye))


def test_look_at_rotation_is_orthonormal():
    m = look_at([0.5, -1.0, 2.0], [0.0, 0.0, 0.0], [0.0, 0.0, 1.0])
    rotation = m[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.eye(3))
    assert np.allclose(m[3], [0.0, 0.0, 0.0, 1.0])