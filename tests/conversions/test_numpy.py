import numpy as np

from chromashift.conversions import (
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_lab_to_lch,
    np_lch_to_lab,
)
from ..samples import samples_rgb_lab, samples_rgb_xyz


def _rgb_grid(step=17):
    axis = np.arange(0, 256, step, dtype=float)
    r, g, b = np.meshgrid(axis, axis, axis, indexing="ij")
    return np.stack([r, g, b], axis=-1)


def test_np_rgb_to_xyz_matches_scalar():
    grid = _rgb_grid()
    result = np_rgb_to_xyz(grid)
    assert result.shape == grid.shape
    expected = np.array([rgb_to_xyz(*rgb) for rgb in grid.reshape(-1, 3)]).reshape(grid.shape)
    assert np.allclose(result, expected, atol=1e-9)


def test_np_rgb_to_xyz_samples():
    the_matrix = np.array(list(samples_rgb_xyz.keys()), dtype=float)
    expected = np.array(list(samples_rgb_xyz.values()))
    assert np.allclose(np_rgb_to_xyz(the_matrix), expected, atol=1e-3)


def test_np_xyz_to_rgb_matches_scalar():
    xyz = np_rgb_to_xyz(_rgb_grid()).reshape(-1, 3)
    # push some lanes out of gamut
    xyz = np.concatenate([xyz, xyz * 1.5, -xyz[:10]])
    result = np_xyz_to_rgb(xyz)
    expected = np.array([xyz_to_rgb(*v) for v in xyz])
    assert np.allclose(result, expected, atol=1e-9)
    assert result.min() >= 0
    assert result.max() <= 255


def test_np_lab_matches_scalar():
    xyz = np_rgb_to_xyz(_rgb_grid()).reshape(-1, 3)
    lab = np_xyz_to_lab(xyz)
    expected = np.array([xyz_to_lab(*v) for v in xyz])
    assert np.allclose(lab, expected, atol=1e-9)

    back = np_lab_to_xyz(lab)
    expected_back = np.array([lab_to_xyz(*v) for v in lab])
    assert np.allclose(back, expected_back, atol=1e-9)
    assert np.allclose(back, xyz, atol=1e-9)


def test_np_lab_samples():
    the_matrix = np.array(list(samples_rgb_lab.keys()), dtype=float)
    expected = np.array(list(samples_rgb_lab.values()))
    lab = np_xyz_to_lab(np_rgb_to_xyz(the_matrix))
    assert np.allclose(lab, expected, atol=0.05)


def test_np_lch_matches_scalar():
    lab = np.array([
        [53.233, 80.109, 67.220],
        [87.737, -86.185, 83.181],
        [32.303, 79.196, -107.863],
        [50.0, -20.0, -20.0],
        [50.0, 0.0, -10.0],
        [50.0, 0.0, 0.0],
    ])
    lch = np_lab_to_lch(lab)
    for row, out in zip(lab, lch):
        lightness, chroma, hue = lab_to_lch(*row)
        assert abs(out[0] - lightness) < 1e-12
        assert abs(out[1] - chroma) < 1e-9
        # the vectorized form wraps 360 to 0 itself
        assert abs(out[2] - hue % 360) < 1e-9

    back = np_lch_to_lab(lch)
    expected = np.array([lch_to_lab(*row) for row in lch])
    assert np.allclose(back, expected, atol=1e-9)
    assert np.allclose(back, lab, atol=1e-9)
