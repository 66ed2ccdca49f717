from chromashift.conversions import (
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    xyz_to_yxy,
    yxy_to_xyz,
    rgb_to_hsv,
    rgb_to_hsl,
    hsv_to_rgb,
    hsl_to_rgb,
    rgb_to_cmy,
    cmy_to_rgb,
    cmy_to_cmyk,
    cmyk_to_cmy,
    rgb_to_hex,
    hex_to_rgb,
)
from ..samples import (
    samples_rgb_cmyk,
    samples_rgb_hex,
    samples_rgb_hsl,
    samples_rgb_hsv,
    samples_rgb_lab,
    samples_rgb_xyz,
)

xyz_tolerance = 1e-3
lab_tolerance = 0.05
hue_tolerance = 1e-6


def test_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = rgb_to_hsv(r, g, b)

        assert abs(h - h_exp) < hue_tolerance
        assert abs(s - s_exp) < 1e-4
        assert abs(v - v_exp) < 1e-4


def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = rgb_to_hsl(r, g, b)

        assert abs(h - h_exp) < hue_tolerance
        assert abs(s - s_exp) < 1e-4
        assert abs(l - l_exp) < 1e-4


def test_hsv_to_rgb():
    for (r, g, b), (h, s, v) in samples_rgb_hsv.items():
        r_out, g_out, b_out = hsv_to_rgb(h, s, v)

        assert abs(r - r_out) < 1e-3
        assert abs(g - g_out) < 1e-3
        assert abs(b - b_out) < 1e-3


def test_hsl_to_rgb():
    for (r, g, b), (h, s, l) in samples_rgb_hsl.items():
        r_out, g_out, b_out = hsl_to_rgb(h, s, l)

        assert abs(r - r_out) < 1e-3
        assert abs(g - g_out) < 1e-3
        assert abs(b - b_out) < 1e-3


def test_hue_360_is_red():
    assert hsv_to_rgb(360, 100, 100) == (255.0, 0.0, 0.0)
    assert hsl_to_rgb(360, 100, 50) == (255.0, 0.0, 0.0)


def test_hsx_channels_stay_in_range():
    for h in range(0, 361, 15):
        for s in (0, 33.3, 50, 100):
            for x in (0, 12.5, 50, 99.9, 100):
                for channel in hsv_to_rgb(h, s, x) + hsl_to_rgb(h, s, x):
                    assert 0 <= channel <= 255


def test_rgb_to_xyz():
    for (r, g, b), (x_exp, y_exp, z_exp) in samples_rgb_xyz.items():
        x, y, z = rgb_to_xyz(r, g, b)

        assert abs(x - x_exp) < xyz_tolerance
        assert abs(y - y_exp) < xyz_tolerance
        assert abs(z - z_exp) < xyz_tolerance


def test_xyz_to_rgb():
    for (r, g, b), xyz in samples_rgb_xyz.items():
        r_out, g_out, b_out = xyz_to_rgb(*xyz)

        assert abs(r - r_out) < 0.5
        assert abs(g - g_out) < 0.5
        assert abs(b - b_out) < 0.5


def test_xyz_to_rgb_clips_out_of_gamut():
    assert xyz_to_rgb(200.0, 200.0, 200.0) == (255.0, 255.0, 255.0)
    for channel in xyz_to_rgb(-10.0, 5.0, 0.0):
        assert 0 <= channel <= 255


def test_xyz_to_lab():
    for rgb, (l_exp, a_exp, b_exp) in samples_rgb_lab.items():
        lightness, a, b = xyz_to_lab(*rgb_to_xyz(*rgb))

        assert abs(lightness - l_exp) < lab_tolerance
        assert abs(a - a_exp) < lab_tolerance
        assert abs(b - b_exp) < lab_tolerance


def test_lab_to_xyz_inverts():
    for xyz in samples_rgb_xyz.values():
        x, y, z = lab_to_xyz(*xyz_to_lab(*xyz))

        assert abs(x - xyz[0]) < 1e-9
        assert abs(y - xyz[1]) < 1e-9
        assert abs(z - xyz[2]) < 1e-9


def test_lab_linear_segment():
    # below the 0.008856 threshold the linear branch is used both ways
    lightness, a, b = xyz_to_lab(0.5, 0.5, 0.5)
    assert lightness < 8
    x, y, z = lab_to_xyz(lightness, a, b)
    assert abs(x - 0.5) < 1e-9
    assert abs(y - 0.5) < 1e-9
    assert abs(z - 0.5) < 1e-9


def test_lab_to_lch():
    lightness, chroma, hue = lab_to_lch(53.233, 80.109, 67.220)
    assert lightness == 53.233
    assert abs(chroma - 104.575) < lab_tolerance
    assert abs(hue - 40.0) < lab_tolerance

    # negative angles map to 360 - |angle|
    _, _, hue = lab_to_lch(50.0, 0.0, -10.0)
    assert abs(hue - 270.0) < hue_tolerance

    # neutral colors land on 360, which the CIELCh domain wraps to 0
    assert lab_to_lch(50.0, 0.0, 0.0) == (50.0, 0.0, 360.0)


def test_lch_to_lab():
    lightness, a, b = lch_to_lab(50.0, 10.0, 90.0)
    assert lightness == 50.0
    assert abs(a) < 1e-9
    assert abs(b - 10.0) < 1e-9

    assert lch_to_lab(50.0, 0.0, 123.0)[1:] == (0.0, 0.0)


def test_xyz_yxy():
    big_y, x, y = xyz_to_yxy(95.05, 100.0, 108.9)
    assert big_y == 100.0
    assert abs(x - 0.3127159) < 1e-6
    assert abs(y - 0.3290015) < 1e-6

    x_out, y_out, z_out = yxy_to_xyz(big_y, x, y)
    assert abs(x_out - 95.05) < 1e-9
    assert abs(y_out - 100.0) < 1e-9
    assert abs(z_out - 108.9) < 1e-9


def test_yxy_black():
    assert xyz_to_yxy(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert yxy_to_xyz(0.0, 0.3, 0.3) == (0.0, 0.0, 0.0)


def test_yxy_zero_sum_with_nonzero_y():
    # X + Y + Z == 0 while Y != 0
    assert xyz_to_yxy(1.0, -1.0, 0.0) == (-1.0, 0.0, 0.0)
    assert yxy_to_xyz(-1.0, 0.0, 0.0) == (0.0, -1.0, 0.0)
    assert yxy_to_xyz(10.0, 0.3, 0.0) == (0.0, 10.0, 0.0)


def test_rgb_to_cmyk():
    for rgb, (c_exp, m_exp, y_exp, k_exp) in samples_rgb_cmyk.items():
        c, m, y, k = cmy_to_cmyk(*rgb_to_cmy(*rgb))

        assert abs(c - c_exp) < 1e-6
        assert abs(m - m_exp) < 1e-6
        assert abs(y - y_exp) < 1e-6
        assert abs(k - k_exp) < 1e-6


def test_cmyk_to_rgb():
    for (r, g, b), cmyk in samples_rgb_cmyk.items():
        r_out, g_out, b_out = cmy_to_rgb(*cmyk_to_cmy(*cmyk))

        assert abs(r - r_out) < 1e-3
        assert abs(g - g_out) < 1e-3
        assert abs(b - b_out) < 1e-3


def test_pure_black_cmyk():
    assert cmy_to_cmyk(1.0, 1.0, 1.0) == (0.0, 0.0, 0.0, 1.0)
    assert cmyk_to_cmy(0.0, 0.0, 0.0, 1.0) == (1.0, 1.0, 1.0)


def test_hex():
    for rgb, packed in samples_rgb_hex.items():
        assert rgb_to_hex(*rgb) == (packed,)
        assert hex_to_rgb(packed) == tuple(float(c) for c in rgb)

    # channels are rounded half-up before packing
    assert rgb_to_hex(254.5, 0.49, 0.5) == (0xFF0001,)
