# RGB channels in [0, 255] -> expected values in the target model

samples_rgb_hsv = {
    (255, 0, 0): (0.0, 100.0, 100.0),
    (0, 255, 0): (120.0, 100.0, 100.0),
    (0, 0, 255): (240.0, 100.0, 100.0),
    (255, 255, 0): (60.0, 100.0, 100.0),
    (0, 255, 255): (180.0, 100.0, 100.0),
    (255, 0, 255): (300.0, 100.0, 100.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 50.196078),
    (255, 128, 0): (30.117647, 100.0, 100.0),
    (51, 102, 153): (210.0, 66.666667, 60.0),
}

samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 50.196078),
    (255, 128, 0): (30.117647, 100.0, 50.0),
    (51, 102, 153): (210.0, 50.0, 40.0),
}

samples_rgb_xyz = {
    (255, 255, 255): (95.05, 100.0, 108.9),
    (255, 0, 0): (41.24, 21.26, 1.93),
    (0, 255, 0): (35.76, 71.52, 11.92),
    (0, 0, 255): (18.05, 7.22, 95.05),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (20.5175, 21.5860, 23.5072),
}

samples_rgb_lab = {
    (255, 255, 255): (100.0, 0.0, 0.0),
    (255, 0, 0): (53.233, 80.109, 67.220),
    (0, 255, 0): (87.737, -86.185, 83.181),
    (0, 0, 255): (32.303, 79.196, -107.863),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

samples_rgb_cmyk = {
    (255, 0, 0): (0.0, 1.0, 1.0, 0.0),
    (0, 255, 0): (1.0, 0.0, 1.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0, 1.0),
    (128, 128, 128): (0.0, 0.0, 0.0, 0.498039),
    (51, 102, 153): (0.666667, 0.333333, 0.0, 0.4),
}

samples_rgb_hex = {
    (255, 0, 0): 0xFF0000,
    (0, 255, 0): 0x00FF00,
    (0, 0, 255): 0x0000FF,
    (18, 52, 86): 0x123456,
    (255, 255, 255): 0xFFFFFF,
    (0, 0, 0): 0x000000,
}

# model name -> field values, one valid color per model
samples_per_model = {
    "hex": [(0x336699,), (0x000000,), (0xFFFFFF,)],
    "rgb": [(51, 102, 153), (255, 128, 0), (0, 0, 0)],
    "xyz": [(20.5, 21.6, 23.5), (41.24, 21.26, 1.93)],
    "yxy": [(50.0, 0.3127, 0.329), (0.0, 0.0, 0.0)],
    "cielab": [(50.0, 20.0, -30.0), (75.0, -10.0, 10.0)],
    "cielch": [(50.0, 20.0, 120.0), (60.0, 0.0, 0.0)],
    "cmy": [(0.8, 0.6, 0.4), (0.0, 1.0, 1.0)],
    "cmyk": [(0.0, 1.0, 1.0, 0.0), (0.5, 0.25, 0.0, 0.2)],
    "hsl": [(210.0, 50.0, 40.0), (0.0, 0.0, 100.0)],
    "hsv": [(210.0, 66.0, 60.0), (45.0, 20.0, 90.0)],
}
