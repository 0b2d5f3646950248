# (r, g, b) in [0, 1] -> (hue degrees, saturation, lightness)
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 0.5),
    (0.25, 0.5, 0.75): (210.0, 0.5, 0.5),
    (0.8, 0.2, 0.4): (340.0, 0.6, 0.5),
    (1.0, 0.5, 0.5): (0.0, 1.0, 0.75),
    (0.6, 0.8, 0.7): (150.0, 1 / 3, 0.7),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
}

# (r, g, b) in [0, 1] -> (hue degrees, saturation, value)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (0.5, 1.0, 0.0): (90.0, 1.0, 1.0),
    (0.5, 0.0, 1.0): (270.0, 1.0, 1.0),
    (0.25, 0.5, 0.5): (180.0, 0.5, 0.5),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

GRID = [i / 10 for i in range(11)]
