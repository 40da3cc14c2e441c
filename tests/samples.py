"""Reference values shared across the test suite."""
import math

# linear RGB -> OkLab, accurate to ~1e-6
samples_linear_oklab = {
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0): (1.0, 0.0, 0.0),
    (1.0, 0.0, 0.0): (0.6279553606, 0.2248630684, 0.1258462985),
    (0.0, 1.0, 0.0): (0.8664396115, -0.2338875742, 0.1794984532),
    (0.0, 0.0, 1.0): (0.4520137184, -0.0324569841, -0.3115281477),
}

# in-gamut linear colors for round trips
linear_round_trip_samples = [
    (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0),
    (0.5, 0.5, 0.5),
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.25, 0.75, 0.1),
    (0.9, 0.05, 0.6),
    (0.001, 0.002, 0.003),
    (0.3333, 0.6666, 0.9999),
]

# out-of-gamut linear colors (negative and > 1 channels)
linear_out_of_gamut_samples = [
    (-0.2, 0.5, 0.5),
    (1.4, 0.2, -0.1),
    (-1.0, -1.0, -1.0),
    (2.0, 3.0, 0.5),
]

# (count, luminance, max_chroma, hue_angle)
palette_parameter_samples = [
    (1, 0.5, 0.2, 0.0),
    (5, 0.6, 0.3, 0.0),
    (7, 0.7, 0.15, math.pi / 3),
    (12, 0.4, 0.25, -2.0),
    (30, 0.8, 0.1, 5.5),
    (64, 0.55, 0.0, 1.0),
]
