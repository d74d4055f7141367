"""Heart curve and the forces that push particles around it.

Every function accepts plain floats or equally-shaped NumPy arrays for x/y and
returns new values; nothing is modified in place. Randomness always comes from
the `rng` argument (a numpy.random.Generator).
"""

import math

import numpy as np

from particleheart.config import CANVAS_CENTER_X, CANVAS_CENTER_Y, IMAGE_ENLARGE

CENTER = (CANVAS_CENTER_X, CANVAS_CENTER_Y)

# Squared distances below one pixel are treated as one pixel, so a particle
# sitting exactly on the center gets a finite (zero) displacement.
MIN_DISTANCE_SQ = 1.0


def heart_curve(t, enlarge: float = IMAGE_ENLARGE, center=CENTER):
    """Point on the heart at angle t, scaled, centered and floored to whole pixels."""
    x = 17 * np.sin(t) ** 3
    y = -(16 * np.cos(t) - 5 * np.cos(2 * t) - 3 * np.cos(3 * t))

    x = x * enlarge + center[0]
    y = y * enlarge + center[1]
    return np.floor(x), np.floor(y)


def scatter_inside(x, y, beta: float, rng: np.random.Generator, center=CENTER):
    """Pull a point toward the center by exponentially distributed ratios."""
    shape = np.shape(x) or None
    # 1 - random() is in (0, 1], keeps log() finite
    ratio_x = -beta * np.log(1.0 - rng.random(shape))
    ratio_y = -beta * np.log(1.0 - rng.random(shape))

    dx = ratio_x * (x - center[0])
    dy = ratio_y * (y - center[1])
    return x - dx, y - dy


def _distance_sq(x, y, center):
    return np.maximum((x - center[0]) ** 2 + (y - center[1]) ** 2, MIN_DISTANCE_SQ)


def shrink(x, y, ratio: float, center=CENTER):
    """Inverse-power attraction toward the center, used for the halo ring."""
    force = -1 / _distance_sq(x, y, center) ** 0.6
    dx = ratio * force * (x - center[0])
    dy = ratio * force * (y - center[1])
    return x - dx, y - dy


def curve(p: float) -> float:
    """Breathing curve. Period pi/2, bounded by +-2/pi."""
    return 2 * (2 * math.sin(4 * p)) / (2 * math.pi)


def calc_position(x, y, ratio: float, rng: np.random.Generator, center=CENTER):
    """Displace skeleton points by the breathing force plus one pixel of jitter."""
    shape = np.shape(x) or None
    force = 1 / _distance_sq(x, y, center) ** 0.42
    dx = ratio * force * (x - center[0]) + rng.uniform(-1, 1, shape)
    dy = ratio * force * (y - center[1]) + rng.uniform(-1, 1, shape)
    return x - dx, y - dy
