"""Contrast stretching of escape fields for display
"""

import numpy as num

from mandelbrot.config import contrast_limits
from mandelbrot.utilities.numerical_tools import ensure_numeric


def stretch_limits(image, low=None, high=None):
    """Intensities below which a fraction low, and above which a fraction
    1 - high, of the pixels of image lie.

    image is assumed to be scaled to [0, 1]. If both limits coincide (e.g.
    a constant image) (0.0, 1.0) is returned.
    """

    if low is None:
        low = contrast_limits[0]
    if high is None:
        high = contrast_limits[1]

    if not 0.0 <= low < high <= 1.0:
        msg = 'Contrast limits must satisfy 0 <= low < high <= 1. ' \
              'I got low=%f, high=%f' % (low, high)
        raise ValueError(msg)

    lower, upper = num.quantile(image, [low, high])
    if upper <= lower:
        return 0.0, 1.0

    return float(lower), float(upper)


def adjust_contrast(values, max_iter, low=None, high=None):
    """Scale escape values to [0, 1] and stretch the contrast

    values:   escape values in [0, max_iter]
    max_iter: iteration budget the values were computed with
    low:      fraction of pixels to saturate at 0 (config default 0.01)
    high:     fraction of pixels below the upper saturation (default 0.99)

    Returns a float array of the same shape with values in [0, 1].
    """

    image = ensure_numeric(values, float)/float(max_iter)

    lower, upper = stretch_limits(image, low, high)

    adjusted = (image - lower)/(upper - lower)

    return num.clip(adjusted, 0.0, 1.0)
