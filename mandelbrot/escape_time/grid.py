"""Rectangular regions of the complex plane and the sample grids over them.

The grid is laid out row major: row j holds the points with imaginary part
imag_axis[j] (row 0 is imag_min, the bottom of the region) and column i
holds the points with real part real_axis[i] (column 0 is real_min).
"""

from math import isfinite

import numpy as num

from mandelbrot.config import default_dtype, max_grid_points
from mandelbrot.mandelbrot_exceptions import InvalidRegion
from mandelbrot.utilities.numerical_tools import is_finite_number, \
                                                 is_positive_integer, \
                                                 round_half_away


class Region(object):
    """Axis aligned rectangle [real_min, real_max] x [imag_min, imag_max]

    Bounds must be finite and strictly increasing along both axes,
    otherwise InvalidRegion is raised.
    """

    def __init__(self, real_min, real_max, imag_min, imag_max):

        bounds = (real_min, real_max, imag_min, imag_max)
        for bound in bounds:
            if not is_finite_number(bound):
                msg = 'Region bounds must be finite real numbers. I got %s' \
                      % str(bounds)
                raise InvalidRegion(msg)

        if not real_max > real_min:
            msg = 'Real axis bounds must satisfy real_min < real_max. ' \
                  'I got [%g, %g]' % (real_min, real_max)
            raise InvalidRegion(msg)

        if not imag_max > imag_min:
            msg = 'Imaginary axis bounds must satisfy imag_min < imag_max. ' \
                  'I got [%g, %g]' % (imag_min, imag_max)
            raise InvalidRegion(msg)

        # Finite bounds can still be too far apart to represent the span
        if not (isfinite(real_max - real_min) and isfinite(imag_max - imag_min)):
            msg = 'Region spans must be finite. I got %s' % str(bounds)
            raise InvalidRegion(msg)

        self.real_min = float(real_min)
        self.real_max = float(real_max)
        self.imag_min = float(imag_min)
        self.imag_max = float(imag_max)

    @classmethod
    def from_corners(cls, lower_left, upper_right):
        """Create region from two complex corners, e.g. (-2-1j, 1+1j)
        """

        lower_left = complex(lower_left)
        upper_right = complex(upper_right)

        return cls(lower_left.real, upper_right.real,
                   lower_left.imag, upper_right.imag)

    @classmethod
    def from_limits(cls, real_lim, imag_lim):
        """Create region from (min, max) pairs along each axis
        """

        try:
            real_min, real_max = real_lim
            imag_min, imag_max = imag_lim
        except (TypeError, ValueError):
            msg = 'Axis limits must be (min, max) pairs. I got %s and %s' \
                  % (str(real_lim), str(imag_lim))
            raise InvalidRegion(msg)

        return cls(real_min, real_max, imag_min, imag_max)

    @property
    def real_span(self):
        return self.real_max - self.real_min

    @property
    def imag_span(self):
        return self.imag_max - self.imag_min

    @property
    def aspect_ratio(self):
        """Height over width of the region"""
        return self.imag_span/self.real_span

    def as_extent(self):
        """Bounds in the order expected by matplotlib's imshow(extent=...)"""
        return [self.real_min, self.real_max, self.imag_min, self.imag_max]

    def __eq__(self, other):
        if not isinstance(other, Region):
            return NotImplemented
        return self.as_extent() == other.as_extent()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(tuple(self.as_extent()))

    def __repr__(self):
        return 'Region(%r, %r, %r, %r)' % tuple(self.as_extent())


def ensure_region(region):
    """Return region as a Region instance.

    Accepts a Region or a sequence (real_min, real_max, imag_min, imag_max).
    """

    if isinstance(region, Region):
        return region

    try:
        real_min, real_max, imag_min, imag_max = region
    except (TypeError, ValueError):
        msg = 'Region must be a Region or a sequence of four bounds ' \
              '(real_min, real_max, imag_min, imag_max). I got %s' \
              % str(region)
        raise InvalidRegion(msg)

    return Region(real_min, real_max, imag_min, imag_max)


def derive_ny(region, nx):
    """Number of points along the imaginary axis for nx along the real axis

    ny = round(nx * imag_span/real_span), with halves rounded away from
    zero and clamped to at least one point.
    """

    region = ensure_region(region)
    if not is_positive_integer(nx):
        msg = 'Number of points along the real axis must be a positive ' \
              'integer. I got %s' % str(nx)
        raise InvalidRegion(msg)

    ny = nx*region.aspect_ratio
    if not isfinite(ny):
        msg = 'Aspect ratio of %r is too extreme for %d points along the ' \
              'real axis' % (region, nx)
        raise InvalidRegion(msg)

    ny = max(1, round_half_away(ny))
    if nx*ny > max_grid_points:
        msg = 'Grid of %d x %d points over %r exceeds the limit of %d ' \
              'points' % (ny, nx, region, max_grid_points)
        raise InvalidRegion(msg)

    return ny


def generate_grid(region, nx):
    """Complex sample points covering region

    Returns real_axis (nx,), imag_axis (ny,) and c (ny, nx) where
    c[j, i] = real_axis[i] + 1j*imag_axis[j]. Both axes include their
    end points, as numpy.linspace does.
    """

    region = ensure_region(region)
    ny = derive_ny(region, nx)

    real_axis = num.linspace(region.real_min, region.real_max, nx)
    imag_axis = num.linspace(region.imag_min, region.imag_max, ny)

    c = num.empty((ny, nx), dtype=default_dtype)
    c.real = real_axis[num.newaxis, :]
    c.imag = imag_axis[:, num.newaxis]

    return real_axis, imag_axis, c
