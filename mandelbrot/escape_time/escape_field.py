"""Escape time computation for the Mandelbrot iteration z -> z**2 + c

For every sample point c the iterate starts at z = c and the squared
magnitude |z|**2 is tested against config.escape_threshold before each
transform. A point that fails the test in round k (k = 1, 2, ...) is given
the escape value k - 1, so points with |c|**2 > 4 get 0. Points that never
fail the test within max_iter rounds keep the value max_iter.

Escaped points are dropped from the working set after every round, so the
cost is proportional to the number of points still active rather than to
the full grid.
"""

import numpy as num

import mandelbrot.utilities.log as log
from mandelbrot.config import escape_threshold, default_dtype, field_dtype, \
                              progress_reports
from mandelbrot.escape_time.grid import Region, ensure_region, generate_grid
from mandelbrot.mandelbrot_exceptions import InvalidParameter, Cancelled
from mandelbrot.utilities.numerical_tools import ensure_numeric, \
                                                 is_positive_integer


class Escape_field(object):
    """Escape values over a grid of the complex plane

    values[j, i] is the escape value of c = real_axis[i] + 1j*imag_axis[j].
    The values array is read only.
    """

    def __init__(self, values, region, real_axis, imag_axis, max_iter):

        values.flags.writeable = False

        self.values = values
        self.region = region
        self.real_axis = real_axis
        self.imag_axis = imag_axis
        self.max_iter = max_iter

    @property
    def shape(self):
        return self.values.shape

    @property
    def ny(self):
        return self.values.shape[0]

    @property
    def nx(self):
        return self.values.shape[1]

    def inside_mask(self):
        """Boolean array marking points which did not escape within max_iter
        """
        return self.values == self.max_iter

    def nearest_index(self, c):
        """(row, column) of the grid point closest to c"""

        c = complex(c)
        i = int(num.argmin(num.abs(self.real_axis - c.real)))
        j = int(num.argmin(num.abs(self.imag_axis - c.imag)))

        return j, i

    def value_at(self, c):
        """Escape value of the grid point closest to c"""

        return int(self.values[self.nearest_index(c)])

    def __repr__(self):
        return 'Escape_field(shape=%s, region=%r, max_iter=%d)' \
               % (str(self.shape), self.region, self.max_iter)


def _get_cancel_check(cancel):
    """Turn cancel (None, an Event like object or a callable) into a callable
    """

    if cancel is None:
        return lambda: False

    if hasattr(cancel, 'is_set'):
        return cancel.is_set

    if callable(cancel):
        return cancel

    msg = 'cancel must be None, have an is_set() method or be callable. ' \
          'I got %s' % str(cancel)
    raise InvalidParameter(msg)


def iterate_escape(c, max_iter, on_progress=None, cancel=None,
                   verbose=False):
    """Escape values for a flat array of sample points.

    c:           sequence of complex sample points
    max_iter:    iteration budget, a positive integer
    on_progress: optional callable, called as on_progress(k, max_iter)
                 once round k is complete
    cancel:      optional threading.Event (or callable returning a bool),
                 polled before each round. If set, Cancelled is raised and
                 no values are returned.
    verbose:     log progress through log.critical

    Returns integer array of the same length as c with values in
    [0, max_iter].
    """

    if not is_positive_integer(max_iter):
        msg = 'max_iter must be a positive integer. I got %s' % str(max_iter)
        raise InvalidParameter(msg)

    is_cancelled = _get_cancel_check(cancel)

    c = ensure_numeric(c, default_dtype).ravel()
    N = len(c)

    escape = num.full(N, max_iter, dtype=field_dtype)

    # Working set: flat grid index, current iterate and fixed c for every
    # point still active. Survivors live in the first n entries.
    index = num.arange(N)
    z = c.copy()
    c = c.copy()

    magnitude = num.empty(N, dtype=float)
    scratch = num.empty(N, dtype=float)
    escaped = num.empty(N, dtype=bool)

    report_interval = max(1, max_iter//progress_reports)

    n = N
    for k in range(1, max_iter + 1):
        if n == 0:
            if verbose:
                log.critical('All %d points escaped after %d iterations'
                             % (N, k - 1))
            break

        if is_cancelled():
            if verbose:
                log.critical('Cancelled at iteration #%d of %d'
                             % (k, max_iter))
            raise Cancelled(k, max_iter)

        z_live = z[:n]

        # |z|**2 without the square root
        num.square(z_live.real, out=magnitude[:n])
        num.square(z_live.imag, out=scratch[:n])
        num.add(magnitude[:n], scratch[:n], out=magnitude[:n])
        num.greater(magnitude[:n], escape_threshold, out=escaped[:n])

        escaped_live = escaped[:n]
        if escaped_live.any():
            escape[index[:n][escaped_live]] = k - 1

            alive = ~escaped_live
            m = int(num.count_nonzero(alive))
            index[:m] = index[:n][alive]
            z[:m] = z[:n][alive]
            c[:m] = c[:n][alive]
            n = m

        if k < max_iter and n > 0:
            z_live = z[:n]
            num.multiply(z_live, z_live, out=z_live)
            num.add(z_live, c[:n], out=z_live)

        if verbose and (k % report_interval == 0 or k == max_iter):
            log.critical('Iteration #%d of %d, %d of %d points active'
                         % (k, max_iter, n, N))

        if on_progress is not None:
            on_progress(k, max_iter)

    return escape


def compute_escape_field(region, target_nx, max_iter,
                         on_progress=None, cancel=None, verbose=False):
    """Compute the escape field of the Mandelbrot iteration over region

    region:      Region or (real_min, real_max, imag_min, imag_max)
    target_nx:   number of points along the real axis. The number of points
                 along the imaginary axis follows from the aspect ratio of
                 the region, see grid.derive_ny
    max_iter:    maximum number of iterations of z -> z**2 + c
    on_progress: optional callable, called as on_progress(k, max_iter)
                 after each iteration round
    cancel:      optional threading.Event (or callable returning a bool)
                 checked between rounds
    verbose:     log progress

    Returns an Escape_field with values of shape (ny, nx).

    Raises InvalidParameter for target_nx < 1 or max_iter < 1, InvalidRegion
    for degenerate bounds and Cancelled if cancel is found set at the start
    of a round.
    """

    if not is_positive_integer(target_nx):
        msg = 'target_nx must be a positive integer. I got %s' \
              % str(target_nx)
        raise InvalidParameter(msg)

    if not is_positive_integer(max_iter):
        msg = 'max_iter must be a positive integer. I got %s' % str(max_iter)
        raise InvalidParameter(msg)

    region = ensure_region(region)

    real_axis, imag_axis, c = generate_grid(region, target_nx)

    if verbose:
        log.critical('Computing escape field on %d x %d grid over %r, '
                     'max_iter = %d'
                     % (c.shape[0], c.shape[1], region, max_iter))

    values = iterate_escape(c, max_iter,
                            on_progress=on_progress,
                            cancel=cancel,
                            verbose=verbose)

    return Escape_field(values.reshape(c.shape), region,
                        real_axis, imag_axis, max_iter)


def mandelbrot(real_lim, imag_lim, n, max_iter, verbose=False):
    """Escape field as a plain (ny, nx) integer array

    real_lim: (min, max) along the real axis, e.g. [-2, 1]
    imag_lim: (min, max) along the imaginary axis, e.g. [-1, 1]
    n:        number of points along the real axis
    max_iter: maximum number of iterations
    """

    region = Region.from_limits(real_lim, imag_lim)
    field = compute_escape_field(region, n, max_iter, verbose=verbose)

    return field.values
