"""Exceptions used by the mandelbrot package
"""


class MandelbrotError(Exception):
    """ Generic mandelbrot error. """
    pass

class InvalidRegion(MandelbrotError, ValueError):
    """ Non-finite, inverted or degenerate region bounds. """
    pass

class InvalidParameter(MandelbrotError, ValueError):
    """ Grid resolution or iteration budget out of range. """
    pass

class Cancelled(MandelbrotError):
    """ Computation abandoned between iteration rounds. """

    def __init__(self, iteration, max_iter):
        msg = 'Escape time computation cancelled at iteration %d of %d' \
              % (iteration, max_iter)
        MandelbrotError.__init__(self, msg)
        self.iteration = iteration
        self.max_iter = max_iter
