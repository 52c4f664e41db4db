""" mandelbrot computes escape time fields of the Mandelbrot iteration
    z -> z**2 + c over rectangular regions of the complex plane, and
    provides a small matplotlib viewer to explore them by zooming.

    This is the public API. Typical usage:

    >>> import mandelbrot
    >>> field = mandelbrot.compute_escape_field((-2, 1, -1, 1), 300, 100)
    >>> field.shape
    (200, 300)

    The engine (mandelbrot.escape_time) has no dependency on the viewer
    (mandelbrot.viewer), which imports matplotlib only when used.
"""

__version__ = '1.0.0'

# ---------------------------------
# Setup the tester from numpy
# ---------------------------------
from numpy._pytesttester import PytestTester
test = PytestTester(__name__)
del PytestTester

# --------------------------------
# Escape time engine
# --------------------------------
from mandelbrot.escape_time.grid import Region
from mandelbrot.escape_time.grid import derive_ny, generate_grid
from mandelbrot.escape_time.escape_field import Escape_field
from mandelbrot.escape_time.escape_field import compute_escape_field
from mandelbrot.escape_time.escape_field import iterate_escape
from mandelbrot.escape_time.escape_field import mandelbrot

from mandelbrot.mandelbrot_exceptions import MandelbrotError, \
                                             InvalidRegion, \
                                             InvalidParameter, \
                                             Cancelled

# --------------------------------
# Viewer
# --------------------------------
from mandelbrot.viewer.contrast import adjust_contrast
from mandelbrot.viewer.view_history import View_history
from mandelbrot.viewer.plotter import Escape_plotter
from mandelbrot.viewer.plotter import Mandelbrot_viewer

# -----------------------------
# Parsing arguments
# -----------------------------
from mandelbrot.utilities.argparsing import create_standard_parser


def get_args():
    """ Explicitly parse the argument list using standard mandelbrot arguments

    Don't use this if you want to setup your own parser
    """
    parser = create_standard_parser()
    return parser.parse_args()
