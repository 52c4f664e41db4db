#!/usr/bin/env python3
"""
    Explore the Mandelbrot set interactively, or save a single view to a
    png file with -o.
"""

import mandelbrot.utilities.log as log
from mandelbrot.escape_time.escape_field import compute_escape_field
from mandelbrot.escape_time.grid import Region
from mandelbrot.mandelbrot_exceptions import MandelbrotError
from mandelbrot.utilities.argparsing import parse_standard_args


def main(argv=None):

    region, n, max_iter, outname, verbose = parse_standard_args(argv)

    try:
        region = Region(*region)

        if outname is None:
            from mandelbrot.viewer.plotter import Mandelbrot_viewer
            viewer = Mandelbrot_viewer(region, n, max_iter, verbose=verbose)
            viewer.show()
        else:
            from mandelbrot.viewer.plotter import Escape_plotter
            field = compute_escape_field(region, n, max_iter, verbose=verbose)
            plotter = Escape_plotter(field, plot_dir=None)
            filename = plotter.save_frame(outname)
            if verbose:
                log.critical('Saved %s' % filename)
    except MandelbrotError as e:
        log.critical('ERROR: %s' % str(e))
        return 1

    return 0


if __name__ == '__main__':
    import sys
    sys.exit(main())
