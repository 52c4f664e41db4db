"""Standard command line arguments for mandelbrot scripts
"""


def create_standard_parser():
    """ Creates a standard argument parser"""

    from mandelbrot.config import default_region, default_n, default_max_iter

    import argparse
    parser = argparse.ArgumentParser(
        description='Compute and view escape times of the Mandelbrot set')

    parser.add_argument('-r', '--region', type=float, nargs=4,
                        default=list(default_region),
                        metavar=('RMIN', 'RMAX', 'IMIN', 'IMAX'),
                        help='region of the complex plane to compute')

    parser.add_argument('-n', type=int, default=default_n,
                        help='number of points along the real axis')

    parser.add_argument('-m', '--maxiter', type=int, default=default_max_iter,
                        help='maximum number of iterations')

    parser.add_argument('-o', '--outname', type=str, default=None,
                        help='save the image to this png file instead of '
                             'opening the interactive viewer')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='turn on verbosity')

    return parser


def parse_standard_args(argv=None):
    """ Parse arguments for the standard viewer script. Returns values of

    region, n, maxiter, outname, verbose

    """

    parser = create_standard_parser()

    args = parser.parse_args(argv)

    return args.region, args.n, args.maxiter, args.outname, args.verbose
