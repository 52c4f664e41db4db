"""Module where global mandelbrot parameters and default values are set
"""

import numpy as num


################################################################################
# Numerical constants
################################################################################

escape_threshold = 4.0              # Squared magnitude above which an orbit
                                    # has escaped, i.e. |z| > 2. Not a
                                    # parameter of the engine.
default_dtype = num.complex128      # Sample points and iterates are double
                                    # precision only
field_dtype = int                   # Integer type of the escape field
max_grid_points = 10**8             # Largest grid the engine will allocate,
                                    # roughly 6 GB of working buffers


################################################################################
# Default view used by the viewer and the command line script
################################################################################

default_region = (-2.0, 1.0, -1.0, 1.0)   # real_min, real_max, imag_min, imag_max
default_n = 1000                    # Points along the real axis
default_max_iter = 100              # Iteration budget


################################################################################
# Display
################################################################################

colormap = 'jet'
contrast_limits = (0.01, 0.99)      # Fraction of pixels saturated at the
                                    # low and high end by adjust_contrast
default_plot_dir = '_plot'
figsize = (10, 6)
dpi = 80


################################################################################
# Progress reporting
################################################################################

progress_reports = 20               # Upper bound on verbose progress lines
                                    # written per computation
