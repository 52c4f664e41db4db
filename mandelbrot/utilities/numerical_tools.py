#!/usr/bin/env python
"""Auxiliary numerical tools
"""

from math import floor, isfinite
import numbers

import numpy as num


def sign(x):
    if x > 0: return 1
    if x < 0: return -1
    if x == 0: return 0


def is_scalar(x):
    """True if x is a scalar (constant numeric value)
    """

    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def is_finite_number(x):
    """True if x is a real scalar which is neither inf nor nan
    """

    return is_scalar(x) and isfinite(x)


def is_positive_integer(x):
    """True if x is an integer (python or numpy) no smaller than one.

    Booleans and floats with an integral value are rejected.
    """

    if isinstance(x, bool) or not isinstance(x, numbers.Integral):
        return False

    return x >= 1


def round_half_away(x):
    """Round x to the nearest integer, halves rounded away from zero.

    Python's round() and numpy.round() round halves to even, so
    round(2.5) == 2 whereas round_half_away(2.5) == 3.
    """

    return int(sign(x)*floor(abs(x) + 0.5))


def ensure_numeric(A, typecode=None):
    """Ensure that sequence is a numeric array.

    Inputs:
        A: Sequence. If A is already a numeric array it will be returned
                     unaltered
                     If not, an attempt is made to convert it to a numeric
                     array
        A: Scalar.   Return 0-dimensional array containing that value. Note
                     that a 0-dim array DOES NOT HAVE A LENGTH UNDER numpy.
        typecode:    numeric type. If specified, use this in the conversion.
                     If not, let numeric package decide.
                     typecode will always be one of float, int, etc.

    This function is necessary as array(A) can cause memory overflow.
    """

    if isinstance(A, num.ndarray):
        if typecode is None or A.dtype == num.dtype(typecode):
            return A
        else:
            return A.astype(typecode)

    if typecode is None:
        return num.array(A)
    else:
        return num.array(A, dtype=typecode)
