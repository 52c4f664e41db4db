#!/usr/bin/env python


import unittest
import numpy as num

from mandelbrot.viewer.contrast import adjust_contrast, stretch_limits


class Test_Contrast(unittest.TestCase):
    def setUp(self):
        pass

    def tearDown(self):
        pass

    def test_range_and_shape(self):
        values = num.arange(200).reshape(10, 20) % 101
        image = adjust_contrast(values, 100)

        assert image.shape == (10, 20)
        assert image.dtype == num.float64
        assert image.min() == 0.0
        assert image.max() == 1.0

    def test_saturates_outliers(self):
        values = num.full(1000, 10)
        values[:500] = 20
        values[0] = 0
        values[-1] = 100

        image = adjust_contrast(values, 100)

        # The single low and high outliers are clipped and the bulk of the
        # pixels spread over the full range
        assert image[0] == 0.0
        assert image[-1] == 1.0
        assert num.allclose(image[1:500], 1.0)
        assert num.allclose(image[500:-1], 0.0)

    def test_constant_image_unchanged(self):
        values = num.full((4, 4), 25)
        image = adjust_contrast(values, 100)

        assert num.allclose(image, 0.25)

    def test_monotone(self):
        values = num.array([0, 3, 7, 7, 12, 40, 99, 100])
        image = adjust_contrast(values, 100, low=0.0, high=1.0)

        assert num.all(num.diff(image) >= 0.0)
        assert num.allclose(image, values/100.0)

    def test_stretch_limits(self):
        image = num.linspace(0.0, 1.0, 101)

        lower, upper = stretch_limits(image, 0.1, 0.9)
        assert num.allclose([lower, upper], [0.1, 0.9])

        assert stretch_limits(num.zeros(10)) == (0.0, 1.0)

    def test_bad_limits(self):
        self.assertRaises(ValueError,
                          stretch_limits, num.zeros(10), 0.5, 0.5)
        self.assertRaises(ValueError,
                          stretch_limits, num.zeros(10), -0.1, 0.9)
        self.assertRaises(ValueError,
                          adjust_contrast, num.zeros(10), 10, 0.9, 0.1)


################################################################################

if __name__ == "__main__":
    unittest.main()
