#!/usr/bin/env python


import unittest
import numpy as num

from mandelbrot.escape_time.grid import Region, ensure_region, derive_ny, \
                                        generate_grid
from mandelbrot.mandelbrot_exceptions import InvalidRegion


class Test_Grid(unittest.TestCase):
    def setUp(self):
        self.region = Region(-2.0, 1.0, -1.0, 1.0)

    def tearDown(self):
        pass

    def test_region_attributes(self):
        region = self.region

        assert region.real_span == 3.0
        assert region.imag_span == 2.0
        assert num.allclose(region.aspect_ratio, 2.0/3.0)
        assert region.as_extent() == [-2.0, 1.0, -1.0, 1.0]

    def test_region_from_corners(self):
        region = Region.from_corners(-2-1j, 1+1j)
        assert region == self.region

    def test_region_from_limits(self):
        region = Region.from_limits([-2, 1], [-1, 1])
        assert region == self.region

        self.assertRaises(InvalidRegion, Region.from_limits, [-2], [-1, 1])
        self.assertRaises(InvalidRegion, Region.from_limits, -2, [-1, 1])

    def test_region_equality(self):
        assert Region(0, 1, 0, 1) == Region(0.0, 1.0, 0.0, 1.0)
        assert Region(0, 1, 0, 1) != Region(0, 1, 0, 2)
        assert hash(Region(0, 1, 0, 1)) == hash(Region(0.0, 1.0, 0.0, 1.0))
        assert Region(0, 1, 0, 1) != (0, 1, 0, 1)

    def test_inverted_and_degenerate_regions(self):
        self.assertRaises(InvalidRegion, Region, 1.0, -2.0, -1.0, 1.0)
        self.assertRaises(InvalidRegion, Region, 1.0, 1.0, -1.0, 1.0)
        self.assertRaises(InvalidRegion, Region, -2.0, 1.0, 1.0, -1.0)
        self.assertRaises(InvalidRegion, Region, -2.0, 1.0, 0.5, 0.5)

    def test_non_finite_regions(self):
        inf = float('inf')
        nan = float('nan')

        self.assertRaises(InvalidRegion, Region, -inf, 1.0, -1.0, 1.0)
        self.assertRaises(InvalidRegion, Region, -2.0, inf, -1.0, 1.0)
        self.assertRaises(InvalidRegion, Region, -2.0, 1.0, nan, 1.0)
        self.assertRaises(InvalidRegion, Region, -2.0, 1.0, -1.0, '1')
        self.assertRaises(InvalidRegion, Region, -2.0, 1.0, -1.0, None)

    def test_ensure_region(self):
        assert ensure_region(self.region) is self.region
        assert ensure_region((-2, 1, -1, 1)) == self.region
        assert ensure_region(num.array([-2, 1, -1, 1])) == self.region

        self.assertRaises(InvalidRegion, ensure_region, (-2, 1, -1))
        self.assertRaises(InvalidRegion, ensure_region, None)

    def test_derive_ny(self):
        assert derive_ny(self.region, 3) == 2
        assert derive_ny(self.region, 300) == 200
        assert derive_ny(self.region, 1000) == 667

    def test_derive_ny_rounds_halves_away_from_zero(self):
        wide = Region(-2.0, 2.0, 0.0, 1.0)

        # 10*0.25 == 2.5 and 2*0.25 == 0.5 exactly
        assert derive_ny(wide, 10) == 3
        assert derive_ny(wide, 2) == 1
        assert derive_ny(wide, 6) == 2

    def test_derive_ny_at_least_one(self):
        flat = Region(-2.0, 2.0, 0.0, 0.001)

        assert derive_ny(flat, 1) == 1
        assert derive_ny(flat, 100) == 1

    def test_span_overflow_is_invalid(self):
        # Each bound is finite but the difference is not
        self.assertRaises(InvalidRegion, Region, 0.0, 1.0, -1e308, 1e308)
        self.assertRaises(InvalidRegion, Region, -1e308, 1e308, -1.0, 1.0)
        self.assertRaises(InvalidRegion, ensure_region,
                          (-1.7e308, 1.7e308, -1.7e308, 1.7e308))

    def test_derive_ny_rejects_extreme_aspect_ratio(self):
        # imag_span/real_span overflows to inf
        thin = Region(0.0, 5e-324, 0.0, 1.0)
        self.assertRaises(InvalidRegion, derive_ny, thin, 1)

        # Finite but far more points than can be allocated
        tall = Region(0.0, 1e-10, 0.0, 1.0)
        self.assertRaises(InvalidRegion, derive_ny, tall, 1000)
        self.assertRaises(InvalidRegion, generate_grid, tall, 1000)

    def test_derive_ny_limits_grid_size(self):
        from mandelbrot.config import max_grid_points

        square = Region(0.0, 1.0, 0.0, 1.0)
        assert derive_ny(square, 10000) == 10000
        assert 10000*10000 <= max_grid_points
        self.assertRaises(InvalidRegion, derive_ny, square, 10001)

    def test_derive_ny_rejects_bad_nx(self):
        self.assertRaises(InvalidRegion, derive_ny, self.region, 0)
        self.assertRaises(InvalidRegion, derive_ny, self.region, -3)
        self.assertRaises(InvalidRegion, derive_ny, self.region, 2.5)

    def test_generate_grid(self):
        real_axis, imag_axis, c = generate_grid(self.region, 4)

        assert c.shape == (3, 4)
        assert c.dtype == num.complex128
        assert num.allclose(real_axis, [-2.0, -1.0, 0.0, 1.0])
        assert num.allclose(imag_axis, [-1.0, 0.0, 1.0])

        # Row major, row 0 at imag_min and column 0 at real_min
        assert c[0, 0] == -2.0-1.0j
        assert c[0, 3] == 1.0-1.0j
        assert c[2, 0] == -2.0+1.0j
        assert c[2, 3] == 1.0+1.0j
        for j in range(3):
            for i in range(4):
                assert c[j, i] == complex(real_axis[i], imag_axis[j])

    def test_generate_grid_includes_end_points(self):
        region = Region(-0.7440, -0.7433, 0.1315, 0.1322)
        real_axis, imag_axis, c = generate_grid(region, 7)

        assert real_axis[0] == region.real_min
        assert real_axis[-1] == region.real_max
        assert imag_axis[0] == region.imag_min
        assert imag_axis[-1] == region.imag_max
        assert num.allclose(num.diff(real_axis), region.real_span/6)

    def test_generate_grid_single_column(self):
        real_axis, imag_axis, c = generate_grid(self.region, 1)

        assert c.shape == (1, 1)
        assert c[0, 0] == -2.0-1.0j

    def test_generate_grid_errors(self):
        self.assertRaises(InvalidRegion, generate_grid, self.region, 0)
        self.assertRaises(InvalidRegion, generate_grid, (1, 0, 0, 1), 10)


################################################################################

if __name__ == "__main__":
    unittest.main()
