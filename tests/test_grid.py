# tests/test_grid.py
import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from wavesim_core import build_coordinates, initial_field, triangular_pulse


class TestBuildCoordinates:

    def test_endpoints_are_exact(self):
        x = build_coordinates(100, 0.0, 10.0)
        assert x.shape == (100,)
        assert x[0] == 0.0
        assert x[-1] == 10.0

    def test_spacing_is_uniform(self):
        x = build_coordinates(7, -1.5, 4.5)
        assert_allclose(np.diff(x), 1.0)

    def test_point_formula(self):
        ngrid, x1, x2 = 11, 2.0, 3.0
        x = build_coordinates(ngrid, x1, x2)
        expected = [x1 + i * (x2 - x1) / (ngrid - 1) for i in range(ngrid)]
        assert_allclose(x, expected, rtol=0, atol=1e-15)

    def test_two_points_are_the_end_points(self):
        assert_array_equal(build_coordinates(2, 1.0, 3.0), [1.0, 3.0])

    def test_coordinates_are_read_only(self):
        x = build_coordinates(5, 0.0, 1.0)
        with pytest.raises(ValueError):
            x[0] = 42.0


class TestTriangularPulse:

    def test_peak_at_midpoint(self):
        # 101 points on [0, 10]: the midpoint 5.0 is grid point 50.
        x = build_coordinates(101, 0.0, 10.0)
        rho = triangular_pulse(x, 0.0, 10.0)
        assert rho[50] == pytest.approx(0.25)
        assert rho.max() == pytest.approx(0.25)

    def test_zero_outside_band(self):
        x = build_coordinates(101, 0.0, 10.0)
        rho = triangular_pulse(x, 0.0, 10.0)
        outside = (x < 2.5) | (x > 7.5)
        assert np.all(rho[outside] == 0.0)

    def test_zero_at_band_edges(self):
        x = np.array([2.5, 7.5])
        assert_allclose(triangular_pulse(x, 0.0, 10.0), 0.0, atol=1e-15)

    def test_linear_inside_band(self):
        x = np.array([3.0, 4.0, 6.0, 7.0])
        assert_allclose(triangular_pulse(x, 0.0, 10.0), [0.05, 0.15, 0.15, 0.05])

    def test_profile_is_symmetric(self):
        x = build_coordinates(101, -3.0, 5.0)
        rho = triangular_pulse(x, -3.0, 5.0)
        assert_allclose(rho, rho[::-1], atol=1e-12)

    def test_shape_does_not_depend_on_domain_offset(self):
        x = build_coordinates(41, 0.0, 4.0)
        shifted = build_coordinates(41, 100.0, 104.0)
        assert_allclose(
            triangular_pulse(x, 0.0, 4.0),
            triangular_pulse(shifted, 100.0, 104.0),
            atol=1e-12,
        )


class TestInitialField:

    def test_reference_run(self, make_params):
        params = make_params()
        x, rho = initial_field(params)

        assert x.shape == rho.shape == (params.ngrid,)
        assert x[0] == params.x1
        assert x[-1] == params.x2
        assert rho[0] == 0.0
        assert rho[-1] == 0.0
        assert 0.0 < rho.max() <= 0.25

    def test_profile_is_writable(self, make_params):
        _, rho = initial_field(make_params())
        rho[0] = 1.0
        assert rho[0] == 1.0
