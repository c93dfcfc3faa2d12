import math

import numpy as np
import pytest
import scipy.integrate
import torch


class TestRomberg:
    def test_cubic_scenario(self):
        """x^3 on [0, 1] with 5 levels is exact to rounding"""
        from torchquadrature import romberg

        result = romberg(lambda x: x**3, 0.0, 1.0, 5)

        assert abs(result.item() - 0.25) < 1e-10

    @pytest.mark.parametrize("n", [0, 1, 2, 3])
    def test_exact_for_polynomials(self, n):
        """Level n is exact for polynomials of degree 2n + 1"""
        from torchquadrature import romberg

        degree = 2 * n + 1

        result = romberg(lambda x: x**degree + 1, 0.0, 2.0, n)
        expected = 2.0 ** (degree + 1) / (degree + 1) + 2.0

        assert torch.allclose(
            result, torch.tensor(expected, dtype=result.dtype), rtol=1e-12
        )

    def test_zero_levels_is_one_panel_trapezoid(self):
        from torchquadrature import romberg

        result = romberg(torch.exp, 0.0, 1.0, 0)
        expected = (1.0 + math.e) / 2

        assert torch.allclose(
            result, torch.tensor(expected, dtype=result.dtype)
        )

    def test_one_level_is_simpson(self):
        """One extrapolation step reproduces the one-panel Simpson rule"""
        from torchquadrature import romberg

        result = romberg(torch.exp, 0.0, 1.0, 1)
        expected = (1.0 + 4.0 * math.exp(0.5) + math.e) / 6.0

        assert torch.allclose(
            result, torch.tensor(expected, dtype=result.dtype)
        )

    def test_matches_scipy(self):
        """Compare with scipy.integrate.quad"""
        from torchquadrature import romberg

        result = romberg(lambda x: torch.exp(-(x**2)), -2, 2, 8)
        expected, _ = scipy.integrate.quad(lambda x: np.exp(-(x**2)), -2, 2)

        assert torch.allclose(
            result, torch.tensor(expected, dtype=result.dtype), rtol=1e-9
        )

    def test_more_levels_more_accurate(self):
        from torchquadrature import romberg

        errors = [
            abs(romberg(torch.sin, 0, math.pi, n).item() - 2.0)
            for n in range(1, 5)
        ]

        assert errors == sorted(errors, reverse=True)

    def test_number_of_evaluations(self):
        """Each level only samples the new midpoints"""
        from torchquadrature import romberg

        calls = []

        def f(x):
            calls.append(x.item())
            return torch.sin(x)

        romberg(f, 0.0, 1.0, 3)

        assert len(calls) == 2**3 + 1
        assert sorted(calls) == [k / 8 for k in range(9)]

    def test_reversed_bounds_negate(self):
        from torchquadrature import romberg

        forward = romberg(torch.cos, 0.0, 1.0, 4)
        backward = romberg(torch.cos, 1.0, 0.0, 4)

        assert torch.allclose(backward, -forward)

    def test_negative_levels_raise(self):
        from torchquadrature import romberg

        with pytest.raises(ValueError, match="at least 0"):
            romberg(torch.sin, 0, 1, -1)


class TestRombergInfo:
    def test_returns_error_and_info(self):
        from torchquadrature import romberg_info

        result, error, info = romberg_info(torch.sin, 0, math.pi, 6)

        assert torch.allclose(
            result, torch.tensor(2.0, dtype=result.dtype), rtol=1e-10
        )
        assert error < 1e-8
        assert info["neval"] == 2**6 + 1
        assert info["levels"] == 6

    def test_zero_levels_error_is_infinite(self):
        from torchquadrature import romberg_info

        result, error, info = romberg_info(torch.sin, 0, math.pi, 0)

        assert torch.isinf(error)
        assert info["neval"] == 2

    def test_matches_romberg(self):
        from torchquadrature import romberg, romberg_info

        result, _, _ = romberg_info(torch.exp, -1.0, 1.0, 4)

        assert torch.equal(result, romberg(torch.exp, -1.0, 1.0, 4))


class TestRombergGradients:
    def test_gradient_through_upper_bound(self):
        """Exact for x^2 from level 1 on, so d/db integral_0^b x^2 dx = b^2"""
        from torchquadrature import romberg

        b = torch.tensor(1.5, dtype=torch.float64, requires_grad=True)

        result = romberg(lambda x: x**2, 0.0, b, 2)
        result.backward()

        assert torch.allclose(b.grad, torch.tensor(2.25, dtype=torch.float64))

    def test_gradient_through_closure(self):
        from torchquadrature import romberg

        theta = torch.tensor(3.0, dtype=torch.float64, requires_grad=True)

        result = romberg(lambda x: torch.sin(theta * x), 0.0, 1.0, 6)
        result.backward()

        # d/dtheta (1 - cos(theta)) / theta
        expected = math.sin(3.0) / 3.0 - (1.0 - math.cos(3.0)) / 9.0

        assert torch.allclose(
            theta.grad, torch.tensor(expected, dtype=torch.float64), rtol=1e-8
        )
