"""
torchquadrature: classical quadrature rules for PyTorch.

Function-based integration over a finite interval (evaluates callable):
    sum_lower, sum_upper, trapezoid, romberg, romberg_info,
    simpson, simpson_info

Tolerances:
    default_epsilon

Warnings:
    QuadratureWarning
"""

from torchquadrature._exceptions import QuadratureWarning
from torchquadrature._romberg import romberg, romberg_info
from torchquadrature._simpson import simpson, simpson_info
from torchquadrature._sums import sum_lower, sum_upper
from torchquadrature._tolerances import default_epsilon
from torchquadrature._trapezoid import trapezoid

__all__ = [
    # Fixed partition
    "sum_lower",
    "sum_upper",
    "trapezoid",
    # Extrapolated and adaptive
    "romberg",
    "romberg_info",
    "simpson",
    "simpson_info",
    # Tolerances
    "default_epsilon",
    # Warnings
    "QuadratureWarning",
]

__version__ = "0.1.0"
