"""Benchmarks for quadrature rules.

This module benchmarks the torchquadrature rules (Riemann sums, trapezoid,
Romberg, adaptive Simpson) and compares their accuracy against the number
of function evaluations they spend.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable

import numpy as np
import torch

# torchquadrature imports
from torchquadrature import (
    romberg_info,
    simpson_info,
    sum_lower,
    sum_upper,
    trapezoid,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


class CountingIntegrand:
    """Wraps an integrand and counts its evaluations."""

    def __init__(self, f: Callable[[torch.Tensor], torch.Tensor]):
        self.f = f
        self.calls = 0

    def __call__(self, x: torch.Tensor) -> torch.Tensor:
        self.calls += 1
        return self.f(x)


def benchmark_timing():
    """Time each rule on sin(x) over [0, pi]."""
    print("=" * 70)
    print("Timing on sin(x), [0, pi]")
    print("=" * 70)
    print(f"{'rule':<28} {'mean':>12} {'std':>12}")
    print("-" * 70)

    cases = [
        ("sum_lower n=1024", sum_lower, (torch.sin, 0, math.pi, 1024)),
        ("sum_upper n=1024", sum_upper, (torch.sin, 0, math.pi, 1024)),
        ("trapezoid n=1024", trapezoid, (torch.sin, 0, math.pi, 1024)),
        ("romberg n=10", romberg_info, (torch.sin, 0, math.pi, 10)),
        ("simpson eps=1e-10", simpson_info, (torch.sin, 0, math.pi, 1e-10, 50)),
    ]

    for name, func, args in cases:
        stats = benchmark(func, *args)
        print(
            f"{name:<28} {format_time(stats['mean']):>12} "
            f"{format_time(stats['std']):>12}"
        )


def benchmark_accuracy():
    """Error versus evaluations on exp(-x^2) over [-2, 2]."""
    print("=" * 70)
    print("Accuracy on exp(-x^2), [-2, 2]")
    print("=" * 70)
    print(f"{'rule':<28} {'evaluations':>12} {'abs error':>14}")
    print("-" * 70)

    exact = math.sqrt(math.pi) * math.erf(2.0)

    def gaussian(x):
        return torch.exp(-(x**2))

    for n in (16, 64, 256):
        f = CountingIntegrand(gaussian)
        result = trapezoid(f, -2, 2, n)
        print(
            f"{f'trapezoid n={n}':<28} {f.calls:>12} "
            f"{abs(result.item() - exact):>14.3e}"
        )

    for n in (4, 6, 8):
        result, _, info = romberg_info(gaussian, -2, 2, n)
        print(
            f"{f'romberg n={n}':<28} {info['neval']:>12} "
            f"{abs(result.item() - exact):>14.3e}"
        )

    for epsilon in (1e-4, 1e-8, 1e-12):
        result, _, info = simpson_info(gaussian, -2, 2, epsilon, 50)
        print(
            f"{f'simpson eps={epsilon:.0e}':<28} {info['neval']:>12} "
            f"{abs(result.item() - exact):>14.3e}"
        )


if __name__ == "__main__":
    benchmark_timing()
    print()
    benchmark_accuracy()
