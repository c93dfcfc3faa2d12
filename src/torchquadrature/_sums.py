"""Lower and upper Riemann sums on a uniform partition."""

from typing import Union

import torch
from torch import Tensor

from torchquadrature._validation import (
    Evaluator,
    _as_bounds,
    _check_count,
    _evaluator,
)


def sum_lower(
    f: Evaluator,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
) -> Tensor:
    """
    Lower Riemann sum of f over [a, b] with n uniform subintervals.

    Samples f at the right edge of every subinterval and scales the total by
    the step ``h = (b - a) / n``.

    Parameters
    ----------
    f : callable
        Integrand. Receives a 0-d tensor, returns a scalar.
    a, b : float or Tensor
        Lower and upper integration bounds (scalars).
    n : int
        Number of subintervals. Must be at least 1.

    Returns
    -------
    Tensor
        0-d tensor holding the sum.

    Raises
    ------
    ValueError
        If ``n < 1``.

    Notes
    -----
    This is a right-endpoint sum. It bounds the integral from below only for
    monotonically decreasing integrands on [a, b]; for other integrands it is
    simply a first-order approximation.

    Samples are accumulated for ``i = n`` down to ``1``, so results are
    reproducible for a deterministic f.

    With ``a > b`` the samples fall on the left edges of the subintervals
    of [b, a], so the two sums swap roles:
    ``sum_lower(f, b, a, n) == -sum_upper(f, a, b, n)``.

    Examples
    --------
    >>> sum_lower(lambda x: x, 0.0, 1.0, 4)  # 0.625
    """
    n = _check_count(n, 1)
    a, b = _as_bounds(a, b)
    evaluate = _evaluator(f, a)

    h = (b - a) / n
    total = torch.zeros((), dtype=a.dtype, device=a.device)
    for i in range(n, 0, -1):
        total = total + evaluate(a + i * h)

    return total * h


def sum_upper(
    f: Evaluator,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
) -> Tensor:
    """
    Upper Riemann sum of f over [a, b] with n uniform subintervals.

    Computed as a correction to :func:`sum_lower`:
    ``sum_lower(f, a, b, n) + (b - a) * (f(a) - f(b)) / n``, which swaps the
    right edge sample of the last subinterval for the left edge of the first.

    Reversing the bounds swaps and negates the two sums:
    ``sum_upper(f, b, a, n) == -sum_lower(f, a, b, n)``.

    Parameters
    ----------
    f : callable
        Integrand.
    a, b : float or Tensor
        Integration bounds.
    n : int
        Number of subintervals. Must be at least 1.

    Returns
    -------
    Tensor
        0-d tensor holding the sum.

    Examples
    --------
    >>> sum_upper(lambda x: x, 0.0, 1.0, 4)  # 0.375
    """
    n = _check_count(n, 1)
    a, b = _as_bounds(a, b)
    evaluate = _evaluator(f, a)

    return sum_lower(f, a, b, n) + (b - a) * (evaluate(a) - evaluate(b)) / n
