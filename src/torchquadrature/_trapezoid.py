"""Composite trapezoidal rule for a callable integrand."""

from typing import Union

from torch import Tensor

from torchquadrature._validation import (
    Evaluator,
    _as_bounds,
    _check_count,
    _evaluator,
)


def trapezoid(
    f: Evaluator,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
) -> Tensor:
    """
    Integrate f over [a, b] using the composite trapezoidal rule.

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
        0-d tensor holding the integral approximation.

    Raises
    ------
    ValueError
        If ``n < 1``.

    Notes
    -----
    Uses ``n + 1`` evaluations of f. The error is O(h^2) in the step
    ``h = (b - a) / n`` for smooth integrands, and the rule is exact for
    linear functions.

    Differentiable with respect to tensor bounds and parameters captured in
    f's closure.

    Examples
    --------
    >>> trapezoid(lambda x: x**3, 0.0, 1.0, 1000)  # approximately 0.25
    """
    n = _check_count(n, 1)
    a, b = _as_bounds(a, b)
    evaluate = _evaluator(f, a)

    h = (b - a) / n
    total = (evaluate(a) + evaluate(b)) / 2
    for i in range(1, n):
        total = total + evaluate(a + i * h)

    return total * h
