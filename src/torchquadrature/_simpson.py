"""Adaptive recursive Simpson's rule."""

import warnings
from typing import Callable, Optional, Tuple, Union

from torch import Tensor

from torchquadrature._exceptions import QuadratureWarning
from torchquadrature._tolerances import default_epsilon
from torchquadrature._validation import (
    Evaluator,
    _as_bounds,
    _check_count,
    _evaluator,
)


def _adaptive_simpson(
    evaluate: Callable[[Tensor], Tensor],
    a: Tensor,
    b: Tensor,
    epsilon: float,
    level: int,
    level_max: int,
    info: dict,
) -> Tuple[Tensor, Tensor]:
    """Recursive Simpson estimate over [a, b].

    Returns the estimate and its error estimate, and updates the counters
    in ``info``.
    """
    level += 1

    h = b - a
    c = (a + b) / 2
    d = (a + c) / 2
    e = (c + b) / 2

    fa = evaluate(a)
    fb = evaluate(b)
    fc = evaluate(c)
    fd = evaluate(d)
    fe = evaluate(e)
    info["neval"] += 5
    info["max_level"] = max(info["max_level"], level)

    one_simp = h * (fa + 4 * fc + fb) / 6
    two_simp = h * (fa + 4 * fd + 2 * fc + 4 * fe + fb) / 12
    difference = two_simp - one_simp

    if level >= level_max:
        info["npanels"] += 1
        info["depth_cap_hits"] += 1
        return two_simp, difference.abs() / 15

    if difference.abs() < 15 * epsilon:
        info["npanels"] += 1
        return two_simp + difference / 15, difference.abs() / 15

    left, left_error = _adaptive_simpson(
        evaluate, a, c, epsilon / 2, level, level_max, info
    )
    right, right_error = _adaptive_simpson(
        evaluate, c, b, epsilon / 2, level, level_max, info
    )

    return left + right, left_error + right_error


def simpson_info(
    f: Evaluator,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    epsilon: Optional[float] = None,
    level_max: int = 20,
) -> Tuple[Tensor, Tensor, dict]:
    """
    Like simpson, but returns an error estimate and info dict.

    Does not warn when the depth cap is reached; check ``info["converged"]``
    instead.

    Returns
    -------
    result : Tensor
        Integral approximation.
    error : Tensor
        Sum of the local error estimates ``|S2 - S1| / 15`` of the accepted
        panels.
    info : dict
        Information dict with keys:
        - "neval": Number of function evaluations
        - "npanels": Number of accepted panels
        - "max_level": Deepest recursion level reached
        - "depth_cap_hits": Panels accepted at ``level_max``
        - "converged": Whether every panel met its tolerance
    """
    level_max = _check_count(level_max, 1, name="level_max")
    a, b = _as_bounds(a, b)

    if epsilon is None:
        epsilon = default_epsilon(a.dtype)
    elif not epsilon >= 0:
        raise ValueError(f"epsilon must be non-negative, got {epsilon}")

    info = {
        "neval": 0,
        "npanels": 0,
        "max_level": 0,
        "depth_cap_hits": 0,
    }

    result, error = _adaptive_simpson(
        _evaluator(f, a), a, b, epsilon, 0, level_max, info
    )
    info["converged"] = info["depth_cap_hits"] == 0

    return result, error, info


def simpson(
    f: Evaluator,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    epsilon: Optional[float] = None,
    level_max: int = 20,
) -> Tensor:
    """
    Integrate f over [a, b] using adaptive Simpson's rule.

    Each panel compares the one-panel Simpson estimate against the two-panel
    composite estimate. Panels whose difference is below ``15 * epsilon``
    are accepted with a Richardson correction; the others are bisected and
    each half is integrated with half the tolerance.

    Parameters
    ----------
    f : callable
        Integrand. Receives a 0-d tensor, returns a scalar.
    a, b : float or Tensor
        Lower and upper integration bounds (scalars).
    epsilon : float, optional
        Absolute error target for the whole interval. Defaults to a value
        suited to the working dtype, see :func:`default_epsilon`.
    level_max : int
        Maximum recursion depth. Must be at least 1. Panels at this depth
        are accepted regardless of their error.

    Returns
    -------
    Tensor
        0-d tensor holding the integral approximation.

    Raises
    ------
    ValueError
        If ``level_max < 1`` or ``epsilon`` is negative or NaN.

    Warns
    -----
    QuadratureWarning
        If any panel was accepted at the depth cap.

    Notes
    -----
    Every recursive call evaluates f at five points, so the cost adapts to
    the integrand and is bounded by ``5 * (2^level_max - 1)`` evaluations.

    Examples
    --------
    >>> simpson(torch.sin, 0, torch.pi, 1e-8)  # approximately 2.0
    """
    result, error, info = simpson_info(f, a, b, epsilon, level_max)

    if not info["converged"]:
        warnings.warn(
            f"Simpson recursion reached level_max={level_max} on "
            f"{info['depth_cap_hits']} of {info['npanels']} panels. "
            f"Error estimate: {error.item():.2e}",
            QuadratureWarning,
        )

    return result
