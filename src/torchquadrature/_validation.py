"""Argument coercion shared by the quadrature rules."""

import operator
from typing import Callable, Tuple, Union

import torch
from torch import Tensor

Evaluator = Callable[[Tensor], Union[Tensor, float]]


def _as_bounds(
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tuple[Tensor, Tensor]:
    """Convert integration bounds to 0-d tensors sharing a dtype and device.

    The dtype and device are taken from the first tensor bound, otherwise
    float64 on CPU. Integer and boolean tensor bounds are promoted to
    float64.
    """
    if isinstance(a, Tensor):
        dtype = a.dtype
        device = a.device
    elif isinstance(b, Tensor):
        dtype = b.dtype
        device = b.device
    else:
        dtype = torch.float64
        device = torch.device("cpu")

    if dtype.is_complex:
        raise TypeError(f"a and b must be real, got dtype {dtype}")
    if not dtype.is_floating_point:
        dtype = torch.float64

    if isinstance(a, Tensor):
        a = a.to(dtype=dtype)
    else:
        a = torch.tensor(a, dtype=dtype, device=device)
    if isinstance(b, Tensor):
        b = b.to(dtype=dtype, device=a.device)
    else:
        b = torch.tensor(b, dtype=dtype, device=device)

    if a.dim() > 0 or b.dim() > 0:
        raise ValueError(
            f"a and b must be scalars, got shapes {tuple(a.shape)} and {tuple(b.shape)}"
        )

    return a, b


def _check_count(n: int, minimum: int, name: str = "n") -> int:
    """Return ``n`` as an int, rejecting non-integers and values below minimum."""
    if isinstance(n, bool):
        raise TypeError(f"{name} must be an int, got bool")
    try:
        n = operator.index(n)
    except TypeError:
        raise TypeError(
            f"{name} must be an int, got {type(n).__name__}"
        ) from None
    if n < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {n}")
    return n


def _evaluator(f: Evaluator, reference: Tensor) -> Callable[[Tensor], Tensor]:
    """Wrap f so every sample comes back as a tensor like ``reference``.

    Exceptions raised by f and non-finite values are passed through.
    """

    def evaluate(x: Tensor) -> Tensor:
        return torch.as_tensor(
            f(x), dtype=reference.dtype, device=reference.device
        )

    return evaluate
