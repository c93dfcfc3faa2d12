"""Default tolerances for adaptive quadrature."""

import torch


def default_epsilon(dtype: torch.dtype) -> float:
    """Return a dtype-appropriate default absolute tolerance.

    Parameters
    ----------
    dtype : torch.dtype
        The working dtype of the integration.

    Returns
    -------
    float
        Absolute error target for adaptive rules.
    """
    if dtype in (torch.float16, torch.bfloat16):
        return 1e-3
    elif dtype == torch.float32:
        return 1e-6
    else:  # float64 and others
        return 1e-10
