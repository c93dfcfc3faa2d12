"""Exceptions and warnings for quadrature rules."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., recursion depth cap reached)."""

    pass
