import warnings

import pytest

from torchquadrature import QuadratureWarning


class TestExceptions:
    def test_quadrature_warning_is_user_warning(self):
        assert issubclass(QuadratureWarning, UserWarning)

    def test_quadrature_warning_can_be_raised(self):
        with pytest.warns(QuadratureWarning, match="test"):
            warnings.warn("test", QuadratureWarning)

    def test_quadrature_warning_can_be_escalated(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", QuadratureWarning)

            with pytest.raises(QuadratureWarning, match="escalated"):
                warnings.warn("escalated", QuadratureWarning)
