"""Tests for the numeric validation helpers."""
import math

import numpy as np
import pytest
from homesim.core.errors import InvalidArgumentError
from homesim.utils.functions import require_finite, require_fraction, require_non_negative


@pytest.mark.parametrize("value", [0, -3.5, 12, np.float64(2.5)])
def test_require_finite_returns_float(value):
    # Act
    result = require_finite(value, "Temperature")

    # Assert
    assert isinstance(result, float)
    assert result == float(value)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_require_finite_rejects_non_finite(value):
    # Act & Assert
    with pytest.raises(InvalidArgumentError, match="Temperature must be a finite number"):
        require_finite(value, "Temperature")


@pytest.mark.parametrize("value", ["warm", None, [1.0, 2.0]])
def test_require_finite_rejects_non_numeric(value):
    # Act & Assert
    with pytest.raises(InvalidArgumentError, match="Temperature must be a finite number"):
        require_finite(value, "Temperature")


def test_require_non_negative():
    # Act & Assert
    assert require_non_negative(0, "Duration") == 0.0
    with pytest.raises(InvalidArgumentError, match="Duration must be non-negative"):
        require_non_negative(-0.1, "Duration")
    with pytest.raises(InvalidArgumentError, match="Duration"):
        require_non_negative("1h", "Duration")


def test_require_fraction():
    # Act & Assert
    assert require_fraction(1, "Efficiency") == 1.0
    with pytest.raises(InvalidArgumentError, match="between 0 and 1"):
        require_fraction(1.01, "Efficiency")
