from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from configurator.models import LadderParams


def test_defaults() -> None:
    params = LadderParams()
    assert params.total_inches == 240
    assert params.height_spec().total_inches == 240


def test_height_ft_upper_bound() -> None:
    assert LadderParams(height_ft=1000).total_inches == 12000
    with pytest.raises(ValidationError):
        LadderParams(height_ft=1001)
    with pytest.raises(ValidationError):
        LadderParams(height_ft=10**400)


@pytest.mark.parametrize(
    "field", ["height_in", "standoff_in", "parapet_width_in", "parapet_height_in"],
)
@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_float_inputs_must_be_finite(field: str, value: float) -> None:
    with pytest.raises(ValidationError):
        LadderParams(**{field: value})
