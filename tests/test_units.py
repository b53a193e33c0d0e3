from __future__ import annotations

import pytest

from configurator.core.units import (
    format_feet, format_inches, near, normalize_sku, round_half_up, round_to,
)


def test_round_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_to(2.3456) == pytest.approx(2.346)
    assert round_to(14.125) == 14.125


def test_labels() -> None:
    assert format_feet(10.5) == "10'-6″"
    assert format_inches(123) == "10'-3″"
    assert format_inches(240) == "20'-0″"


def test_near() -> None:
    assert near(1.0, 1.0 + 1e-7)
    assert not near(1.0, 1.0 + 1e-5)


def test_normalize_sku() -> None:
    assert normalize_sku("FL‐WT―01") == "FL-WT-01"
    assert normalize_sku("LADDER SPLICE KIT") == "LADDER SPLICE KIT"
