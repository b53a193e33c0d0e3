from __future__ import annotations

import pytest

from configurator.core.bom import generate_bom
from configurator.core.catalog import FOOT_OPTIONS, HARDWARE_KIT_SKUS, PRICES
from configurator.models import AccessoryFlags, BomConfig, StandoffPlan, StandoffType


def _rows(result) -> list[tuple[str, str]]:
    return [(ln.inventory_id, ln.quantity) for ln in result.lines]


def _feet(sku: str, first_rung: float):
    return next(f for f in FOOT_OPTIONS if f.sku == sku and f.first_rung_inches == first_rung)


def test_two_sections_one_splice_one_pair() -> None:
    result = generate_bom([7, 6], 1, StandoffPlan(positions_ft=[8.0]), None, "LAD-SO2", 12.0)
    assert _rows(result) == [
        ("FL-10", "0.7"),
        ("FL-10", "0.6"),
        ("LADDER SPLICE KIT", "1"),
        ("LAD-SO2", "2"),
        ("LAD-CP1", "2"),
        ("LAD-SO1G", "2"),
    ] + [(sku, "8") for sku in HARDWARE_KIT_SKUS]
    assert result.total_price == pytest.approx(13 * 64.06 + 48.6 + 22.5)


def test_equal_sections_are_not_merged() -> None:
    result = generate_bom([10, 10], 1, StandoffPlan(), None, "LAD-SO2", 12.0)
    assert _rows(result)[:2] == [("FL-10", "1.0"), ("FL-10", "1.0")]


def test_alt_clamp_offset_uses_alternate_clamp_for_all_pairs() -> None:
    plan = StandoffPlan(positions_ft=[3.0, 10.0, 15.0])
    result = generate_bom([10, 8], 1, plan, None, "LAD-SO2", 10.875)
    rows = dict(_rows(result))
    assert rows["LAD-CP2"] == "6"
    assert "LAD-CP1" not in rows
    assert rows["LAD-SO1G"] == "6"
    assert rows["19634"] == str(3 * 2 * 6)


@pytest.mark.parametrize("offset", [14.25, 15.375, 10.875 + 1e-7])
def test_other_alt_clamp_offsets(offset: float) -> None:
    result = generate_bom([10], 0, StandoffPlan(positions_ft=[3.0, 8.0]), None, "LAD-SO3", offset)
    skus = [ln.inventory_id for ln in result.lines]
    assert "LAD-CP2" in skus
    assert "LAD-CP1" not in skus


def test_feet_pair_combines_with_same_sku() -> None:
    feet = _feet("LAD-SO3", 14.125)
    result = generate_bom([7, 7], 1, StandoffPlan(positions_ft=[6.0, 12.0]), feet, "LAD-SO3", 13.125)
    rows = dict(_rows(result))
    assert rows["LAD-SO3"] == "6"
    # 2 feet standoffs * 2 + 4 standard clamp plates * 4
    assert rows["0156022"] == "20"
    expected = 14 * 64.06 + 48.6 + 2 * PRICES["LAD-SO3"] + PRICES["FEET_SO3"]
    assert result.total_price == pytest.approx(expected)


def test_feet_pair_of_other_family_gets_its_own_line() -> None:
    feet = _feet("LAD-SO3", 13.0)
    result = generate_bom([7, 7], 1, StandoffPlan(positions_ft=[6.0, 12.0]), feet, "LAD-SO2", 12.0)
    support_rows = [r for r in _rows(result) if r[0] in ("LAD-SO2", "LAD-SO3")]
    assert support_rows == [("LAD-SO2", "4"), ("LAD-SO3", "2")]


def test_feet_price_follows_family() -> None:
    feet = _feet("LAD-SO2", 11.875)
    with_feet = generate_bom([5], 0, StandoffPlan(), feet, "LAD-SO2", 12.0)
    without = generate_bom([5], 0, StandoffPlan(), None, "LAD-SO2", 12.0)
    assert with_feet.total_price - without.total_price == pytest.approx(PRICES["FEET_SO2"])
    assert feet.type == StandoffType.SO2


@pytest.mark.parametrize(
    "flags, expected",
    [
        (AccessoryFlags(walk_through=True), ["FL-WT-01"]),
        (AccessoryFlags(p_returns=True), []),
        (AccessoryFlags(p_returns=True, safety_gate=True), []),
        (AccessoryFlags(walk_through=True, safety_gate=True), ["FL-WT-01"]),
        (AccessoryFlags(walk_through=True, p_returns=True), ["FL-WT-01", "FL-PR-02"]),
        (
            AccessoryFlags(walk_through=True, p_returns=True, safety_gate=True, security_cover=True),
            ["FL-WT-01", "FL-PR-02", "LSG-2030-PCY", "FL-LGDFP-02"],
        ),
        (AccessoryFlags(security_cover=True), ["FL-LGDFP-02"]),
    ],
)
def test_accessory_chain(flags: AccessoryFlags, expected: list[str]) -> None:
    result = generate_bom([], 0, StandoffPlan(), None, "LAD-SO2", 12.0, flags)
    assert _rows(result) == [(sku, "1") for sku in expected]
    assert result.total_price == pytest.approx(sum(PRICES[sku] for sku in expected))


def test_empty_inputs_give_zero_cost_bom() -> None:
    result = generate_bom([], 0, StandoffPlan(), None, "LAD-SO2", 12.0)
    assert result.lines == []
    assert result.total_price == 0


def test_negative_splice_count_is_ignored() -> None:
    result = generate_bom([5], -1, StandoffPlan(), None, "LAD-SO2", 12.0)
    assert _rows(result) == [("FL-10", "0.5")]


def test_disabled_rule_is_skipped() -> None:
    config = BomConfig(disabled_rules=["bom.hardware_kit"])
    result = generate_bom([10], 0, StandoffPlan(positions_ft=[3.0]), None, "LAD-SO2", 12.0, config=config)
    assert not any(ln.inventory_id in HARDWARE_KIT_SKUS for ln in result.lines)


def test_generation_is_pure() -> None:
    args = ([8, 8, 7], 2, StandoffPlan(positions_ft=[3.0, 10.0, 17.0, 22.0]),
            _feet("LAD-SO2", 8.5), "LAD-SO3", 14.25,
            AccessoryFlags(walk_through=True, security_cover=True))
    first = generate_bom(*args)
    second = generate_bom(*args)
    assert first.lines == second.lines
    assert first.total_price == second.total_price
