from __future__ import annotations

import pytest

from configurator.core.rungs import build_rung_grid
from configurator.core.sections import sectionize
from configurator.core.splices import rung_midpoints_ft, splice_positions


def test_splice_snaps_to_midpoint_between_rungs() -> None:
    grid = build_rung_grid(240, False, 12)
    # Boundary at 10 ft sits exactly between the 9.5 and 10.5 ft midpoints;
    # the first one in grid order (top down) wins
    assert splice_positions([10, 10], grid.positions_in) == [10.5]


def test_two_section_13ft_ladder() -> None:
    grid = build_rung_grid(156, False, 12)
    assert splice_positions([7, 6], grid.positions_in) == [7.5]


def test_single_section_has_no_splice() -> None:
    grid = build_rung_grid(120, False, 12)
    assert splice_positions([10], grid.positions_in) == []


def test_empty_sections_have_no_splice() -> None:
    assert splice_positions([], [120.0, 108.0]) == []


def test_without_rungs_boundary_is_kept() -> None:
    assert splice_positions([5, 5], []) == [5]


def test_midpoints() -> None:
    assert rung_midpoints_ft([36, 24, 12]) == pytest.approx([2.5, 1.5])


def test_splice_count_matches_sections() -> None:
    for height in range(36, 600, 11):
        sections = sectionize(height / 12)
        grid = build_rung_grid(height, False, None)
        out = splice_positions(sections, grid.positions_in)
        assert len(out) == len(sections) - 1
        assert all(0 < s < height / 12 + 1 for s in out)
