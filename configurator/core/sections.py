"""Sectioning in whole-foot increments, 3-10 ft per section, fewest splices."""

from __future__ import annotations
import logging
import math

from configurator.core.errors import InvalidHeightError, UnsectionizableHeightError

logger = logging.getLogger(__name__)

MIN_SECTION_FT = 3
MAX_SECTION_FT = 10
MAX_SECTION_COUNT = 100


def _try_build(target: int, n: int) -> list[int] | None:
    base = target // n
    if base < MIN_SECTION_FT:
        return None
    rem = target - base * n
    sections = [base + (1 if i < rem else 0) for i in range(n)]
    if any(s > MAX_SECTION_FT for s in sections):
        return None
    return sections


def sectionize(total_feet: float) -> list[int]:
    """
    Split a ladder length into shippable sections.

    The target is the shortest whole-foot length >= the request (at least
    3 ft). Section counts are tried upward from the fewest that could work,
    so the first feasible split also has the fewest splices.
    """
    if total_feet <= 0:
        raise InvalidHeightError()

    target = max(MIN_SECTION_FT, math.ceil(total_feet))
    n = max(1, math.ceil(target / MAX_SECTION_FT))
    while n <= MAX_SECTION_COUNT:
        sections = _try_build(target, n)
        if sections is not None:
            logger.debug("Sectioned %d ft into %s", target, sections)
            return sections
        n += 1
    raise UnsectionizableHeightError()


def count_splices(sections: list[int]) -> int:
    return max(0, len(sections) - 1)
