"""Height resolution: nominal ladder length and first-rung height."""

from __future__ import annotations
import logging
import math

from configurator.models import HeightPlan, FootCatalogEntry, StandoffType
from configurator.core.catalog import (
    FOOT_OPTIONS, FIRST_RUNG_MIN_IN, FIRST_RUNG_MAX_IN, RUNG_PITCH_IN,
)
from configurator.core.errors import InvalidHeightError
from configurator.core.units import EPSILON, round_half_up

logger = logging.getLogger(__name__)


def first_rung_in_window(first_rung_inches: float) -> bool:
    return FIRST_RUNG_MIN_IN - EPSILON <= first_rung_inches <= FIRST_RUNG_MAX_IN + EPSILON


def resolve_height(user_inches: float, use_feet: bool) -> HeightPlan:
    """
    Decide the integer ladder length and the first-rung height.

    Raises InvalidHeightError for a non-positive height. A first rung that
    cannot land inside the 6-15" window is reported through
    ``bottom_rung_ok`` rather than raised.
    """
    if user_inches <= 0:
        raise InvalidHeightError()

    if use_feet:
        plan = _resolve_with_feet(user_inches)
    else:
        plan = _resolve_without_feet(user_inches)

    logger.debug(
        "Height %.3fin (feet=%s) -> %d ft ladder, first rung %.3fin",
        user_inches, use_feet, plan.ladder_feet_ft, plan.first_rung_inches,
    )
    return plan


def _resolve_without_feet(user_inches: float) -> HeightPlan:
    # An N-ft ladder has N rungs at 12" pitch; its bottom rung sits at H - 12*(N-1).
    # Take the smallest N that puts that rung inside the window.
    lower = math.ceil((user_inches - FIRST_RUNG_MAX_IN) / RUNG_PITCH_IN)
    upper = math.floor((user_inches - FIRST_RUNG_MIN_IN) / RUNG_PITCH_IN)
    n_minus_1 = max(0, min(max(lower, 0), upper))

    ladder_feet_ft = n_minus_1 + 1
    first_rung = user_inches - RUNG_PITCH_IN * n_minus_1
    return HeightPlan(
        total_inches=user_inches,
        feet_selection=None,
        ladder_feet_ft=ladder_feet_ft,
        first_rung_inches=first_rung,
        bottom_rung_ok=first_rung_in_window(first_rung),
    )


def _misalignment(user_inches: float, first_rung: float) -> float:
    rem = (user_inches - first_rung) % RUNG_PITCH_IN
    return min(rem, (RUNG_PITCH_IN - rem) % RUNG_PITCH_IN)


def _resolve_with_feet(user_inches: float) -> HeightPlan:
    best: FootCatalogEntry | None = None
    best_mis = math.inf
    for candidate in FOOT_OPTIONS:
        mis = _misalignment(user_inches, candidate.first_rung_inches)
        prefer_family = (
            abs(mis - best_mis) < EPSILON
            and best is not None
            and best.type == StandoffType.SO3
            and candidate.type == StandoffType.SO2
        )
        if mis < best_mis - EPSILON or prefer_family:
            best = candidate
            best_mis = mis

    first_rung = best.first_rung_inches if best is not None else FIRST_RUNG_MIN_IN
    intervals = max(0, round_half_up((user_inches - first_rung) / RUNG_PITCH_IN))
    return HeightPlan(
        total_inches=user_inches,
        feet_selection=best,
        ladder_feet_ft=intervals + 1,
        first_rung_inches=first_rung,
        bottom_rung_ok=first_rung_in_window(first_rung),
    )
