"""Standoff planner: rung-anchored wall support selection.

Standoffs attach to rungs, never to splices. The plan is built as a fixed
sequence of steps, each a separate method so it can be exercised alone:

    anchor -> bottom pick -> fallback -> upward packing
           -> top-gap closure -> top insertion + de-duplication
"""

from __future__ import annotations
import bisect
import logging
import math

from configurator.models import StandoffPlan
from configurator.core.units import EPSILON, inches_to_feet

logger = logging.getLogger(__name__)

MAX_SPAN_FT = 7.0
MIN_SPAN_FT = 3.0
BOTTOM_TARGET_WITH_FEET_FT = 7.0
BOTTOM_TARGET_WITHOUT_FEET_FT = 3.0


class StandoffPlanner:
    """Greedy, top-anchored, span-bounded selection over a fixed rung set."""

    def __init__(self, rungs_ft: list[float], using_feet: bool) -> None:
        self.rungs = sorted(rungs_ft)
        self.using_feet = using_feet

    def plan(self) -> StandoffPlan:
        if not self.rungs:
            return StandoffPlan()

        top = self.anchor()
        picks: list[float] = []

        bottom = self.bottom_pick(top)
        if bottom is not None:
            picks.append(bottom)
        else:
            fallback = self.fallback_pick(top)
            if fallback is not None:
                picks.append(fallback)

        if picks:
            picks.extend(self.pack_upward(picks[-1], top))

        closing = self.close_top_gap(picks[-1] if picks else None, top)
        if closing is not None:
            picks.append(closing)

        positions = self.finalize(picks, top)
        logger.debug("Standoff picks (ft): %s", positions)
        return StandoffPlan(positions_ft=positions)

    # -- steps ---------------------------------------------------------------

    def anchor(self) -> float:
        """Second rung from the top, or the only rung there is."""
        return self.rungs[max(0, len(self.rungs) - 2)]

    def highest_at_or_below(
        self,
        limit: float,
        next_above: float | None = None,
        min_gap: float = MIN_SPAN_FT,
    ) -> float | None:
        """Highest rung <= limit that also clears ``next_above`` by ``min_gap``."""
        ceiling = next_above if next_above is not None else math.inf
        cap = min(limit, ceiling - min_gap - EPSILON)
        if not cap > 0:
            return None
        idx = bisect.bisect_right(self.rungs, cap) - 1
        return self.rungs[idx] if idx >= 0 else None

    def bottom_pick(self, top: float) -> float | None:
        target = BOTTOM_TARGET_WITH_FEET_FT if self.using_feet else BOTTOM_TARGET_WITHOUT_FEET_FT
        return self.highest_at_or_below(target, top, MIN_SPAN_FT)

    def fallback_pick(self, top: float) -> float | None:
        """Highest rung strictly below top - 3 ft (never above 7 ft with feet)."""
        idx = bisect.bisect_left(self.rungs, top - MIN_SPAN_FT)
        best: float | None = None
        for rung in self.rungs[:idx]:
            if self.using_feet and rung > BOTTOM_TARGET_WITH_FEET_FT + EPSILON:
                break
            if best is None or rung > best:
                best = rung
        return best

    def next_up(self, prev: float, top: float) -> float | None:
        limit = min(prev + MAX_SPAN_FT, top - MIN_SPAN_FT - EPSILON)
        if not limit > prev + MIN_SPAN_FT - EPSILON:
            return None
        return self.highest_at_or_below(limit, top, MIN_SPAN_FT)

    def pack_upward(self, start: float, top: float) -> list[float]:
        """Spans of up to 7 ft from ``start`` until the anchor is within reach."""
        out: list[float] = []
        last = start
        while top - last > MAX_SPAN_FT + EPSILON:
            nxt = self.next_up(last, top)
            if nxt is None or nxt <= last + EPSILON:
                break
            out.append(nxt)
            last = nxt
        return out

    def close_top_gap(self, last: float | None, top: float) -> float | None:
        if last is not None and top - last <= MAX_SPAN_FT + EPSILON:
            return None
        ins = self.highest_at_or_below(top - MIN_SPAN_FT, top, MIN_SPAN_FT)
        if ins is None:
            return None
        if last is not None and ins - last < MIN_SPAN_FT - EPSILON:
            return None
        return ins

    @staticmethod
    def finalize(picks: list[float], top: float) -> list[float]:
        ordered = sorted(picks + [top])
        out: list[float] = []
        for p in ordered:
            if out and abs(p - out[-1]) < EPSILON:
                out[-1] = p
            else:
                out.append(p)
        return out


def plan_standoffs(using_feet: bool, rung_positions_in: list[float]) -> StandoffPlan:
    """Plan wall standoffs over a rung grid given in inches."""
    return StandoffPlanner([inches_to_feet(r) for r in rung_positions_in], using_feet).plan()
