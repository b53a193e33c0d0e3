"""Unit conversion, rounding and tolerance helpers shared by every stage."""

from __future__ import annotations
import math
import re


EPSILON = 1e-6  # Tolerance for every floating-point comparison in the engine

_HYPHEN_VARIANTS = re.compile("[\\u2010-\\u2015]")


def near(a: float, b: float, eps: float = EPSILON) -> bool:
    return abs(a - b) < eps


def inches_to_feet(inches: float) -> float:
    return inches / 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (never banker's rounding)."""
    return math.floor(value + 0.5)


def round_to(value: float, digits: int = 3) -> float:
    scale = 10 ** digits
    return round_half_up(value * scale) / scale


def format_feet(feet: float) -> str:
    """Format decimal feet as a feet-inches label, e.g. 10.5 -> 10'-6″."""
    return f"{math.floor(feet)}'-{round_half_up((feet % 1) * 12)}″"


def format_inches(inches: float) -> str:
    """Format inches as a feet-inches label, e.g. 123 -> 10'-3″."""
    return f"{math.floor(inches / 12)}'-{round_half_up(inches % 12)}″"


def normalize_sku(sku: str) -> str:
    """Replace Unicode hyphen and dash variants with a plain ASCII hyphen."""
    return _HYPHEN_VARIANTS.sub("-", sku)
