"""Bill-of-materials output models."""

from __future__ import annotations
from pydantic import BaseModel


class BomLine(BaseModel):
    """A single export row: inventory ID plus quantity as a decimal string."""
    inventory_id: str
    quantity: str
    rule_id: str = ""  # Rule that produced the line


class SupportLine(BaseModel):
    """Standoff pairs of one SKU, wall and feet combined."""
    sku: str
    pairs: int


class AccessoryLine(BaseModel):
    sku: str
    description: str
    price: float


class BomResult(BaseModel):
    """Ordered BOM lines and the total price of the configuration."""
    lines: list[BomLine] = []
    total_price: float = 0.0
