"""ERP CSV export of BOM lines."""

from __future__ import annotations
import csv
import io

from configurator.models import BomLine, ExportConfig
from configurator.core.units import normalize_sku

CSV_HEADER = ("Inventory ID", "Quantity", "Project Task", "Cost Code")


def bom_to_csv(lines: list[BomLine], config: ExportConfig | None = None) -> str:
    """
    Render BOM lines as the ERP import CSV.

    Every row carries the same project task and cost code. Rows are joined
    with a bare newline and no trailing newline.
    """
    if config is None:
        config = ExportConfig()

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for line in lines:
        writer.writerow((
            normalize_sku(line.inventory_id),
            line.quantity,
            config.project_task,
            config.cost_code,
        ))
    return buf.getvalue().rstrip("\n")
