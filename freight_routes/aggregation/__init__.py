from __future__ import annotations

# ── aggregation (public API) ────────────────────────────────────────────────────
from .aggregator import (
      build_journey
    , chart_data_for
    , group_by_route
    , process_rows
    , summarize_group
    , weight_by_mode
)

# ── tabular view ────────────────────────────────────────────────────────────────
from .table import ROUTE_TABLE_COLUMNS, SORT_FIELDS, route_table, sort_route_table

__all__ = [
    # aggregation
      "build_journey", "group_by_route", "summarize_group", "process_rows",
      "weight_by_mode", "chart_data_for",
    # table
      "ROUTE_TABLE_COLUMNS", "SORT_FIELDS", "route_table", "sort_route_table",
]
