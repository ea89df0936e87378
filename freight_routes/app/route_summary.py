#!/usr/bin/env python3
# freight_routes/app/route_summary.py
# -*- coding: utf-8 -*-
"""
Route summary CLI
=================

Reads a shipment CSV, runs the pipeline and prints one JSON document:

    {
      "status": "ok" | "partial" | "no_valid_rows" | "read_error",
      "message": str | null,
      "chart": {"all": {"road": int, "sea": int}, "selected": {...}},
      "route_groups": [ {route_key, origin, destination, distance_km, ...}, ... ]
    }

Exit codes
----------
0 : ok / partial
1 : no valid rows
2 : file could not be read

Examples
--------
python -m freight_routes.app.route_summary --csv data/sample_shipments.csv --pretty
freight-routes --csv data/sample_shipments.csv --route "London → Paris" --sort-by distance --descending
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from freight_routes.aggregation.table import SORT_FIELDS, route_table, sort_route_table
from freight_routes.app.pipeline import (
      Dashboard
    , PipelineOutcome
    , STATUS_NO_VALID_ROWS
    , STATUS_READ_ERROR
)
from freight_routes.infra.logging import get_current_log_path, get_logger, init_logging, log_banner

_log = get_logger(__name__)

EXIT_OK = 0
EXIT_NO_VALID_ROWS = 1
EXIT_READ_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Summarize shipments by route (Road/Sea weight and route table) and print JSON."
    )
    p.add_argument("--csv", type=Path, required=True, help="Shipment CSV (origin, destination, weightKg, ...).")
    p.add_argument("--route", default=None, help="Route key for the selected-route chart, e.g. 'London → Paris'.")
    p.add_argument(
          "--sort-by"
        , default=None
        , choices=sorted(SORT_FIELDS)
        , help="Sort route groups by this field. Default: first-seen order."
    )
    p.add_argument("--descending", action="store_true", help="Sort descending (with --sort-by).")
    p.add_argument("--table-out", type=Path, default=None, help="Also write the route table to this CSV path.")
    p.add_argument("--pretty", action="store_true", help="Pretty-print JSON.")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file.")
    return p


def _exit_code(outcome: PipelineOutcome) -> int:
    if outcome.status == STATUS_READ_ERROR:
        return EXIT_READ_ERROR
    if outcome.status == STATUS_NO_VALID_ROWS:
        return EXIT_NO_VALID_ROWS
    return EXIT_OK


def build_summary(
      dashboard: Dashboard
    , *
    , sort_by: Optional[str] = None
    , descending: bool = False
    , table_out: Optional[Path] = None
) -> Dict[str, Any]:
    """
    JSON-ready summary of the dashboard's current run.

    When `table_out` is given, the (sorted) route table is written there too.
    """
    table = route_table(dashboard.route_groups)
    if sort_by is not None:
        table = sort_route_table(table, sort_by, descending=descending)

    if table_out is not None:
        table_out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(table_out, index=False, encoding="utf-8")
        _log.info("Route table written → %s (%d rows).", table_out, len(table))

    route_groups: List[Dict[str, Any]] = table.to_dict(orient="records")

    return {
          "status": dashboard.outcome.status
        , "message": dashboard.outcome.message
        , "chart": {
              "all": dashboard.all_routes_chart.to_dict()
            , "selected": dashboard.selected_route_chart.to_dict()
          }
        , "route_groups": route_groups
    }


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)

    init_logging(level=args.log_level, force=True, write_output=False, log_file=args.log_file)
    log_path = get_current_log_path()
    if log_path is not None:
        _log.info("Log file → %s", log_path)
    log_banner(_log, f"Route summary: {args.csv}")

    dashboard = Dashboard()
    outcome = dashboard.load_file(args.csv)
    dashboard.select(args.route)

    summary = build_summary(
          dashboard
        , sort_by=args.sort_by
        , descending=args.descending
        , table_out=args.table_out if outcome.ok else None
    )

    if args.pretty:
        print(json.dumps(summary, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(summary, ensure_ascii=False, separators=(",", ":")))
    return _exit_code(outcome)


if __name__ == "__main__":
    raise SystemExit(main())
