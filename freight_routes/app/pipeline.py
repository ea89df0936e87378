# freight_routes/app/pipeline.py
# -*- coding: utf-8 -*-
"""
Shipment pipeline
=================

Purpose
-------
Chain the pieces of one run:

    records ─► validate_rows ─► process_rows ─► chart / table consumers

and report the run as a single PipelineOutcome instead of raising, so that
callers (CLI, dashboard) decide how to present partial or failed runs.

Statuses
--------
- "ok"            : every record validated
- "partial"       : some records were rejected; the rest were aggregated
- "no_valid_rows" : nothing validated (terminal; nothing is aggregated)
- "read_error"    : the input file could not be read (run_file only)

Dashboard
---------
`Dashboard` keeps the latest outcome plus the selected route and exposes the
two chart views (all routes, selected route). It is a plain object passed to
whoever needs it; there is no module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from freight_routes.aggregation.aggregator import chart_data_for, process_rows
from freight_routes.core.config import ProjectConfig, get_project_config
from freight_routes.core.errors import CsvFormatError, NoValidRowsError
from freight_routes.core.models import ChartData, ProcessedData, RouteGroup, ValidationError, ValidationResult
from freight_routes.core.types import RawRecords, StrPath
from freight_routes.infra.logging import get_logger
from freight_routes.io.csv_loader import load_records
from freight_routes.validation.rows import validate_rows

_log = get_logger(__name__)

STATUS_OK = "ok"
STATUS_PARTIAL = "partial"
STATUS_NO_VALID_ROWS = "no_valid_rows"
STATUS_READ_ERROR = "read_error"

NO_VALID_DATA_MESSAGE = "No valid data found in CSV file"


# ────────────────────────────────────────────────────────────────────────────────
# Outcome
# ────────────────────────────────────────────────────────────────────────────────

@dataclass
class PipelineOutcome:
    """
    Result of one pipeline run.

    Attributes
    ----------
    status : str
        One of STATUS_OK, STATUS_PARTIAL, STATUS_NO_VALID_ROWS, STATUS_READ_ERROR.
    validation : ValidationResult
        Validator output (empty on read errors).
    processed : ProcessedData
        Aggregator output (empty unless status is ok/partial).
    message : str | None
        User-facing summary; None when every record validated.
    """

    status: str
    validation: ValidationResult = field(default_factory=ValidationResult)
    processed: ProcessedData = field(default_factory=ProcessedData)
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when data was aggregated (ok or partial)."""
        return self.status in (STATUS_OK, STATUS_PARTIAL)

    def raise_for_status(self) -> "PipelineOutcome":
        """
        Raise instead of returning a failed outcome.

        Raises
        ------
        NoValidRowsError
            status == "no_valid_rows".
        CsvFormatError
            status == "read_error".
        """
        if self.status == STATUS_NO_VALID_ROWS:
            raise NoValidRowsError(self.message or NO_VALID_DATA_MESSAGE)
        if self.status == STATUS_READ_ERROR:
            raise CsvFormatError(self.message or "Failed to read CSV file")
        return self


def summarize_errors(
      errors: List[ValidationError]
    , valid_count: int
    , *
    , config: Optional[ProjectConfig] = None
) -> str:
    """
    One-line summary of rejected rows for the user.

    Only the first `config.error_preview_rows` rows are spelled out; a trailing
    "..." marks that more were rejected.

        Found 4 invalid rows. Row 1: Origin is required; Row 2: Required; Row 5: Required.... 7 valid rows loaded.
    """
    cfg = config or get_project_config()
    preview = "; ".join(err.summary() for err in errors[: cfg.error_preview_rows])
    more = "..." if len(errors) > cfg.error_preview_rows else ""
    return f"Found {len(errors)} invalid rows. {preview}{more}. {valid_count} valid rows loaded."


# ────────────────────────────────────────────────────────────────────────────────
# Runs
# ────────────────────────────────────────────────────────────────────────────────

def run_pipeline(
    records: RawRecords
) -> PipelineOutcome:
    """
    Validate and aggregate untyped records.

    Never raises for bad data: rejected rows end up in
    `outcome.validation.errors`, an all-rejected run in status "no_valid_rows".
    """
    validation = validate_rows(records)

    if not validation.valid_rows:
        _log.warning(
            "run_pipeline: no valid rows (rejected=%d).",
            len(validation.errors),
        )
        return PipelineOutcome(
              status=STATUS_NO_VALID_ROWS
            , validation=validation
            , message=NO_VALID_DATA_MESSAGE
        )

    processed = process_rows(validation.valid_rows)

    if validation.has_errors:
        message = summarize_errors(validation.errors, len(validation.valid_rows))
        _log.warning("run_pipeline: %s", message)
        return PipelineOutcome(
              status=STATUS_PARTIAL
            , validation=validation
            , processed=processed
            , message=message
        )

    return PipelineOutcome(status=STATUS_OK, validation=validation, processed=processed)


def run_file(
    csv_path: StrPath
) -> PipelineOutcome:
    """
    Load a CSV file and run the pipeline on its records.

    A missing or unparsable file yields status "read_error" with the reason
    as message.
    """
    try:
        records = load_records(csv_path)
    except (FileNotFoundError, CsvFormatError) as exc:
        _log.error("run_file: %s", exc)
        return PipelineOutcome(status=STATUS_READ_ERROR, message=str(exc))

    return run_pipeline(records)


# ────────────────────────────────────────────────────────────────────────────────
# Dashboard state
# ────────────────────────────────────────────────────────────────────────────────

@dataclass
class Dashboard:
    """
    Current run plus route selection.

    Loading new data replaces the previous run and clears the selection.
    """

    outcome: PipelineOutcome = field(default_factory=lambda: PipelineOutcome(status=STATUS_OK))
    selected_route: Optional[str] = None

    def load(self, records: RawRecords) -> PipelineOutcome:
        self.outcome = run_pipeline(records)
        self.selected_route = None
        return self.outcome

    def load_file(self, csv_path: StrPath) -> PipelineOutcome:
        self.outcome = run_file(csv_path)
        self.selected_route = None
        return self.outcome

    def select(self, route_key: Optional[str]) -> None:
        """Select a route by key; None clears the selection."""
        self.selected_route = route_key

    @property
    def route_groups(self) -> List[RouteGroup]:
        return self.outcome.processed.route_groups

    @property
    def all_routes_chart(self) -> ChartData:
        return chart_data_for(self.outcome.processed)

    @property
    def selected_route_chart(self) -> ChartData:
        # unknown selection falls back to all journeys inside chart_data_for
        return chart_data_for(self.outcome.processed, self.selected_route)
