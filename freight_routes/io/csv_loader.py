# freight_routes/io/csv_loader.py
# -*- coding: utf-8 -*-
"""
Shipment CSV reader
===================

Main entry point
----------------
- load_records(csv_path) -> List[Dict[str, Any]]

Reads a delimited file with a header row and hands back one untyped record
per data line, ready for freight_routes.validation.validate_rows. Nothing is
validated here: every cell stays text, and empty cells become None.

CSV expectations
----------------
A header with (case-insensitive, common aliases auto-normalized):
  - 'origin'              (e.g. 'origin', 'from')
  - 'originCountry'       (e.g. 'origin_country', 'origin country')
  - 'destination'         (e.g. 'destination', 'to', 'destiny')
  - 'destinationCountry'  (e.g. 'destination_country')
  - 'weightKg'            (e.g. 'weight_kg', 'weight', 'weight (kg)')

Unknown columns are passed through untouched. Completely empty lines are
skipped. Lines with more cells than the header keep their first cells and
drop the rest (logged as a warning); only an empty or undecodable file is
rejected as a whole.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import pandas as pd

from freight_routes.core.errors import CsvFormatError
from freight_routes.core.types import StrPath
from freight_routes.infra.logging import get_logger

_log = get_logger(__name__)

# External field name → accepted header spellings (compared lower-cased, stripped)
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
      "origin": ("origin", "from", "origin_city")
    , "originCountry": ("origincountry", "origin_country", "origin country", "from_country")
    , "destination": ("destination", "to", "destiny", "destination_city")
    , "destinationCountry": ("destinationcountry", "destination_country", "destination country", "to_country")
    , "weightKg": ("weightkg", "weight_kg", "weight", "weight (kg)", "weight kg")
}


# ───────────────────────────── header resolution ───────────────────────────────


def _resolve_columns(
    columns: List[str]
) -> Dict[str, str]:
    """
    Map raw header names to external field names.

    The first header matching a field wins; later duplicates keep their
    original name so no two columns collapse into one.
    """
    cols_map = {}
    for col in columns:
        cols_map.setdefault(str(col).strip().lower(), col)

    renames: Dict[str, str] = {}
    for field, aliases in FIELD_ALIASES.items():
        source: Optional[str] = next((cols_map[a] for a in aliases if a in cols_map), None)
        if source is not None and source not in renames:
            renames[source] = field
    return renames


def _trim_to_width(
      width: int
    , path: Path
) -> Callable[[List[str]], List[str]]:
    """on_bad_lines handler: keep the first `width` cells of an over-long line."""
    def trim(bad_line: List[str]) -> List[str]:
        _log.warning(
            "load_records: '%s' line has %d cells for %d columns, extra cells dropped.",
            path, len(bad_line), width,
        )
        return bad_line[:width]
    return trim


# ─────────────────────────────── records loader ────────────────────────────────


def load_records(
    csv_path: StrPath
) -> List[Dict[str, Any]]:
    """
    Load shipment records from a CSV file.

    Parameters
    ----------
    csv_path : str | Path
        Path to the file.

    Returns
    -------
    List[Dict[str, Any]]
        One dict per data line, keyed by external field name where the header
        was recognized. Cell values are str, or None for empty cells.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    CsvFormatError
        If the file is empty or cannot be parsed as CSV.
    """
    path = Path(csv_path)
    if not path.is_file():
        raise FileNotFoundError(f"CSV file not found: {path}")

    try:
        header = pd.read_csv(path, nrows=0, index_col=False, encoding="utf-8-sig")
        df_raw = pd.read_csv(
              path
            , dtype=str
            , keep_default_na=False
            , skip_blank_lines=True
            , encoding="utf-8-sig"
            , engine="python"
            , index_col=False
            , on_bad_lines=_trim_to_width(len(header.columns), path)
        )
    except pd.errors.EmptyDataError as exc:
        raise CsvFormatError(f"CSV file is empty: {path}") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise CsvFormatError(f"Failed to parse CSV data in {path}: {exc}") from exc

    renames = _resolve_columns(list(df_raw.columns))
    missing = sorted(set(FIELD_ALIASES) - set(renames.values()))
    if missing:
        _log.warning("load_records: '%s' has no column for %s.", path, missing)

    # short rows come back as NaN even with keep_default_na=False
    df = df_raw.rename(columns=renames).fillna("")

    records = [
        {key: (None if value == "" else value) for key, value in rec.items()}
        for rec in df.to_dict(orient="records")
    ]

    _log.info(
        "load_records: loaded %d rows from '%s'.",
        len(records),
        path,
    )
    return records
