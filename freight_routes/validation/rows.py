# freight_routes/validation/rows.py
# -*- coding: utf-8 -*-
"""
Row validation
==============

Turns loosely-typed records (as produced by a CSV reader) into TransportRow
objects. Each field goes through a two-phase rule:

    normalize(raw value) → validate(normalized) → message or None

A record either becomes a TransportRow or is rejected with *all* of its field
failures; one bad record never affects another (partial success).

Field rules
-----------
    origin, destination            trim; empty → RequiredFieldMissing
    originCountry, destinationCountry
                                   trim; missing → ""
    weightKg                       best-effort float parse of the value's
                                   text, then abs(); must be finite and > 0
                                   → otherwise InvalidWeight
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Union

from freight_routes.core.errors import INVALID_WEIGHT, REQUIRED_FIELD_MISSING
from freight_routes.core.models import (
      FieldError
    , TransportRow
    , ValidationError
    , ValidationResult
)
from freight_routes.core.types import RawRecord, RawRecords
from freight_routes.infra.logging import get_logger

_log = get_logger(__name__)

# Marker for a key that is not present at all (distinct from an explicit None)
_MISSING = object()

# Leading numeric prefix, the way a lenient float parser reads "12.5kg" → 12.5
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

WEIGHT_REQUIRED = "Required"
WEIGHT_NOT_POSITIVE = "Weight must be a positive number"
WEIGHT_NOT_FINITE = "Weight must be a finite number"


class FieldRule(NamedTuple):
    """normalize → validate pipeline for one field; `kind` tags its failures."""

    normalize: Callable[[Any], Any]
    validate: Callable[[Any], Optional[str]]
    kind: Optional[str]


# ────────────────────────────────────────────────────────────────────────────────
# Normalizers
# ────────────────────────────────────────────────────────────────────────────────

def _normalize_text(value: Any) -> str:
    """Trimmed text; absent/None/NaN become ""."""
    if value is _MISSING or value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def _parse_float_prefix(text: str) -> Optional[float]:
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return None
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def _normalize_weight(value: Any) -> Any:
    """
    abs(parsed number) when the value reads as a number; otherwise the value
    is passed through unchanged so the validator can report what it got.
    """
    if value is _MISSING or value is None or isinstance(value, bool):
        return value

    if isinstance(value, (int, float)):
        try:
            num = float(value)
        except OverflowError:
            # ints beyond float range
            num = math.inf
        # NaN is what tabular readers use for an empty cell
        return None if math.isnan(num) else abs(num)

    parsed = _parse_float_prefix(str(value))
    return value if parsed is None else abs(parsed)


# ────────────────────────────────────────────────────────────────────────────────
# Validators
# ────────────────────────────────────────────────────────────────────────────────

def _required(message: str) -> Callable[[str], Optional[str]]:
    def check(value: str) -> Optional[str]:
        return None if value else message
    return check


def _always_valid(value: Any) -> Optional[str]:
    return None


def _received_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _check_weight(value: Any) -> Optional[str]:
    if value is _MISSING:
        return WEIGHT_REQUIRED
    if not isinstance(value, float):
        return f"Expected number, received {_received_type(value)}"
    if math.isinf(value):
        return WEIGHT_NOT_FINITE
    if value <= 0:
        return WEIGHT_NOT_POSITIVE
    return None


# ────────────────────────────────────────────────────────────────────────────────
# Rules (declaration order = error order)
# ────────────────────────────────────────────────────────────────────────────────

FIELD_RULES: Dict[str, FieldRule] = {
      "origin": FieldRule(_normalize_text, _required("Origin is required"), REQUIRED_FIELD_MISSING)
    , "originCountry": FieldRule(_normalize_text, _always_valid, None)
    , "destination": FieldRule(_normalize_text, _required("Destination is required"), REQUIRED_FIELD_MISSING)
    , "destinationCountry": FieldRule(_normalize_text, _always_valid, None)
    , "weightKg": FieldRule(_normalize_weight, _check_weight, INVALID_WEIGHT)
}

# External field name → TransportRow attribute
_ROW_ATTRS: Dict[str, str] = {
      "origin": "origin"
    , "originCountry": "origin_country"
    , "destination": "destination"
    , "destinationCountry": "destination_country"
    , "weightKg": "weight_kg"
}


# ────────────────────────────────────────────────────────────────────────────────
# Public API
# ────────────────────────────────────────────────────────────────────────────────

def validate_record(
    raw: Any
) -> Union[TransportRow, List[FieldError]]:
    """
    Validate a single record.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Field name → raw value. Anything that is not a mapping is treated as
        an empty record.

    Returns
    -------
    TransportRow | List[FieldError]
        The typed row, or every field failure of the record (non-empty list).
    """
    record: RawRecord = raw if isinstance(raw, Mapping) else {}

    values: Dict[str, Any] = {}
    failures: List[FieldError] = []

    for name, rule in FIELD_RULES.items():
        value = rule.normalize(record.get(name, _MISSING))
        message = rule.validate(value)
        if message is not None:
            failures.append(FieldError(field=name, kind=rule.kind or "", message=message))
        else:
            values[_ROW_ATTRS[name]] = value

    if failures:
        return failures
    return TransportRow(**values)


def validate_rows(
    records: RawRecords
) -> ValidationResult:
    """
    Validate a batch of records independently.

    Returns
    -------
    ValidationResult
        valid_rows in input order, plus one ValidationError per rejected
        record carrying its 1-based row index.
    """
    result = ValidationResult()

    for row_index, raw in enumerate(records, start=1):
        outcome = validate_record(raw)
        if isinstance(outcome, TransportRow):
            result.valid_rows.append(outcome)
            continue

        error = ValidationError(row_index=row_index, errors=tuple(outcome))
        result.errors.append(error)
        _log.debug("validate_rows: rejected %s", error.summary())

    _log.info(
        "validate_rows: valid=%d invalid=%d.",
        len(result.valid_rows),
        len(result.errors),
    )
    return result
