# freight_routes/core/errors.py
# -*- coding: utf-8 -*-
"""
Error kinds and exception classes.

Row-level problems are *data* (see FieldError in core.models) tagged with one
of the kinds below; they are collected, never raised. Exceptions are reserved
for the file/orchestration boundary.
"""

from __future__ import annotations

# ────────────────────────────────────────────────────────────────────────────────
# Row validation kinds
# ────────────────────────────────────────────────────────────────────────────────

REQUIRED_FIELD_MISSING = "RequiredFieldMissing"
INVALID_WEIGHT = "InvalidWeight"

ERROR_KINDS = (REQUIRED_FIELD_MISSING, INVALID_WEIGHT)


# ────────────────────────────────────────────────────────────────────────────────
# Exceptions
# ────────────────────────────────────────────────────────────────────────────────

class CsvFormatError(Exception):
    """Raised when a delimited file cannot be parsed into records."""
    ...

class NoValidRowsError(Exception):
    """Raised on request when a run ends without a single valid row."""
    ...
