from __future__ import annotations

from .rows import FIELD_RULES, FieldRule, validate_record, validate_rows

__all__ = [
      "FIELD_RULES", "FieldRule", "validate_record", "validate_rows",
]
