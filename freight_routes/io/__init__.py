from __future__ import annotations

from .csv_loader import FIELD_ALIASES, load_records

__all__ = [
      "FIELD_ALIASES", "load_records",
]
