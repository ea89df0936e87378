from __future__ import annotations

from .calculator import (
      journey_legs
    , modes_label
    , pseudo_distance
    , uses_mode
)

__all__ = [
      "pseudo_distance", "journey_legs", "modes_label", "uses_mode",
]
