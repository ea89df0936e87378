# freight_routes/core/types.py
# -*- coding: utf-8 -*-

"""
Type aliases shared across sub-packages.

Kept free of project imports so any module can use them.
"""

from __future__ import annotations

from pathlib import Path
from typing import (
      Any
    , Iterable
    , Literal
    , Mapping
    , Union
)

# Anything the IO helpers accept as a file location
StrPath = Union[str, Path]

# Distances and weights: ints from the distance formula, floats from parsed input
Number = Union[int, float]

# One loosely-typed input record, keyed by external field name
RawRecord = Mapping[str, Any]

# A batch of records; items that are not mappings are rejected row by row
RawRecords = Iterable[Any]

TransportMode = Literal["Road", "Sea"]
