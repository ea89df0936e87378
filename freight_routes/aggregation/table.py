# freight_routes/aggregation/table.py
# -*- coding: utf-8 -*-
"""
Route table (pandas)
====================

Flat, display-ready view of RouteGroups:

    route_key | origin | destination | distance_km | times_taken |
    total_distance_km | modes | total_weight_kg | road_weight_kg | sea_weight_kg

Rows keep the first-seen route order of the aggregation. Sorting is the
caller's choice (see sort_route_table).
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd

from freight_routes.core.models import RouteGroup

ROUTE_TABLE_COLUMNS: List[str] = [
      "route_key"
    , "origin"
    , "destination"
    , "distance_km"
    , "times_taken"
    , "total_distance_km"
    , "modes"
    , "total_weight_kg"
    , "road_weight_kg"
    , "sea_weight_kg"
]

# Sort field (as offered by the table view) → column
SORT_FIELDS: Dict[str, str] = {
      "route": "route_key"
    , "distance": "distance_km"
    , "times_taken": "times_taken"
    , "total_distance": "total_distance_km"
    , "modes": "modes"
}


def route_table(
    route_groups: Sequence[RouteGroup]
) -> pd.DataFrame:
    """
    One row per RouteGroup, columns as in ROUTE_TABLE_COLUMNS.

    An empty input yields an empty frame with the same columns.
    """
    records = [
        {
              "route_key": g.route_key
            , "origin": g.route.origin
            , "destination": g.route.destination
            , "distance_km": g.distance
            , "times_taken": g.times_taken
            , "total_distance_km": g.total_distance
            , "modes": g.modes
            , "total_weight_kg": g.total_weight
            , "road_weight_kg": g.total_road_weight
            , "sea_weight_kg": g.total_sea_weight
        }
        for g in route_groups
    ]
    return pd.DataFrame(records, columns=ROUTE_TABLE_COLUMNS)


def sort_route_table(
      table: pd.DataFrame
    , by: str = "route"
    , *
    , descending: bool = False
) -> pd.DataFrame:
    """
    Sorted copy of a route table.

    Text columns sort case-insensitively; ties keep their current order.

    Raises
    ------
    ValueError
        If `by` is not one of SORT_FIELDS.
    """
    if by not in SORT_FIELDS:
        raise ValueError(f"by must be one of {sorted(SORT_FIELDS)}, got {by!r}.")

    column = SORT_FIELDS[by]
    key = None
    if not pd.api.types.is_numeric_dtype(table[column]):
        key = lambda s: s.astype(str).str.casefold()  # noqa: E731

    return table.sort_values(
          by=column
        , ascending=not descending
        , kind="stable"
        , key=key
    ).reset_index(drop=True)
