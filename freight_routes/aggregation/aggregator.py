# freight_routes/aggregation/aggregator.py
# -*- coding: utf-8 -*-
"""
Journey aggregation
===================

Purpose
-------
Turn validated TransportRows into Journeys (pseudo-distance + legs + per-mode
weight) and group them by route into RouteGroups for a table, plus rounded
Road/Sea totals for a chart.

Mode attribution
----------------
A journey's cargo weight is counted **once per mode present**, not once per
leg. Road + Sea + Road with 1000 kg:

    total_road_weight = 1000   (not 2000)
    total_sea_weight  = 1000

Route groups then simply sum the per-journey figures.

Units
-----
- distance : km
- weight   : kg
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Sequence

from freight_routes.core.models import (
      ChartData
    , Journey
    , ProcessedData
    , Route
    , RouteGroup
    , SEA
    , ROAD
    , TransportRow
)
from freight_routes.infra.logging import get_logger
from freight_routes.legs.calculator import (
      journey_legs
    , modes_label
    , pseudo_distance
    , uses_mode
)

_log = get_logger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Journeys
# ────────────────────────────────────────────────────────────────────────────────

def build_journey(
      row: TransportRow
    , index: int
) -> Journey:
    """
    Journey for one validated row.

    Parameters
    ----------
    row : TransportRow
        Validated input row.
    index : int
        0-based position of the row in the run (used for the id).
    """
    distance = pseudo_distance(row.origin, row.destination)
    legs = journey_legs(distance, row.weight_kg)

    return Journey(
          id=f"journey-{index}"
        , route=Route(
              origin=row.origin
            , destination=row.destination
            , origin_country=row.origin_country
            , destination_country=row.destination_country
          )
        , weight=row.weight_kg
        , distance=distance
        , legs=legs
        , total_road_weight=row.weight_kg if uses_mode(legs, ROAD) else 0
        , total_sea_weight=row.weight_kg if uses_mode(legs, SEA) else 0
    )


# ────────────────────────────────────────────────────────────────────────────────
# Route groups
# ────────────────────────────────────────────────────────────────────────────────

def group_by_route(
    journeys: Iterable[Journey]
) -> Dict[str, List[Journey]]:
    """
    Journeys keyed by route key, keys in first-seen order and members in
    input order. A→B and B→A are different keys.

    The route key is also what selection looks up, so pairs whose labels
    render to the same key ("A → B" + "C" and "A" + "B → C") share one group.
    Their concatenated labels hold the same characters, hence the same
    distance and legs.
    """
    groups: Dict[str, List[Journey]] = {}
    for journey in journeys:
        groups.setdefault(journey.route.route_key, []).append(journey)
    return groups


def summarize_group(
    journeys: Sequence[Journey]
) -> RouteGroup:
    """
    Aggregate the journeys of one route.

    Distance and modes come from the first member: both depend only on the
    characters of origin + destination, so every member shares them.
    """
    first = journeys[0]
    ends = first.route.ends()
    times_taken = len(journeys)

    return RouteGroup(
          route_key=ends.route_key
        , route=ends
        , distance=first.distance
        , times_taken=times_taken
        , total_distance=first.distance * times_taken
        , modes=modes_label(first.legs)
        , total_weight=sum(j.weight for j in journeys)
        , total_road_weight=sum(j.total_road_weight for j in journeys)
        , total_sea_weight=sum(j.total_sea_weight for j in journeys)
        , journeys=tuple(journeys)
    )


def process_rows(
    rows: Sequence[TransportRow]
) -> ProcessedData:
    """
    Build journeys and route groups for a run.

    Parameters
    ----------
    rows : Sequence[TransportRow]
        Validated rows; nothing is re-checked here.

    Returns
    -------
    ProcessedData
        journeys in input order; route_groups in first-seen route order.
    """
    journeys = [build_journey(row, idx) for idx, row in enumerate(rows)]
    route_groups = [summarize_group(members) for members in group_by_route(journeys).values()]

    _log.info(
        "process_rows: rows=%d journeys=%d route_groups=%d.",
        len(rows), len(journeys), len(route_groups)
    )
    return ProcessedData(journeys=journeys, route_groups=route_groups)


# ────────────────────────────────────────────────────────────────────────────────
# Chart data
# ────────────────────────────────────────────────────────────────────────────────

def _round_half_up(value: float) -> int:
    """Nearest integer, .5 going up (Python's round() would go to even)."""
    return int(math.floor(value + 0.5))


def weight_by_mode(
    journeys: Iterable[Journey]
) -> ChartData:
    """
    Road/Sea weight totals over a journey subset, each rounded independently.

    Empty input → ChartData(road=0, sea=0).
    """
    road = 0.0
    sea = 0.0
    for journey in journeys:
        road += journey.total_road_weight
        sea += journey.total_sea_weight
    return ChartData(road=_round_half_up(road), sea=_round_half_up(sea))


def chart_data_for(
      processed: ProcessedData
    , route_key: Optional[str] = None
) -> ChartData:
    """
    Chart totals for one route, or for all journeys.

    - route_key None        → all journeys
    - known route_key       → that group's journeys
    - unknown route_key     → all journeys (a stale selection shows everything)
    """
    if route_key is None:
        return weight_by_mode(processed.journeys)

    group = processed.find_group(route_key)
    if group is None:
        _log.warning("chart_data_for: unknown route %r, using all journeys.", route_key)
        return weight_by_mode(processed.journeys)
    return weight_by_mode(group.journeys)
