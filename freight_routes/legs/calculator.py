# freight_routes/legs/calculator.py
# -*- coding: utf-8 -*-
"""
Pseudo-distance and leg splitting
=================================

Purpose
-------
Derive a deterministic stand-in for the transport distance of an
origin/destination pair, and split a journey of that distance into
Road/Sea legs.

Public API
----------
- pseudo_distance(origin, destination) -> int
- journey_legs(distance, weight) -> Tuple[JourneyLeg, ...]
- modes_label(legs) -> str
- uses_mode(legs, mode) -> bool

Rules
-----
- distance = abs(Σ code points of origin + destination) % 3000 + 100
  → always in [100, 3099]. Same strings, same distance, every run.
- distance ≤ 1500 km  → [Road(distance)]
- distance > 1500 km  → [Road(100), Sea(distance − 200), Road(100)]
  Every leg carries the full cargo weight.

Notes
-----
- Everything here is pure: no I/O, no caching, no global state besides the
  immutable defaults in freight_routes.core.config.
- No input checking: callers pass validated rows.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from freight_routes.core.config import (
      DistanceParams
    , LegPolicy
    , get_distance_params
    , get_leg_policy
)
from freight_routes.core.models import JourneyLeg, ROAD, SEA
from freight_routes.core.types import Number, TransportMode


# ────────────────────────────────────────────────────────────────────────────────
# Distance
# ────────────────────────────────────────────────────────────────────────────────

def pseudo_distance(
      origin: str
    , destination: str
    , *
    , params: Optional[DistanceParams] = None
) -> int:
    """
    Deterministic pseudo-distance (km) for an origin→destination pair.

    Parameters
    ----------
    origin : str
        Origin label (may be empty).
    destination : str
        Destination label (may be empty).
    params : DistanceParams, optional
        Formula constants; defaults to the global ones.

    Returns
    -------
    int
        Distance in km, within [offset_km, offset_km + modulus).
    """
    params = params or get_distance_params()
    code_sum = sum(ord(ch) for ch in origin + destination)
    return abs(code_sum) % params.modulus + params.offset_km


# ────────────────────────────────────────────────────────────────────────────────
# Legs
# ────────────────────────────────────────────────────────────────────────────────

def journey_legs(
      distance: Number
    , weight: Number
    , *
    , policy: Optional[LegPolicy] = None
) -> Tuple[JourneyLeg, ...]:
    """
    Split a journey into transport legs.

    The threshold is strict: exactly `multimodal_threshold_km` stays a single
    Road leg. The sea leg is always `distance - 2 * road_access_km`, without
    clamping.
    """
    policy = policy or get_leg_policy()

    if distance > policy.multimodal_threshold_km:
        access = policy.road_access_km
        return (
              JourneyLeg(mode=ROAD, distance=access, weight=weight)
            , JourneyLeg(mode=SEA, distance=distance - 2 * access, weight=weight)
            , JourneyLeg(mode=ROAD, distance=access, weight=weight)
        )

    return (JourneyLeg(mode=ROAD, distance=distance, weight=weight),)


def modes_label(
      legs: Sequence[JourneyLeg]
    , *
    , policy: Optional[LegPolicy] = None
) -> str:
    """
    Leg modes in order, e.g. "Road + Sea + Road". Empty input → "".
    """
    policy = policy or get_leg_policy()
    return policy.modes_separator.join(leg.mode for leg in legs)


def uses_mode(
      legs: Iterable[JourneyLeg]
    , mode: TransportMode
) -> bool:
    """True if at least one leg travels by `mode`."""
    return any(leg.mode == mode for leg in legs)
