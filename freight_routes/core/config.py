# freight_routes/core/config.py
# -*- coding: utf-8 -*-

"""
Pipeline constants
==================

Frozen dataclasses holding every tunable number of the pipeline, one
default instance each. Functions take an optional config argument and fall
back to the getters below, so tests can pass their own values.

- ProjectConfig  : route key separator, rejected-row preview size
- DistanceParams : modulus/offset of the pseudo-distance
- LegPolicy      : multimodal threshold, road access legs, label separator
"""

from __future__ import annotations

from dataclasses import dataclass


# ────────────────────────────────────────────────────────────────────────────────
# Display
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ProjectConfig:
    """
    Global project configuration.

    Attributes
    ----------
    route_separator : str
        Text placed between origin and destination in a route key
        (e.g. "London → Paris").
    error_preview_rows : int
        How many rejected rows are spelled out in a user-facing summary
        before the rest is elided with "...".
    """

    route_separator: str = " → "
    error_preview_rows: int = 3


# ────────────────────────────────────────────────────────────────────────────────
# Pseudo-distance
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DistanceParams:
    """
    Constants of the pseudo-distance formula.

        distance = abs(sum(code points of origin + destination)) % modulus + offset_km

    Attributes
    ----------
    modulus : int
        Spread of the distance range (km).
    offset_km : int
        Minimum distance (km).
    """

    modulus: int = 3000
    offset_km: int = 100


# ────────────────────────────────────────────────────────────────────────────────
# Leg splitting
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LegPolicy:
    """
    Rules for splitting a journey into transport legs.

    Attributes
    ----------
    multimodal_threshold_km : float
        Journeys strictly longer than this go Road + Sea + Road; anything
        up to and including it is a single Road leg.
    road_access_km : float
        Length of each road leg that feeds/leaves the sea leg.
    modes_separator : str
        Separator used when rendering a leg sequence as text.
    """

    multimodal_threshold_km: float = 1500
    road_access_km: float = 100
    modes_separator: str = " + "


# ────────────────────────────────────────────────────────────────────────────────
# Defaults
# ────────────────────────────────────────────────────────────────────────────────

PROJECT_CONFIG = ProjectConfig()
DISTANCE_PARAMS = DistanceParams()
LEG_POLICY = LegPolicy()


def get_project_config() -> ProjectConfig:
    """Default ProjectConfig."""
    return PROJECT_CONFIG


def get_distance_params() -> DistanceParams:
    """Default DistanceParams."""
    return DISTANCE_PARAMS


def get_leg_policy() -> LegPolicy:
    """Default LegPolicy."""
    return LEG_POLICY
