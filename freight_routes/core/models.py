# freight_routes/core/models.py
# -*- coding: utf-8 -*-

"""
Core domain models (pure dataclasses).

These are small, shared structures used across the project:
    - TransportRow: one validated shipment record
    - JourneyLeg: a mode-homogeneous segment of a journey
    - Route / RouteEnds: origin→destination pairs (with / without countries)
    - Journey: the realized transport plan for one TransportRow
    - RouteGroup: all journeys sharing one route, aggregated for a table
    - ChartData: rounded Road/Sea weight totals
    - FieldError / ValidationError / ValidationResult: row validation output
    - ProcessedData: journeys + route groups of one run

This module deliberately has:
    - no file / CSV imports
    - no pandas
    - no logging side effects

It is safe to import from anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from freight_routes.core.config import get_project_config
from freight_routes.core.types import TransportMode

ROAD: TransportMode = "Road"
SEA: TransportMode = "Sea"


# ────────────────────────────────────────────────────────────────────────────────
# Validated input
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TransportRow:
    """
    A validated shipment record.

    Attributes
    ----------
    origin : str
        Trimmed, non-empty origin label.
    destination : str
        Trimmed, non-empty destination label.
    weight_kg : float
        Cargo weight in kilograms; always finite and > 0.
    origin_country : str
        Trimmed origin country, "" when not provided.
    destination_country : str
        Trimmed destination country, "" when not provided.
    """

    origin: str
    destination: str
    weight_kg: float
    origin_country: str = ""
    destination_country: str = ""


# ────────────────────────────────────────────────────────────────────────────────
# Legs and journeys
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class JourneyLeg:
    """
    A single Road or Sea segment.

    Attributes
    ----------
    mode : TransportMode
        "Road" or "Sea".
    distance : float
        Leg length in km.
    weight : float
        Cargo carried on this leg (kg); equals the journey weight.
    """

    mode: TransportMode
    distance: float
    weight: float


@dataclass(frozen=True)
class RouteEnds:
    """Ordered origin→destination pair, as shown in the route table."""

    origin: str
    destination: str

    @property
    def route_key(self) -> str:
        return f"{self.origin}{get_project_config().route_separator}{self.destination}"


@dataclass(frozen=True)
class Route(RouteEnds):
    """Origin→destination pair carrying the country labels of the source row."""

    origin_country: str = ""
    destination_country: str = ""

    def ends(self) -> RouteEnds:
        return RouteEnds(origin=self.origin, destination=self.destination)


@dataclass(frozen=True)
class Journey:
    """
    Realized transport plan for one input row.

    Attributes
    ----------
    id : str
        Unique within one processing run ("journey-<index>").
    route : Route
        Route of the source row.
    weight : float
        Original cargo weight (kg).
    distance : float
        Total pseudo-distance (km).
    legs : Tuple[JourneyLeg, ...]
        Ordered leg sequence.
    total_road_weight : float
        `weight` if any leg is Road, else 0.
    total_sea_weight : float
        `weight` if any leg is Sea, else 0.

    Notes
    -----
    Weight is attributed once per mode present, never once per leg:
    Road + Sea + Road carrying 1000 kg counts 1000 kg for Road, not 2000 kg.
    """

    id: str
    route: Route
    weight: float
    distance: float
    legs: Tuple[JourneyLeg, ...]
    total_road_weight: float
    total_sea_weight: float


@dataclass(frozen=True)
class RouteGroup:
    """
    All journeys sharing one (origin, destination) pair.

    Attributes
    ----------
    route_key : str
        Canonical "origin → destination" label.
    route : RouteEnds
        Origin and destination.
    distance : float
        Distance shared by every journey of the group (km).
    times_taken : int
        Number of journeys in the group.
    total_distance : float
        distance × times_taken.
    modes : str
        Leg modes as text, e.g. "Road + Sea + Road".
    total_weight : float
        Σ journey.weight.
    total_road_weight : float
        Σ journey.total_road_weight.
    total_sea_weight : float
        Σ journey.total_sea_weight.
    journeys : Tuple[Journey, ...]
        Member journeys, in input order.
    """

    route_key: str
    route: RouteEnds
    distance: float
    times_taken: int
    total_distance: float
    modes: str
    total_weight: float
    total_road_weight: float
    total_sea_weight: float
    journeys: Tuple[Journey, ...] = field(default_factory=tuple, repr=False)


@dataclass(frozen=True)
class ChartData:
    """Rounded Road/Sea weight totals (kg) over a journey subset."""

    road: int = 0
    sea: int = 0

    def to_dict(self) -> dict:
        return {"road": self.road, "sea": self.sea}


@dataclass
class ProcessedData:
    """Output of one aggregation run."""

    journeys: List[Journey] = field(default_factory=list)
    route_groups: List[RouteGroup] = field(default_factory=list)

    def find_group(self, route_key: str) -> Optional[RouteGroup]:
        """Return the route group with `route_key`, or None if there is none."""
        for group in self.route_groups:
            if group.route_key == route_key:
                return group
        return None


# ────────────────────────────────────────────────────────────────────────────────
# Validation output
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldError:
    """
    One field-level validation failure.

    Attributes
    ----------
    field : str
        External field name (e.g. "weightKg").
    kind : str
        "RequiredFieldMissing" or "InvalidWeight".
    message : str
        Human-readable message.
    """

    field: str
    kind: str
    message: str


@dataclass(frozen=True)
class ValidationError:
    """All field failures of one rejected row (row_index is 1-based)."""

    row_index: int
    errors: Tuple[FieldError, ...]

    @property
    def fields(self) -> List[str]:
        return [e.field for e in self.errors]

    def summary(self) -> str:
        return f"Row {self.row_index}: " + ", ".join(e.message for e in self.errors)


@dataclass
class ValidationResult:
    """Valid rows plus the rejected rows' errors, both in input order."""

    valid_rows: List[TransportRow] = field(default_factory=list)
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
