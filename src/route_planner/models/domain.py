"""Domain models for stores, coordinates and optimized visit plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class Priority(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def weight(self) -> int:
        """Selection weight, lower is more important."""
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS = {Priority.A: 1, Priority.B: 2, Priority.C: 3, Priority.D: 4}


class VisitStatus(str, Enum):
    VISITED = "VISITED"
    UNREACHABLE = "UNREACHABLE"


@dataclass(frozen=True, slots=True)
class Point:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude {self.lat} is outside [-90, 90].")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude {self.lng} is outside [-180, 180].")


@dataclass(frozen=True, slots=True)
class Store:
    """A store to visit, with defaults already resolved at the request boundary."""

    store_name: str
    coordinates: str
    priority: Priority = Priority.B
    visit_time: int = 30
    distributor_id: Optional[str] = None
    id: Any = None


@dataclass(frozen=True, slots=True)
class OptimizedStore:
    """A store annotated with its place in the plan."""

    store: Store
    status: VisitStatus
    visit_order: Optional[int] = None
    arrival_time: Optional[str] = None
    depart_time: Optional[str] = None
    maps_url: Optional[str] = None


@dataclass(slots=True)
class RouteSummary:
    visited_stores: int
    unreachable_stores: int
    total_distance_km: float
    total_time_min: int
    completion_time: str


@dataclass(slots=True)
class OptimizationResult:
    stores: List[OptimizedStore]
    summary: RouteSummary
    metadata: dict = field(default_factory=dict)

    @property
    def visited(self) -> List[OptimizedStore]:
        return [entry for entry in self.stores if entry.status is VisitStatus.VISITED]

    @property
    def unreachable(self) -> List[OptimizedStore]:
        return [entry for entry in self.stores if entry.status is VisitStatus.UNREACHABLE]


@dataclass(slots=True)
class MasterStore:
    """A store record from the master dataset, used to prefill route stores."""

    distributor_id: str
    store_name: str
    store_address: str
    coordinates: str
    store_type: str
    region: str
    area: str
    priority: Priority = Priority.B
    visit_time: int = 30
    raw: dict = field(default_factory=dict)
