"""Route optimization request/response schemas."""

from __future__ import annotations

from datetime import date
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..config import settings
from ..services.geospatial import clean_coordinates

_PRIORITIES = {"A", "B", "C", "D"}


class StoreInput(BaseModel):
    """A store as entered by the user. Defaults are resolved here, once."""

    id: Optional[Any] = Field(default=None, description="Opaque identifier passed through unchanged.")
    distributor_id: Optional[str] = None
    store_name: str
    coordinates: str = Field(..., description='"lat,lng" string; whitespace is removed.')
    priority: Literal["A", "B", "C", "D"] = Field(default_factory=lambda: settings.default_priority)
    visit_time: int = Field(default_factory=lambda: settings.default_visit_minutes, ge=1)

    @field_validator("distributor_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("store_name", mode="before")
    @classmethod
    def _require_name(cls, value: Any) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError("Missing store name")
        return text

    @field_validator("coordinates", mode="before")
    @classmethod
    def _clean_coordinates(cls, value: Any) -> str:
        return clean_coordinates("" if value is None else str(value))

    @field_validator("priority", mode="before")
    @classmethod
    def _normalize_priority(cls, value: Any) -> str:
        text = str(value or "").strip().upper()
        return text if text in _PRIORITIES else settings.default_priority

    @field_validator("visit_time", mode="before")
    @classmethod
    def _default_visit_time(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return settings.default_visit_minutes
        return value


class RouteRequest(BaseModel):
    starting_point: str = Field(..., description='Starting coordinates as "lat,lng".')
    departure_time: str = Field(..., description='Departure time as 24-hour "HH:MM".')
    route_date: Optional[date] = None
    stores: List[StoreInput] = Field(..., min_length=1)
    persist: bool = Field(default=False, description="Write summary.json and stops.csv for this run.")
    requested_by: Optional[str] = Field(default=None, description="Person or system requesting the run.")
    run_label: Optional[str] = Field(default=None, description="Friendly name for persisted outputs.")
    notes: Optional[str] = Field(default=None, description="Free-form notes captured with the run.")


class OptimizedStoreModel(BaseModel):
    id: Optional[Any] = None
    distributor_id: Optional[str] = None
    store_name: str
    coordinates: str
    priority: str
    visit_time: int
    visit_order: Optional[int] = None
    status: Literal["VISITED", "UNREACHABLE"]
    arrival_time: Optional[str] = None
    depart_time: Optional[str] = None
    maps_url: Optional[str] = None


class RouteSummaryModel(BaseModel):
    visited_stores: int
    unreachable_stores: int
    total_distance_km: float
    total_time_min: int
    completion_time: str


class RouteResponse(BaseModel):
    status: Literal["OPTIMIZED"] = "OPTIMIZED"
    metadata: dict
    summary: RouteSummaryModel
    stores: List[OptimizedStoreModel]
