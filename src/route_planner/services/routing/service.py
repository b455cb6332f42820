"""Route optimization orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Sequence

from ...models.domain import OptimizationResult, Priority, Store
from ...persistence.filesystem import FileStorage
from ...schemas.routing import (
    OptimizedStoreModel,
    RouteRequest,
    RouteResponse,
    RouteSummaryModel,
    StoreInput,
)
from ..geospatial import clean_coordinates, parse_coordinates
from ..outputs.route_formatter import optimized_store_to_dict, route_result_to_csv, route_result_to_json
from ..timeofday import format_24h, parse_time_of_day
from .optimizer import optimize_route
from .trace import OptimizationTracer

logger = logging.getLogger(__name__)


def build_stores(inputs: Sequence[StoreInput]) -> list[Store]:
    return [
        Store(
            store_name=item.store_name,
            coordinates=item.coordinates,
            priority=Priority(item.priority),
            visit_time=item.visit_time,
            distributor_id=item.distributor_id,
            id=item.id,
        )
        for item in inputs
    ]


def _build_metadata(payload: RouteRequest, departure_minutes: int, store_count: int) -> dict:
    metadata: dict = {
        "starting_point": clean_coordinates(payload.starting_point),
        "departure_time": format_24h(departure_minutes),
        "store_count": store_count,
    }
    if payload.route_date:
        metadata["route_date"] = payload.route_date.isoformat()
    if payload.run_label:
        metadata["run_label"] = payload.run_label
    if payload.requested_by:
        metadata["author"] = payload.requested_by
    if payload.notes:
        metadata["notes"] = payload.notes
    return metadata


def _persist_outputs(result: OptimizationResult) -> None:
    run_dir = FileStorage().save_route_run(route_result_to_json(result), route_result_to_csv(result))
    result.metadata["output_dir"] = str(run_dir)
    logger.info(f"Persisted route outputs to {run_dir}")


def optimize_request(payload: RouteRequest, *, tracer: OptimizationTracer | None = None) -> RouteResponse:
    """Validate raw route data, run the optimizer and shape the response.

    A malformed starting point or departure time raises ParseError before any
    store is considered.
    """

    start = parse_coordinates(clean_coordinates(payload.starting_point))
    departure_minutes = parse_time_of_day(payload.departure_time)
    stores = build_stores(payload.stores)

    logger.info(f"Optimizing route from {start.lat},{start.lng} at {format_24h(departure_minutes)} for {len(stores)} stores")
    result = optimize_route(start, departure_minutes, stores, tracer=tracer)
    result.metadata.update(_build_metadata(payload, departure_minutes, len(stores)))

    summary = result.summary
    logger.info(
        f"Route optimized: {summary.visited_stores} visited, {summary.unreachable_stores} unreachable, "
        f"{summary.total_distance_km:.2f}km, done at {summary.completion_time}"
    )
    if summary.unreachable_stores:
        names = ", ".join(entry.store.store_name for entry in result.unreachable)
        logger.warning(f"Stores not reachable within the working day: {names}")

    if payload.persist:
        _persist_outputs(result)

    return RouteResponse(
        metadata=result.metadata,
        summary=RouteSummaryModel(**asdict(summary)),
        stores=[OptimizedStoreModel(**optimized_store_to_dict(entry)) for entry in result.stores],
    )
