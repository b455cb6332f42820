"""Serializers for optimized route outputs."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ...models.domain import OptimizationResult, OptimizedStore


def optimized_store_to_dict(entry: OptimizedStore) -> dict:
    store = entry.store
    return {
        "id": store.id,
        "distributor_id": store.distributor_id,
        "store_name": store.store_name,
        "coordinates": store.coordinates,
        "priority": store.priority.value,
        "visit_time": store.visit_time,
        "visit_order": entry.visit_order,
        "status": entry.status.value,
        "arrival_time": entry.arrival_time,
        "depart_time": entry.depart_time,
        "maps_url": entry.maps_url,
    }


def route_result_to_json(result: OptimizationResult) -> dict:
    return {
        "metadata": result.metadata,
        "summary": asdict(result.summary),
        "stores": [optimized_store_to_dict(entry) for entry in result.stores],
    }


def route_result_to_csv(result: OptimizationResult) -> str:
    """Visited stops first in visit order, then unreachable stores."""

    buffer = io.StringIO()
    fieldnames = [
        "visit_order",
        "status",
        "store_name",
        "distributor_id",
        "priority",
        "coordinates",
        "visit_time",
        "arrival_time",
        "depart_time",
        "maps_url",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames, extrasaction="ignore")
    writer.writeheader()
    for entry in [*result.visited, *result.unreachable]:
        row = optimized_store_to_dict(entry)
        writer.writerow({key: "" if row[key] is None else row[key] for key in fieldnames})
    return buffer.getvalue()
