"""Greedy single-day store visit optimizer.

Stores are picked one at a time by a distance-first score with the priority
class as a mild nudge, then simulated against the working day: travel at a
fixed pace, a lunch break that pauses or postpones visits, and a hard end of
day. Stores that cannot finish before the end of day are reported as
unreachable and cost neither time nor distance.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...models.domain import (
    OptimizationResult,
    OptimizedStore,
    Point,
    RouteSummary,
    Store,
    VisitStatus,
)
from ..geospatial import build_navigation_link, distance_km, parse_coordinates
from ..timeofday import format_time_of_day
from .trace import LoggingTracer, OptimizationTracer

logger = logging.getLogger(__name__)

WORK_START = 9 * 60
WORK_END = 17 * 60
LUNCH_START = 12 * 60
LUNCH_END = 13 * 60
TRAVEL_MINUTES_PER_KM = 5
BUFFER_MINUTES = 5

DISTANCE_WEIGHT = 100
PRIORITY_WEIGHT = 10


def selection_score(distance: float, store: Store) -> float:
    return distance * DISTANCE_WEIGHT + store.priority.weight * PRIORITY_WEIGHT


def travel_minutes(distance: float) -> int:
    return math.ceil(distance * TRAVEL_MINUTES_PER_KM) + BUFFER_MINUTES


def schedule_visit(arrival: int, visit_time: int) -> tuple[int, int, bool]:
    """Apply opening hours and the lunch break to a tentative visit.

    Returns (arrival, departure, lunch_adjusted).
    """

    # Stores open at WORK_START; an early arrival waits outside.
    arrival = max(arrival, WORK_START)
    departure = arrival + visit_time
    if arrival < LUNCH_END and departure > LUNCH_START:
        if arrival < LUNCH_START:
            departure = LUNCH_END + (departure - LUNCH_START)
        else:
            arrival = LUNCH_END
            departure = LUNCH_END + visit_time
        return arrival, departure, True
    return arrival, departure, False


def _unreachable(store: Store) -> OptimizedStore:
    return OptimizedStore(store=store, status=VisitStatus.UNREACHABLE)


def optimize_route(
    start: Point,
    departure_minutes: int,
    stores: Sequence[Store],
    *,
    tracer: OptimizationTracer | None = None,
) -> OptimizationResult:
    """Order stores into a single-day visit plan.

    Every input store appears exactly once in the result, either VISITED with
    a sequential visit order and schedule, or UNREACHABLE with no schedule.
    """

    if tracer is None:
        tracer = LoggingTracer(logger)
    tracer.record("start", start=start, departure=format_time_of_day(departure_minutes), stores=len(stores))

    positions: list[Point | None] = []
    for index, store in enumerate(stores):
        try:
            positions.append(parse_coordinates(store.coordinates))
        except ValueError as exc:
            tracer.record("candidate_skipped", index=index, store=store.store_name, reason=str(exc))
            positions.append(None)

    current_position = start
    current_time = departure_minutes
    total_distance = 0.0
    total_time = 0
    visit_order = 0

    planned: list[OptimizedStore] = []
    remaining = list(range(len(stores)))

    while remaining:
        best_slot = -1
        best_score = math.inf
        best_distance = 0.0
        for slot, index in enumerate(remaining):
            position = positions[index]
            if position is None:
                continue
            distance = distance_km(current_position, position)
            score = selection_score(distance, stores[index])
            tracer.record("candidate_scored", store=stores[index].store_name, distance_km=round(distance, 3), score=round(score, 3))
            if score < best_score:
                best_slot, best_score, best_distance = slot, score, distance

        if best_slot < 0:
            tracer.record("exhausted", remaining=len(remaining))
            break

        index = remaining.pop(best_slot)
        store = stores[index]
        position = positions[index]
        travel = travel_minutes(best_distance)
        tracer.record(
            "selected",
            store=store.store_name,
            priority=store.priority.value,
            distance_km=round(best_distance, 3),
            travel_min=travel,
        )

        arrival, departure, adjusted = schedule_visit(current_time + travel, store.visit_time)
        if adjusted:
            tracer.record(
                "lunch_adjusted",
                store=store.store_name,
                arrival=format_time_of_day(arrival),
                departure=format_time_of_day(departure),
            )

        if departure > WORK_END:
            tracer.record("unreachable", store=store.store_name, would_finish=format_time_of_day(departure))
            planned.append(_unreachable(store))
            continue

        visit_order += 1
        planned.append(
            OptimizedStore(
                store=store,
                status=VisitStatus.VISITED,
                visit_order=visit_order,
                arrival_time=format_time_of_day(arrival),
                depart_time=format_time_of_day(departure),
                maps_url=build_navigation_link(current_position, position),
            )
        )
        tracer.record(
            "visited",
            store=store.store_name,
            order=visit_order,
            arrival=format_time_of_day(arrival),
            departure=format_time_of_day(departure),
        )

        total_distance += best_distance
        total_time += travel + store.visit_time
        current_time = departure
        current_position = position

    planned.extend(_unreachable(stores[index]) for index in remaining)

    visited = sum(1 for entry in planned if entry.status is VisitStatus.VISITED)
    summary = RouteSummary(
        visited_stores=visited,
        unreachable_stores=len(planned) - visited,
        total_distance_km=round(total_distance, 2),
        total_time_min=total_time,
        completion_time=format_time_of_day(current_time),
    )
    tracer.record(
        "complete",
        visited=summary.visited_stores,
        unreachable=summary.unreachable_stores,
        total_distance_km=summary.total_distance_km,
        completion_time=summary.completion_time,
    )
    return OptimizationResult(stores=planned, summary=summary)
