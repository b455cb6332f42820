"""Store master-data endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Query, status

from ...data.stores_repository import compute_store_stats, get_store_by_distributor_id, search_stores
from ...models.domain import MasterStore
from ...schemas.stores import (
    MasterStoreModel,
    StoreFiltersModel,
    StoreLookupResponse,
    StoreSearchResponse,
    StoreStatsModel,
    StoreStatsResponse,
)

router = APIRouter(prefix="/stores", tags=["stores"])


def _to_model(store: MasterStore) -> MasterStoreModel:
    payload = asdict(store)
    payload.pop("raw", None)
    payload["priority"] = store.priority.value
    return MasterStoreModel(**payload)


def _unavailable(exc: Exception) -> HTTPException:
    logging.error(f"Store master data unavailable: {exc}")
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.get("", response_model=StoreSearchResponse | StoreStatsResponse, status_code=status.HTTP_200_OK)
def list_stores(
    q: str | None = Query(default=None, description="Free-text search over name, distributor ID, address and type"),
    region: str | None = Query(default=None, description="Exact region filter"),
    store_type: str | None = Query(default=None, alias="type", description="Partial store type filter"),
    stats: bool = Query(default=False, description="Return dataset statistics instead of stores"),
) -> StoreSearchResponse | StoreStatsResponse:
    try:
        if stats:
            return StoreStatsResponse(stats=StoreStatsModel(**compute_store_stats()))
        stores = search_stores(q, region=region, store_type=store_type)
    except (FileNotFoundError, ValueError) as exc:
        raise _unavailable(exc) from exc

    return StoreSearchResponse(
        stores=[_to_model(store) for store in stores],
        total=len(stores),
        filters=StoreFiltersModel(query=q, region=region, store_type=store_type),
    )


@router.get("/{distributor_id}", response_model=StoreLookupResponse, status_code=status.HTTP_200_OK)
def get_store(distributor_id: str) -> StoreLookupResponse:
    try:
        store = get_store_by_distributor_id(distributor_id)
    except (FileNotFoundError, ValueError) as exc:
        raise _unavailable(exc) from exc
    if store is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Store not found")
    return StoreLookupResponse(store=_to_model(store))
