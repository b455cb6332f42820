"""Store master-data API schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class MasterStoreModel(BaseModel):
    distributor_id: str
    store_name: str
    store_address: str
    coordinates: str
    store_type: str
    region: str
    area: str
    priority: str
    visit_time: int


class StoreFiltersModel(BaseModel):
    query: Optional[str] = None
    region: Optional[str] = None
    store_type: Optional[str] = None


class StoreSearchResponse(BaseModel):
    stores: List[MasterStoreModel]
    total: int
    filters: StoreFiltersModel


class StoreStatsModel(BaseModel):
    total_stores: int
    by_region: dict[str, int]
    by_store_type: dict[str, int]


class StoreStatsResponse(BaseModel):
    stats: StoreStatsModel


class StoreLookupResponse(BaseModel):
    store: MasterStoreModel
