"""Data access helpers for the store master dataset."""

from __future__ import annotations

import csv
import functools
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator, Optional

from openpyxl import load_workbook

from ..config import settings
from ..exceptions import ParseError
from ..models.domain import MasterStore, Priority
from ..services.geospatial import is_within_bounds, parse_coordinates

logger = logging.getLogger(__name__)

# Accepted header spellings for each master-data column, compared lower-cased.
COLUMN_ALIASES = {
    "distributor_id": ("distributor_id", "distributorid", "distributor id"),
    "store_name": ("outlet_name", "store_name", "storename", "outlet name"),
    "store_type": ("outlet_types", "outlet_type", "store_type", "type"),
    "area": ("area",),
    "region": ("region",),
    "latitude": ("latitude", "lat"),
    "longitude": ("longitude", "lng", "lon"),
}


def _normalize_header(value: object) -> str:
    return str(value or "").strip().lower()


def _cell(row: dict, column: str) -> str:
    for alias in COLUMN_ALIASES[column]:
        value = row.get(alias)
        if isinstance(value, float) and value.is_integer() and column == "distributor_id":
            value = int(value)
        if value is not None and str(value).strip() != "":
            return str(value).strip()
    return ""


def _coerce_float(value: str) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value.replace(",", "."))
    except ValueError:
        return None


def _iter_csv_rows(path: Path) -> Iterator[dict]:
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Store master file '{path}' is missing a header row.")
        for row in reader:
            yield {_normalize_header(key): value for key, value in row.items() if key is not None}


def _iter_workbook_rows(path: Path) -> Iterator[dict]:
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        if settings.store_sheet_name and settings.store_sheet_name in workbook.sheetnames:
            sheet = workbook[settings.store_sheet_name]
        else:
            sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(values_only=True)
        header = next(rows, None)
        if not header or not any(header):
            raise ValueError(f"Store master file '{path}' is missing a header row.")
        columns = [_normalize_header(value) for value in header]
        for values in rows:
            if not values or all(value is None for value in values):
                continue
            yield {column: value for column, value in zip(columns, values) if column}
    finally:
        workbook.close()


def _to_master_store(row: dict) -> Optional[MasterStore]:
    distributor_id = _cell(row, "distributor_id")
    store_name = _cell(row, "store_name")
    lat = _coerce_float(_cell(row, "latitude"))
    lng = _coerce_float(_cell(row, "longitude"))
    if not (distributor_id and store_name) or not lat or not lng:
        return None

    coordinates = f"{lat},{lng}"
    try:
        point = parse_coordinates(coordinates)
    except ParseError:
        return None
    if not is_within_bounds(point, settings.master_data_bounds):
        return None

    area = _cell(row, "area")
    region = _cell(row, "region")
    return MasterStore(
        distributor_id=distributor_id,
        store_name=store_name,
        store_address=", ".join(part for part in (area, region) if part),
        coordinates=coordinates,
        store_type=_cell(row, "store_type"),
        region=region,
        area=area,
        priority=Priority(settings.default_priority),
        visit_time=settings.default_visit_minutes,
        raw=row,
    )


@functools.lru_cache(maxsize=1)
def load_master_stores(source: Optional[Path] = None) -> tuple[MasterStore, ...]:
    """Load active stores from the configured master file (.xlsx or .csv)."""

    path = source or settings.store_master_file
    if not path.exists():
        raise FileNotFoundError(f"Store master file not found: {path}")

    rows: Iterable[dict] = _iter_csv_rows(path) if path.suffix.lower() == ".csv" else _iter_workbook_rows(path)
    stores: list[MasterStore] = []
    skipped = 0
    for row in rows:
        store = _to_master_store(row)
        if store is None:
            skipped += 1
            continue
        stores.append(store)

    logger.info(f"Loaded {len(stores)} active stores from {path.name} ({skipped} inactive or out of bounds)")
    return tuple(stores)


def search_stores(
    query: Optional[str] = None,
    *,
    region: Optional[str] = None,
    store_type: Optional[str] = None,
    source: Optional[Path] = None,
) -> list[MasterStore]:
    """Filter master stores by free text, exact region and partial store type; sorted by name."""

    results: Iterable[MasterStore] = load_master_stores(source)

    term = (query or "").strip().lower()
    if term:
        results = [
            store
            for store in results
            if term in store.store_name.lower()
            or term in store.distributor_id.lower()
            or term in store.store_address.lower()
            or term in store.store_type.lower()
        ]
    if region:
        wanted = region.strip().lower()
        results = [store for store in results if store.region.lower() == wanted]
    if store_type:
        wanted_type = store_type.strip().lower()
        results = [store for store in results if wanted_type in store.store_type.lower()]

    return sorted(results, key=lambda store: store.store_name.lower())


def get_store_by_distributor_id(distributor_id: str, source: Optional[Path] = None) -> Optional[MasterStore]:
    wanted = distributor_id.strip()
    return next((store for store in load_master_stores(source) if store.distributor_id == wanted), None)


def compute_store_stats(source: Optional[Path] = None) -> dict:
    stores = load_master_stores(source)
    return {
        "total_stores": len(stores),
        "by_region": dict(Counter(store.region for store in stores)),
        "by_store_type": dict(Counter(store.store_type for store in stores)),
    }
