from pathlib import Path

import pytest
from openpyxl import Workbook

from route_planner.data import stores_repository
from route_planner.data.stores_repository import (
    compute_store_stats,
    get_store_by_distributor_id,
    load_master_stores,
    search_stores,
)
from route_planner.models.domain import Priority


def test_load_master_stores_from_workbook_keeps_active_in_bounds_rows(master_xlsx: Path):
    stores = load_master_stores(master_xlsx)

    assert [store.distributor_id for store in stores] == ["DST001", "DST002", "DST003"]
    first = stores[0]
    assert first.store_name == "Toko Sumber Rejeki"
    assert first.coordinates == "-7.2651,112.7842"
    assert first.store_address == "Surabaya Timur, Jawa Timur"
    assert first.store_type == "Grocery"
    assert first.priority is Priority.B
    assert first.visit_time == 30


def test_load_master_stores_from_csv(master_csv: Path):
    stores = load_master_stores(master_csv)

    assert [store.distributor_id for store in stores] == ["DST001", "DST002", "DST003"]


def test_load_master_stores_falls_back_to_first_sheet(tmp_path: Path):
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Export"
    sheet.append(["Distributor ID", "Outlet Name", "Region", "Latitude", "Longitude"])
    sheet.append([1001.0, "Toko Baru", "Bali", -8.65, 115.22])
    path = tmp_path / "export.xlsx"
    workbook.save(path)

    [store] = load_master_stores(path)

    assert store.distributor_id == "1001"
    assert store.store_address == "Bali"


def test_load_master_stores_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_master_stores(tmp_path / "missing.xlsx")


def test_load_master_stores_requires_header(tmp_path: Path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError):
        load_master_stores(path)


def test_search_stores_filters_and_sorts(master_xlsx: Path):
    assert [store.store_name for store in search_stores(source=master_xlsx)] == [
        "Apotek Sehat",
        "Minimarket Jaya",
        "Toko Sumber Rejeki",
    ]
    assert [store.distributor_id for store in search_stores("surabaya", source=master_xlsx)] == ["DST002", "DST001"]
    assert [store.distributor_id for store in search_stores("dst003", source=master_xlsx)] == ["DST003"]
    assert [store.distributor_id for store in search_stores(region="jawa timur", source=master_xlsx)] == [
        "DST002",
        "DST001",
    ]
    assert [store.distributor_id for store in search_stores(store_type="pharm", source=master_xlsx)] == ["DST002"]
    assert search_stores("toko", region="DKI Jakarta", source=master_xlsx) == []


def test_get_store_by_distributor_id(master_xlsx: Path):
    store = get_store_by_distributor_id(" DST002 ", source=master_xlsx)

    assert store is not None
    assert store.store_name == "Apotek Sehat"
    assert get_store_by_distributor_id("DST004", source=master_xlsx) is None


def test_compute_store_stats(master_xlsx: Path):
    stats = compute_store_stats(source=master_xlsx)

    assert stats == {
        "total_stores": 3,
        "by_region": {"Jawa Timur": 2, "DKI Jakarta": 1},
        "by_store_type": {"Grocery": 1, "Pharmacy": 1, "Minimarket": 1},
    }


def test_master_data_bounds_come_from_settings(master_xlsx: Path, monkeypatch):
    monkeypatch.setattr(stores_repository.settings, "master_data_bounds", (20.0, 23.0, 38.0, 41.0))

    assert [store.distributor_id for store in load_master_stores(master_xlsx)] == ["DST004"]
