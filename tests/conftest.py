from pathlib import Path

import pytest
from openpyxl import Workbook

MASTER_HEADER = [
    "rank",
    "outlet_id",
    "distributor_id",
    "outlet_name",
    "outlet_types",
    "sales_types",
    "area",
    "region",
    "latitude",
    "longitude",
]

MASTER_ROWS = [
    [1, "O-1", "DST001", "Toko Sumber Rejeki", "Grocery", "GT", "Surabaya Timur", "Jawa Timur", -7.2651, 112.7842],
    [2, "O-2", "DST002", "Apotek Sehat", "Pharmacy", "GT", "Surabaya Barat", "Jawa Timur", -7.2702, 112.6810],
    [3, "O-3", "DST003", "Minimarket Jaya", "Minimarket", "MT", "Jakarta Selatan", "DKI Jakarta", -6.2615, 106.8106],
    [4, "O-4", "DST004", "Toko Luar Negeri", "Grocery", "GT", "Jeddah", "Makkah", 21.5433, 39.1728],
    [5, "O-5", "", "Tanpa Distributor", "Grocery", "GT", "Surabaya", "Jawa Timur", -7.25, 112.75],
    [6, "O-6", "DST006", "Tanpa Koordinat", "Grocery", "GT", "Surabaya", "Jawa Timur", None, None],
]


@pytest.fixture(autouse=True)
def clear_store_cache():
    from route_planner.data.stores_repository import load_master_stores

    load_master_stores.cache_clear()
    yield
    load_master_stores.cache_clear()


@pytest.fixture
def master_xlsx(tmp_path: Path) -> Path:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Master Data"
    sheet.append(MASTER_HEADER)
    for row in MASTER_ROWS:
        sheet.append(row)
    path = tmp_path / "master_data.xlsx"
    workbook.save(path)
    return path


@pytest.fixture
def master_csv(tmp_path: Path) -> Path:
    path = tmp_path / "master_data.csv"
    lines = [",".join(MASTER_HEADER)]
    for row in MASTER_ROWS:
        lines.append(",".join("" if value is None else str(value) for value in row))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
