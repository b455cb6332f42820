"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_PLANNER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Store Visit Route Planner API"
    api_prefix: str = "/api"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    data_root: Path = Field(default=Path("data"), description="Root directory for static data and run outputs.")
    store_master_file: Path = Field(
        default=Path("data/master_data.xlsx"),
        description="Store master dataset (.xlsx or .csv).",
    )
    store_sheet_name: Optional[str] = Field(
        default="Master Data",
        description="Worksheet holding the store master data. Falls back to the first sheet when absent.",
    )
    master_data_bounds: tuple[float, ...] = Field(
        default=(-11.0, 6.0, 95.0, 141.0),
        description="Bounding box (lat_min, lat_max, lng_min, lng_max) master-data stores must fall within.",
    )
    maps_base_url: str = Field(
        default="https://www.google.com/maps/dir",
        description="Base URL for navigation deep links between two coordinates.",
    )
    default_priority: Literal["A", "B", "C", "D"] = "B"
    default_visit_minutes: int = Field(default=30, ge=1)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", "store_master_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("master_data_bounds", mode="before")
    @classmethod
    def _parse_float_tuple_from_env(cls, value: Any) -> tuple[float, ...]:
        """Parse float tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, (tuple, list)):
            return tuple(float(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(float(item) for item in parsed)
            except (json.JSONDecodeError, TypeError, ValueError):
                pass
            return tuple(float(item.strip()) for item in value.split(",") if item.strip())
        return tuple()

    @field_validator("master_data_bounds")
    @classmethod
    def _check_bounds_shape(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        if len(value) != 4:
            raise ValueError("master_data_bounds expects exactly four values: lat_min, lat_max, lng_min, lng_max.")
        return value


settings = Settings()
