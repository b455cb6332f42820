"""File-based persistence for route optimization runs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..config import settings

SUMMARY_FILENAME = "summary.json"
STOPS_FILENAME = "stops.csv"


class FileStorage:
    """Stores each optimization run as a timestamped directory under ``<data_root>/outputs``."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"
        self.output_root.mkdir(parents=True, exist_ok=True)

    def make_run_directory(self, prefix: str = "route") -> Path:
        # Microseconds keep back-to-back runs from colliding.
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        path = self.output_root / f"{prefix}_{timestamp}"
        path.mkdir(parents=True, exist_ok=False)
        return path

    def write_json(self, path: Path, data: Any, *, indent: int = 2) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=indent, default=str)

    def write_csv(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def save_route_run(self, summary: dict, stops_csv: str, *, prefix: str = "route") -> Path:
        """Write the JSON summary and CSV stop list of one run; returns the run directory."""

        run_dir = self.make_run_directory(prefix=prefix)
        summary.setdefault("metadata", {})["output_dir"] = str(run_dir)
        self.write_json(run_dir / SUMMARY_FILENAME, summary)
        self.write_csv(run_dir / STOPS_FILENAME, stops_csv)
        return run_dir
