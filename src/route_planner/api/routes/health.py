"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/master-data", status_code=status.HTTP_200_OK)
def health_master_data() -> dict:
    """Report whether the store master file is present and how many stores it yields."""
    from ...data.stores_repository import load_master_stores

    path = settings.store_master_file
    if not path.exists():
        return {"configured": False, "path": str(path), "stores": 0}
    try:
        stores = load_master_stores()
    except (OSError, ValueError) as exc:
        return {"configured": True, "path": str(path), "healthy": False, "error": str(exc)}
    return {"configured": True, "path": str(path), "healthy": True, "stores": len(stores)}
