"""Route group exports."""

from . import health, routes, stores

__all__ = ["routes", "health", "stores"]
