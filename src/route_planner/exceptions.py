"""Error types shared across the route planner."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when a coordinate or time-of-day string cannot be parsed."""

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value
