"""Wall-clock helpers. Times are minutes since midnight with no date or timezone."""

from __future__ import annotations

from ..exceptions import ParseError

MINUTES_PER_DAY = 24 * 60


def parse_time_of_day(text: str) -> int:
    """Parse a 24-hour "HH:MM" string into minutes since midnight."""

    if not isinstance(text, str):
        raise ParseError(f"Invalid time of day: {text!r}", value=text)
    parts = text.strip().split(":")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ParseError(f"Invalid time of day: {text!r} (expected HH:MM)", value=text)
    hours, minutes = int(parts[0]), int(parts[1])
    if hours > 23 or minutes > 59:
        raise ParseError(f"Time of day out of range: {text!r}", value=text)
    return hours * 60 + minutes


def format_time_of_day(minutes: int) -> str:
    """Render minutes since midnight as a 12-hour clock string, e.g. 570 -> "9:30 AM"."""

    hours, mins = divmod(int(minutes), 60)
    period = "PM" if hours % 24 >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{mins:02d} {period}"


def format_24h(minutes: int) -> str:
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"
