"""
Coordinate helpers.

Decides whether user input is already a "longitude,latitude" pair and formats
numbers the way the tool output expects.
"""

import math

from ..constants import NaverConfig


def parse_coordinate(value: str) -> tuple[float, float] | None:
    """Parse a "lon,lat" string.

    Args:
        value: Candidate string such as "127.0276,37.4979"

    Returns:
        (lon, lat) tuple, or None if the string is not an in-range coordinate
    """
    parts = value.split(",")
    if len(parts) != 2:
        return None
    try:
        lon = float(parts[0].strip())
        lat = float(parts[1].strip())
    except ValueError:
        return None
    if not (math.isfinite(lon) and math.isfinite(lat)):
        return None
    if not (-180 <= lon <= 180 and -90 <= lat <= 90):
        return None
    return lon, lat


def is_coordinate(value: str) -> bool:
    """True if value is a "lon,lat" pair that needs no geocoding."""
    return parse_coordinate(value) is not None


def format_number(value: float) -> str:
    """Render a float without a trailing ".0" (127.0 -> "127")."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_coordinate(lon: float, lat: float) -> str:
    return f"{format_number(lon)},{format_number(lat)}"


def format_won(amount: float | None) -> str:
    """Format a fare with thousands separators and the currency suffix."""
    if not amount:
        return f"0{NaverConfig.CURRENCY_SUFFIX}"
    if float(amount).is_integer():
        text = f"{int(amount):,}"
    else:
        text = f"{amount:,}"
    return f"{text}{NaverConfig.CURRENCY_SUFFIX}"


def distance_km(metres: float) -> str:
    """Metres to kilometres with one decimal ("12.3km")."""
    return f"{metres / 1000:.1f}km"


def duration_minutes(milliseconds: float) -> int:
    """Milliseconds to whole minutes, rounding halves up."""
    return math.floor(milliseconds / 60000 + 0.5)
