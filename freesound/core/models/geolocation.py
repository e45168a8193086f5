"""Geolocation model module."""
from typing import NamedTuple


class GeoLocation(NamedTuple):
    """Where a sound was recorded."""

    latitude: float
    longitude: float
