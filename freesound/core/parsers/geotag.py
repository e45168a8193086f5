"""Module for geotag parsing"""
import re

from ..errors import MalformedGeotag
from ..models.geolocation import GeoLocation

# e.g. "41.0082325664 28.9731252193"
NUMBER_PAT = re.compile(r"[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?")


def parse_geotag(text: str) -> GeoLocation:
    """Parse "<latitude> <longitude>" into a GeoLocation."""
    tokens = text.split()
    if len(tokens) != 2 or not all(NUMBER_PAT.fullmatch(token) for token in tokens):
        raise MalformedGeotag(text)
    latitude, longitude = (float(token) for token in tokens)
    return GeoLocation(latitude, longitude)


def format_geotag(geotag: GeoLocation) -> str:
    """Format a GeoLocation the way the API does."""
    return f"{float(geotag.latitude)!r} {float(geotag.longitude)!r}"
