"""Module for timestamp parsing"""
import datetime as dt

import dateparser

from ..errors import TypeMismatch

# Sounds are dated like "2014-04-16T20:07:11.145"
CREATED_FORMATS = ["%Y-%m-%dT%H:%M:%S.%f", "%Y-%m-%dT%H:%M:%S"]


def parse_created(text: str, field: str = "created") -> dt.datetime:
    """Parse the creation timestamp of a sound."""
    parsed = dateparser.parse(
        text,
        date_formats=CREATED_FORMATS,
        settings={
            "STRICT_PARSING": True,
            # No relative dates such as "yesterday"
            "PARSERS": ["custom-formats", "absolute-time"],
        },
    )
    if parsed is None:
        raise TypeMismatch(field, "an ISO 8601 timestamp", text)
    return parsed


def format_created(created: dt.datetime) -> str:
    return created.isoformat()
