"""Module to convert sounds to and from Freesound API JSON."""
import json
from dataclasses import fields
from typing import Union

from ...common import LOG
from ..errors import DecodeError, MalformedPayload, MissingField, TypeMismatch
from ..models.sound import Image, Preview, Sound, wire_name

# Shape of each field in API JSON, where it is not a string
WIRE_TYPES = {
    "id": int,
    "tags": list,
    "images": Image,
    "previews": Preview,
    "duration": float,
}
# Absent and null are both decoded as None.
OPTIONAL_FIELDS = {"geotag", "large_size_spectral_url"}

EXPECTED = {
    str: "a string",
    int: "an integer",
    float: "a number",
    list: "a list of strings",
    Image: "an object",
    Preview: "an object",
}


def _check(obj: dict, model, prefix: str = ""):
    """Check presence and JSON types of the fields of a model."""
    for model_field in fields(model):
        key = wire_name(model_field)
        name = prefix + key
        value = obj.get(key)
        if value is None:
            if model_field.name in OPTIONAL_FIELDS:
                continue
            if key not in obj:
                raise MissingField(name)
        kind = WIRE_TYPES.get(model_field.name, str)
        kinds = {float: (int, float), Image: dict, Preview: dict}.get(kind, kind)
        if isinstance(value, bool) or not isinstance(value, kinds):
            raise TypeMismatch(name, EXPECTED[kind], value)
        if kind is list and not all(isinstance(item, str) for item in value):
            raise TypeMismatch(name, EXPECTED[kind], value)
        if kind in (Image, Preview):
            _check(value, kind, prefix=name + ".")


def decode_from_dict(obj: dict) -> Sound:
    """Make a Sound from a parsed API response, e.g. one search result."""
    if not isinstance(obj, dict):
        raise MalformedPayload(f"Sound should be a JSON object: {obj!r}")
    try:
        _check(obj, Sound)
        # Optional fields may be left out entirely.
        return Sound.from_dict(obj, infer_missing=True)
    except DecodeError as err:
        LOG.error("Sound %s not decoded: %s", obj.get("id"), err)
        raise


def decode_from_json(payload: Union[bytes, str]) -> Sound:
    """Make a Sound from an API response body."""
    try:
        obj = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as err:
        LOG.error("Sound payload is not JSON: %s", err)
        raise MalformedPayload(f"Sound payload is not JSON: {err}") from err
    return decode_from_dict(obj)


def encode_to_dict(sound: Sound) -> dict:
    """Make an API-shaped dict from a Sound."""
    return sound.to_dict()


def encode_to_json(sound: Sound) -> str:
    return sound.to_json()
