"""Freesound sound resource models and codecs."""
from .core.codecs.binary_codec import decode_from_binary, encode_to_binary
from .core.codecs.json_codec import (
    decode_from_dict,
    decode_from_json,
    encode_to_dict,
    encode_to_json,
)
from .core.errors import (
    DecodeError,
    MalformedGeotag,
    MalformedPayload,
    MissingField,
    TypeMismatch,
)
from .core.models.sound import GeoLocation, Image, Preview, Sound

__all__ = [
    "DecodeError",
    "GeoLocation",
    "Image",
    "MalformedGeotag",
    "MalformedPayload",
    "MissingField",
    "Preview",
    "Sound",
    "TypeMismatch",
    "decode_from_binary",
    "decode_from_dict",
    "decode_from_json",
    "encode_to_binary",
    "encode_to_dict",
    "encode_to_json",
]
