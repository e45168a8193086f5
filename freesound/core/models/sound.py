"""Sound model module.

Refer to: https://freesound.org/docs/api/resources_apiv2.html#sound-resources
"""
import datetime as dt
import math
from dataclasses import dataclass, field, fields
from typing import Optional, Tuple

from dataclasses_json import DataClassJsonMixin, config

from ...api_classes import API_BASE_URL, WWW_BASE_URL
from ..errors import TypeMismatch
from ..parsers.geotag import format_geotag, parse_geotag
from ..parsers.timestamp import format_created, parse_created
from .geolocation import GeoLocation

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def wire_field(name: str, **kwargs):
    """A field named differently in API JSON."""
    return field(metadata=config({"wire_name": name}, field_name=name), **kwargs)


def wire_name(model_field) -> str:
    """API JSON name of a model field."""
    return model_field.metadata.get("wire_name", model_field.name)


def _encode_geotag(value):
    # A GeoLocation, or the list older dataclasses-json releases make of it
    return format_geotag(GeoLocation(*value)) if value is not None else None


def _check_str(name: str, value, optional: bool = False):
    if value is None and optional:
        return
    if not isinstance(value, str):
        raise TypeMismatch(name, "a string", value)


def _check_number(name: str, value, kind=(int, float)):
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeMismatch(name, "a number", value)


# pylint: disable=invalid-name
@dataclass(frozen=True)
class Image(DataClassJsonMixin):
    """Thumbnail URLs of the waveform and spectral plots of a sound."""

    med_size_waveform_url: str = wire_field("waveform_m")
    large_size_waveform_url: str = wire_field("waveform_l")
    med_size_spectral_url: str = wire_field("spectral_m")
    # Not available for every sound.
    large_size_spectral_url: Optional[str] = wire_field("spectral_l", default=None)

    def __post_init__(self):
        for model_field in fields(self):
            _check_str(
                model_field.name,
                getattr(self, model_field.name),
                optional=model_field.name == "large_size_spectral_url",
            )


@dataclass(frozen=True)
class Preview(DataClassJsonMixin):
    """Preview URLs of a sound: two codecs, each in two qualities."""

    low_quality_mp3_url: str = wire_field("preview-lq-mp3")
    high_quality_mp3_url: str = wire_field("preview-hq-mp3")
    low_quality_ogg_url: str = wire_field("preview-lq-ogg")
    high_quality_ogg_url: str = wire_field("preview-hq-ogg")

    def __post_init__(self):
        for model_field in fields(self):
            _check_str(model_field.name, getattr(self, model_field.name))


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class Sound(DataClassJsonMixin):
    """A sound uploaded to Freesound."""

    id: int
    # Page for this sound on the Freesound website.
    url: str
    name: str
    tags: Tuple[str, ...] = field(metadata=config(encoder=list, decoder=tuple))
    description: str
    # Only for sounds that have been geotagged.
    geotag: Optional[GeoLocation] = field(
        metadata=config(encoder=_encode_geotag, decoder=parse_geotag)
    )
    # Uploader of the sound.
    username: str
    images: Image
    previews: Preview
    # Seconds
    duration: float
    created: dt.datetime = field(
        metadata=config(encoder=format_created, decoder=parse_created)
    )

    def __post_init__(self):
        _check_number("id", self.id, int)
        if not INT64_MIN <= self.id <= INT64_MAX:
            raise TypeMismatch("id", "a 64-bit integer", self.id)
        for name in ("url", "name", "description", "username"):
            _check_str(name, getattr(self, name))

        if isinstance(self.tags, str):
            raise TypeMismatch("tags", "a list of strings", self.tags)
        try:
            tags = tuple(self.tags)
        except TypeError as err:
            raise TypeMismatch("tags", "a list of strings", self.tags) from err
        for tag in tags:
            _check_str("tags", tag)
        object.__setattr__(self, "tags", tags)

        if self.geotag is not None and not isinstance(self.geotag, GeoLocation):
            if not (isinstance(self.geotag, tuple) and len(self.geotag) == 2):
                raise TypeMismatch("geotag", "a latitude, longitude pair", self.geotag)
            object.__setattr__(self, "geotag", GeoLocation(*self.geotag))
        if self.geotag is not None:
            _check_number("geotag", self.geotag.latitude)
            _check_number("geotag", self.geotag.longitude)
            if not all(math.isfinite(coord) for coord in self.geotag):
                raise TypeMismatch("geotag", "finite coordinates", self.geotag)

        if not isinstance(self.images, Image):
            raise TypeMismatch("images", "an Image", self.images)
        if not isinstance(self.previews, Preview):
            raise TypeMismatch("previews", "a Preview", self.previews)

        _check_number("duration", self.duration)
        if not (math.isfinite(self.duration) and self.duration >= 0):
            raise TypeMismatch("duration", "a non-negative number", self.duration)
        object.__setattr__(self, "duration", float(self.duration))

        if not isinstance(self.created, dt.datetime):
            raise TypeMismatch("created", "a datetime", self.created)

    @property
    def api_url(self):
        """API resource for this sound."""
        return f"{API_BASE_URL}/sounds/{self.id}/"

    @property
    def user_url(self):
        """Uploader's page on the Freesound website."""
        return f"{WWW_BASE_URL}/people/{self.username}/"
