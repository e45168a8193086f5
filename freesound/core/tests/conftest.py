"""Fixtures for Freesound model tests."""
# pylint: disable=missing-function-docstring
import copy
import datetime as dt

import pytest

from ..models.sound import GeoLocation, Image, Preview, Sound

SOUND_JSON = {
    "id": 1234,
    "url": "https://freesound.org/people/Anton/sounds/1234/",
    "name": "Glass bell.wav",
    "tags": ["bell", "glass", "ringing"],
    "description": "A small glass bell, struck once.",
    "geotag": "41.0082325664 28.9731252193",
    "username": "Anton",
    "images": {
        "waveform_m": "https://cdn.freesound.org/displays/1/1234_wave_M.png",
        "waveform_l": "https://cdn.freesound.org/displays/1/1234_wave_L.png",
        "spectral_m": "https://cdn.freesound.org/displays/1/1234_spec_M.jpg",
        "spectral_l": "https://cdn.freesound.org/displays/1/1234_spec_L.jpg",
    },
    "previews": {
        "preview-lq-mp3": "https://cdn.freesound.org/previews/1/1234-lq.mp3",
        "preview-hq-mp3": "https://cdn.freesound.org/previews/1/1234-hq.mp3",
        "preview-lq-ogg": "https://cdn.freesound.org/previews/1/1234-lq.ogg",
        "preview-hq-ogg": "https://cdn.freesound.org/previews/1/1234-hq.ogg",
    },
    "duration": 2.5,
    "created": "2014-04-16T20:07:11.145000",
    # Not modelled; ignored when decoding:
    "license": "http://creativecommons.org/publicdomain/zero/1.0/",
    "num_downloads": 42,
}


@pytest.fixture
def sound_json():
    return copy.deepcopy(SOUND_JSON)


@pytest.fixture
def sound():
    return Sound(
        id=1234,
        url="https://freesound.org/people/Anton/sounds/1234/",
        name="Glass bell.wav",
        tags=["bell", "glass", "ringing"],
        description="A small glass bell, struck once.",
        geotag=GeoLocation(41.0082325664, 28.9731252193),
        username="Anton",
        images=Image(
            med_size_waveform_url="https://cdn.freesound.org/displays/1/1234_wave_M.png",
            large_size_waveform_url="https://cdn.freesound.org/displays/1/1234_wave_L.png",
            med_size_spectral_url="https://cdn.freesound.org/displays/1/1234_spec_M.jpg",
            large_size_spectral_url="https://cdn.freesound.org/displays/1/1234_spec_L.jpg",
        ),
        previews=Preview(
            low_quality_mp3_url="https://cdn.freesound.org/previews/1/1234-lq.mp3",
            high_quality_mp3_url="https://cdn.freesound.org/previews/1/1234-hq.mp3",
            low_quality_ogg_url="https://cdn.freesound.org/previews/1/1234-lq.ogg",
            high_quality_ogg_url="https://cdn.freesound.org/previews/1/1234-hq.ogg",
        ),
        duration=2.5,
        created=dt.datetime(2014, 4, 16, 20, 7, 11, 145000),
    )
