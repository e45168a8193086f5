"""Tests for the binary sound codec."""
# pylint: disable=missing-class-docstring, no-self-use, missing-function-docstring
# pylint: disable=redefined-outer-name
import dataclasses
import datetime as dt

import pytest

from ..codecs.binary_codec import decode_from_binary, encode_to_binary
from ..errors import MalformedPayload
from ..models.sound import Image


@pytest.fixture
def bare_sound(sound):
    return dataclasses.replace(
        sound,
        tags=[],
        description="",
        geotag=None,
        images=dataclasses.replace(sound.images, large_size_spectral_url=None),
    )


class TestBinaryCodec:
    def test_round_trip(self, sound):
        assert decode_from_binary(encode_to_binary(sound)) == sound

    def test_round_trip_without_optionals(self, bare_sound):
        decoded = decode_from_binary(encode_to_binary(bare_sound))
        assert decoded == bare_sound
        assert decoded.geotag is None
        assert decoded.images.large_size_spectral_url is None
        assert decoded.tags == ()

    def test_empty_string_is_not_absent(self, sound):
        empty = dataclasses.replace(
            sound, images=Image("", "", "", large_size_spectral_url="")
        )
        decoded = decode_from_binary(encode_to_binary(empty))
        assert decoded.images.large_size_spectral_url == ""

    def test_round_trip_unicode_and_extremes(self, sound):
        odd = dataclasses.replace(
            sound,
            id=2**63 - 1,
            name="Glocke – Kirchturm 鐘",
            tags=["🔔", "ß"],
            duration=0.0,
            created=dt.datetime(2020, 2, 29, 0, 0, tzinfo=dt.timezone.utc),
        )
        assert decode_from_binary(encode_to_binary(odd)) == odd

    def test_starts_with_id(self, sound):
        assert encode_to_binary(sound)[:8] == (1234).to_bytes(8, "big")

    def test_truncated(self, sound):
        data = encode_to_binary(sound)
        for size in (0, 7, 20, len(data) - 1):
            with pytest.raises(MalformedPayload):
                decode_from_binary(data[:size])

    def test_trailing_bytes(self, sound):
        with pytest.raises(MalformedPayload):
            decode_from_binary(encode_to_binary(sound) + b"\x00")

    def test_bad_presence_flag(self, bare_sound):
        data = bytearray(encode_to_binary(bare_sound))
        # id, url, name, tag count, description, then the geotag flag
        offset = 8
        for _ in range(2):
            offset += 4 + int.from_bytes(data[offset : offset + 4], "big")
        offset += 4
        offset += 4 + int.from_bytes(data[offset : offset + 4], "big")
        assert data[offset] == 0
        data[offset] = 7
        with pytest.raises(MalformedPayload):
            decode_from_binary(bytes(data))
