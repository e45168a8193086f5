"""Module to pass sounds between processes as bytes.

Fields are written in order, big-endian:

- integers and floats as fixed-size struct values
- strings as a byte length followed by UTF-8
- lists as a count followed by that many items
- optional values as a presence flag (0 or 1) followed by the value if present
"""
import datetime as dt
import struct
from typing import Optional

from ...common import LOG
from ..errors import DecodeError, MalformedPayload
from ..models.sound import GeoLocation, Image, Preview, Sound

INT64 = struct.Struct(">q")
UINT32 = struct.Struct(">I")
FLAG = struct.Struct(">B")
DOUBLE = struct.Struct(">d")
COORDS = struct.Struct(">dd")


class _Writer:
    def __init__(self):
        self.chunks = []

    def pack(self, fmt: struct.Struct, *values):
        self.chunks.append(fmt.pack(*values))

    def string(self, value: str):
        data = value.encode("utf-8")
        self.pack(UINT32, len(data))
        self.chunks.append(data)

    def optional_string(self, value: Optional[str]):
        self.pack(FLAG, value is not None)
        if value is not None:
            self.string(value)

    def getvalue(self) -> bytes:
        return b"".join(self.chunks)


class _Reader:
    def __init__(self, data: bytes):
        self.data = memoryview(data)
        self.offset = 0

    def unpack(self, fmt: struct.Struct):
        try:
            values = fmt.unpack_from(self.data, self.offset)
        except struct.error as err:
            raise MalformedPayload(f"Truncated at byte {self.offset}") from err
        self.offset += fmt.size
        return values

    def flag(self) -> bool:
        (flag,) = self.unpack(FLAG)
        if flag not in (0, 1):
            raise MalformedPayload(f"Bad presence flag {flag} at byte {self.offset - 1}")
        return bool(flag)

    def string(self) -> str:
        (length,) = self.unpack(UINT32)
        end = self.offset + length
        if end > len(self.data):
            raise MalformedPayload(f"Truncated at byte {self.offset}")
        try:
            value = str(self.data[self.offset : end], "utf-8")
        except UnicodeDecodeError as err:
            raise MalformedPayload(f"Bad string at byte {self.offset}") from err
        self.offset = end
        return value

    def optional_string(self) -> Optional[str]:
        return self.string() if self.flag() else None

    def done(self):
        if self.offset != len(self.data):
            raise MalformedPayload(
                f"{len(self.data) - self.offset} unexpected trailing bytes"
            )


def encode_to_binary(sound: Sound) -> bytes:
    """Serialize a Sound to bytes."""
    out = _Writer()
    out.pack(INT64, sound.id)
    out.string(sound.url)
    out.string(sound.name)
    out.pack(UINT32, len(sound.tags))
    for tag in sound.tags:
        out.string(tag)
    out.string(sound.description)
    out.pack(FLAG, sound.geotag is not None)
    if sound.geotag is not None:
        out.pack(COORDS, *sound.geotag)
    out.string(sound.username)

    out.string(sound.images.med_size_waveform_url)
    out.string(sound.images.large_size_waveform_url)
    out.string(sound.images.med_size_spectral_url)
    out.optional_string(sound.images.large_size_spectral_url)

    out.string(sound.previews.low_quality_mp3_url)
    out.string(sound.previews.high_quality_mp3_url)
    out.string(sound.previews.low_quality_ogg_url)
    out.string(sound.previews.high_quality_ogg_url)

    out.pack(DOUBLE, sound.duration)
    out.string(sound.created.isoformat())
    return out.getvalue()


def decode_from_binary(data: bytes) -> Sound:
    """Deserialize a Sound written by encode_to_binary."""
    inp = _Reader(data)
    try:
        (sound_id,) = inp.unpack(INT64)
        url = inp.string()
        name = inp.string()
        (count,) = inp.unpack(UINT32)
        tags = [inp.string() for _ in range(count)]
        description = inp.string()
        geotag = GeoLocation(*inp.unpack(COORDS)) if inp.flag() else None
        username = inp.string()
        images = Image(
            med_size_waveform_url=inp.string(),
            large_size_waveform_url=inp.string(),
            med_size_spectral_url=inp.string(),
            large_size_spectral_url=inp.optional_string(),
        )
        previews = Preview(
            low_quality_mp3_url=inp.string(),
            high_quality_mp3_url=inp.string(),
            low_quality_ogg_url=inp.string(),
            high_quality_ogg_url=inp.string(),
        )
        (duration,) = inp.unpack(DOUBLE)
        created_text = inp.string()
        try:
            created = dt.datetime.fromisoformat(created_text)
        except ValueError as err:
            raise MalformedPayload(f"Bad timestamp: {created_text!r}") from err
        inp.done()
        return Sound(
            id=sound_id,
            url=url,
            name=name,
            tags=tags,
            description=description,
            geotag=geotag,
            username=username,
            images=images,
            previews=previews,
            duration=duration,
            created=created,
        )
    except DecodeError as err:
        LOG.error("Sound not decoded from %d bytes: %s", len(data), err)
        raise
