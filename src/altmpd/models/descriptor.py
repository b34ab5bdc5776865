#!/usr/bin/python3

import re
from typing import Iterable

import msgspec

# modes understood by players implementing alternative MPD events
KNOWN_MODES = ("insert", "replace", "start")
DEFAULT_MODE = "insert"

DEFAULT_DURATION = 10000

# optional whitespace, sign and the leading run of digits; anything after is ignored
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# characters that cannot appear in an XML 1.0 attribute value
_XML_INVALID = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class AlternativeContentDescriptor(msgspec.Struct, frozen=True, kw_only=True):
    """
    A single alternative content instruction, rendered into the manifest as an Event carrying
    an AlternativeMPD element.  Time values are expressed in the event stream's timescale.
    """

    uri: str
    presentation_time: int = 0
    duration: int = DEFAULT_DURATION
    earliest_resolution_time_offset: int = 0
    mode: str = DEFAULT_MODE

    # relative offset back into the original timeline; unlike the others this may be negative
    return_offset: int = 0


_OFFLINE_ASSET_URI = (
    "https://comcast-dash-6-assets.s3.us-east-2.amazonaws.com"
    "/TestAssets/MediaOfflineErrorAsset/stream.mpd"
)

# substituted when a request does not provide any descriptors
DEFAULT_DESCRIPTORS = (
    AlternativeContentDescriptor(
        uri=_OFFLINE_ASSET_URI,
        presentation_time=10000,
        duration=10000,
        earliest_resolution_time_offset=2000,
        mode="insert",
        return_offset=0,
    ),
    AlternativeContentDescriptor(
        uri=_OFFLINE_ASSET_URI,
        presentation_time=30000,
        duration=13000,
        earliest_resolution_time_offset=5000,
        mode="replace",
        return_offset=0,
    ),
)


def _parse_int(value: str | None, default: int, allow_negative: bool = False) -> int:
    if not value:
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    try:
        result = int(match.group(1))
    except ValueError:
        # digit runs past the interpreter's int conversion limit
        return default
    if result < 0 and not allow_negative:
        return default
    return result


def parse_descriptor(raw: str) -> AlternativeContentDescriptor:
    """
    Parses a descriptor in the positional form
    'uri|presentationTime|duration|earliestResolutionTimeOffset|mode|returnOffset'.

    Trailing fields may be omitted.  Missing or malformed numeric fields fall back to their
    defaults instead of raising; the mode is passed through as-is, minus any characters that
    cannot be written into XML.
    """
    uri, *fields = _XML_INVALID.sub("", raw).split("|")
    fields += [""] * (5 - len(fields))
    presentation_time, duration, earliest_offset, mode, return_offset, *_ = fields

    return AlternativeContentDescriptor(
        uri=uri,
        presentation_time=_parse_int(presentation_time, 0),
        duration=_parse_int(duration, DEFAULT_DURATION),
        earliest_resolution_time_offset=_parse_int(earliest_offset, 0),
        mode=mode or DEFAULT_MODE,
        return_offset=_parse_int(return_offset, 0, allow_negative=True),
    )


def parse_descriptors(values: Iterable[str]) -> list[AlternativeContentDescriptor]:
    return [parse_descriptor(value) for value in values]


def descriptors_or_default(
    descriptors: Iterable[AlternativeContentDescriptor],
) -> list[AlternativeContentDescriptor]:
    return list(descriptors) or list(DEFAULT_DESCRIPTORS)


def is_known_mode(mode: str) -> bool:
    return mode in KNOWN_MODES
