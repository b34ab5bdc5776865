#!/usr/bin/python3

"""
Manifest rewrite engine.

A rewrite proceeds through fetching, parsing, locating, injecting, normalizing and
serializing.  Each call owns the tree it parses; nothing is shared across rewrites, and the
tree is only serialized once every other step has succeeded.
"""

from typing import Iterable

import httpx
import msgspec
from lxml import etree

from ..config import DEFAULT_FETCH_TIMEOUT
from ..models.descriptor import AlternativeContentDescriptor, descriptors_or_default
from ._baseurl import normalize_base_location
from ._events import ensure_signaling_container, inject_events
from ._fetch import fetch_manifest
from ._tree import ALTERNATIVE_MPD_SCHEME, find_period
from .errors import NetworkError, ParseError, RewriteError, RewriteStage, StructureError

__all__ = [
    "ALTERNATIVE_MPD_SCHEME",
    "DASH_CONTENT_TYPE",
    "NetworkError",
    "ParseError",
    "RewriteError",
    "RewriteResult",
    "RewriteStage",
    "StructureError",
    "parse_manifest",
    "rewrite_document",
    "rewrite_manifest",
    "serialize_manifest",
]

DASH_CONTENT_TYPE = "application/dash+xml"


class RewriteResult(msgspec.Struct, kw_only=True):
    text: str
    events_added: int
    base_location: str
    content_type: str = DASH_CONTENT_TYPE


def parse_manifest(data: bytes | str) -> etree._Element:
    # lxml refuses str input carrying an encoding declaration, so always hand it bytes
    if isinstance(data, str):
        data = data.encode("utf8")
    if not data.strip():
        raise ParseError("Manifest is empty")
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise ParseError(f"Manifest is not well-formed XML: {exc}") from exc


def serialize_manifest(root: etree._Element) -> str:
    return etree.tostring(root.getroottree(), xml_declaration=True, encoding="UTF-8").decode(
        "utf8"
    )


def rewrite_document(
    data: bytes | str,
    source_url: str,
    descriptors: Iterable[AlternativeContentDescriptor],
) -> RewriteResult:
    """
    Rewrites an already-fetched manifest.  If no descriptors are given, the built-in default
    pair is injected instead.
    """
    descriptors = descriptors_or_default(descriptors)

    root = parse_manifest(data)
    period = find_period(root)

    event_stream = ensure_signaling_container(period, root)
    events_added = inject_events(event_stream, descriptors)

    location = normalize_base_location(root, source_url)

    return RewriteResult(
        text=serialize_manifest(root),
        events_added=events_added,
        base_location=location,
    )


async def rewrite_manifest(
    source_url: str,
    descriptors: Iterable[AlternativeContentDescriptor],
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RewriteResult:
    """
    Fetches the manifest at source_url and rewrites it.
    Raises a RewriteError subclass if any step fails.
    """
    data = await fetch_manifest(source_url, timeout=timeout, transport=transport)
    return rewrite_document(data, source_url, descriptors)
