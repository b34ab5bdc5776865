#!/usr/bin/python3

"""
Lookups into a parsed MPD tree.  Nothing here mutates the tree; callers create missing
structure themselves.

Lookups are namespace-agnostic, as manifests normally put everything under the default
'urn:mpeg:dash:schema:mpd:2011' namespace but some generators omit it.
"""

from lxml import etree

from .errors import StructureError

ALTERNATIVE_MPD_SCHEME = "urn:mpeg:dash:event:alternativeMPD:2022"


def _first(root: etree._Element, localname: str) -> etree._Element | None:
    return next(root.iter(f"{{*}}{localname}"), None)


def find_period(root: etree._Element) -> etree._Element:
    # only the first period is rewritten; multi-period manifests are not handled
    period = _first(root, "Period")
    if period is None:
        raise StructureError("Period element not found in the manifest")
    return period


def find_signaling_container(root: etree._Element) -> etree._Element | None:
    for event_stream in root.iter("{*}EventStream"):
        if event_stream.get("schemeIdUri") == ALTERNATIVE_MPD_SCHEME:
            return event_stream
    return None


def find_base_location(root: etree._Element) -> etree._Element | None:
    return _first(root, "BaseURL")


def document_root(root: etree._Element) -> etree._Element:
    return root.getroottree().getroot()


def child_tag(parent: etree._Element, localname: str) -> str:
    # qualify new elements with the namespace of their parent so no extra prefixes are emitted
    namespace = etree.QName(parent).namespace
    return etree.QName(namespace, localname).text if namespace else localname


def insert_first(parent: etree._Element, child: etree._Element) -> None:
    # reuse the indentation in front of the existing first child, if any
    if len(parent) and parent.text and not parent.text.strip():
        child.tail = parent.text
    parent.insert(0, child)
