#!/usr/bin/python3

from typing import Iterable

from lxml import etree

from ..models.descriptor import AlternativeContentDescriptor
from ._tree import ALTERNATIVE_MPD_SCHEME, child_tag, find_signaling_container, insert_first

# event times are given in milliseconds
SIGNALING_TIMESCALE = 1000


def ensure_signaling_container(period: etree._Element, root: etree._Element) -> etree._Element:
    """
    Returns the existing alternative MPD event stream, or creates one as the first child of the
    given period.
    """
    event_stream = find_signaling_container(root)
    if event_stream is not None:
        return event_stream

    event_stream = etree.Element(child_tag(period, "EventStream"))
    event_stream.set("schemeIdUri", ALTERNATIVE_MPD_SCHEME)
    event_stream.set("timescale", str(SIGNALING_TIMESCALE))
    insert_first(period, event_stream)
    return event_stream


def inject_events(
    event_stream: etree._Element, descriptors: Iterable[AlternativeContentDescriptor]
) -> int:
    # appends after any existing events, in the order the descriptors were given
    added = 0
    for descriptor in descriptors:
        event = etree.SubElement(event_stream, child_tag(event_stream, "Event"))
        event.set("presentationTime", str(descriptor.presentation_time))
        event.set("duration", str(descriptor.duration))

        alternative = etree.SubElement(event, child_tag(event, "AlternativeMPD"))
        alternative.set("uri", descriptor.uri)
        alternative.set(
            "earliestResolutionTimeOffset", str(descriptor.earliest_resolution_time_offset)
        )
        alternative.set("mode", descriptor.mode)
        alternative.set("returnOffset", str(descriptor.return_offset))
        added += 1
    return added
