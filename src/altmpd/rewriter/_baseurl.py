#!/usr/bin/python3

from lxml import etree

from ..util.urls import base_location
from ._tree import child_tag, document_root, find_base_location, insert_first


def normalize_base_location(root: etree._Element, source_url: str) -> str:
    """
    Points the manifest's BaseURL at the directory the manifest was fetched from, so relative
    segment references keep resolving against the upstream server once the manifest is served
    from elsewhere.  Returns the value written.
    """
    location = base_location(source_url)

    base_url = find_base_location(root)
    if base_url is None:
        mpd = document_root(root)
        base_url = etree.Element(child_tag(mpd, "BaseURL"))
        insert_first(mpd, base_url)
    base_url.text = location
    return location
