#!/usr/bin/python3


def base_location(source_url: str) -> str:
    """
    Returns the directory portion of a manifest URL, including the trailing separator.
    URLs without any separator are returned unchanged.
    """
    head, sep, _ = source_url.rpartition("/")
    if not sep:
        return source_url
    return head + sep
