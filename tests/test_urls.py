#!/usr/bin/python3

import pytest
from altmpd.util.urls import base_location


@pytest.mark.parametrize(
    "input, expected",
    [
        ("https://host/path/to/manifest.mpd", "https://host/path/to/"),
        (
            "https://demo.unified-streaming.com/k8s/live/scte35.isml/.mpd",
            "https://demo.unified-streaming.com/k8s/live/scte35.isml/",
        ),
        ("https://host/path/", "https://host/path/"),
        ("manifest.mpd", "manifest.mpd"),
    ],
)
def test_base_location(input: str, expected: str):
    assert base_location(input) == expected
    # applying it again to its own result must not change anything
    assert base_location(base_location(input)) == expected
