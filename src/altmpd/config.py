#!/usr/bin/python3

import msgspec

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3030

# seconds
DEFAULT_FETCH_TIMEOUT = 30.0

DEFAULT_STATIC_MANIFEST_URL = "https://dash.akamaized.net/akamai/bbb_30fps/bbb_30fps.mpd"
DEFAULT_LIVE_MANIFEST_URL = "https://demo.unified-streaming.com/k8s/live/scte35.isml/.mpd"


class ProxyConfig(msgspec.Struct, kw_only=True):
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    # upstream manifests; '/manifest.mpd?live=1' selects the live one
    static_manifest_url: str = DEFAULT_STATIC_MANIFEST_URL
    live_manifest_url: str = DEFAULT_LIVE_MANIFEST_URL

    # seconds; applies to connecting and to each read from the upstream server
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT

    def manifest_url(self, live: bool) -> str:
        return self.live_manifest_url if live else self.static_manifest_url
