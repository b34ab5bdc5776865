#!/usr/bin/python3


import argparse
import typing

import colorama
import msgspec
import uvicorn

from .config import (
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_HOST,
    DEFAULT_LIVE_MANIFEST_URL,
    DEFAULT_PORT,
    DEFAULT_STATIC_MANIFEST_URL,
    ProxyConfig,
)
from .output import CLIMessageHandlers
from .server import create_app

colorama.just_fix_windows_console()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Serves upstream DASH manifests with alternative MPD events injected",
    )

    parser.add_argument("--host", type=str, default=DEFAULT_HOST, help="Address to listen on")
    parser.add_argument("-p", "--port", type=int, default=DEFAULT_PORT, help="Port to listen on")
    parser.add_argument(
        "--static-url",
        type=str,
        dest="static_manifest_url",
        default=DEFAULT_STATIC_MANIFEST_URL,
        help="Upstream manifest served by /manifest.mpd and /static_manifest.mpd",
    )
    parser.add_argument(
        "--live-url",
        type=str,
        dest="live_manifest_url",
        default=DEFAULT_LIVE_MANIFEST_URL,
        help="Upstream manifest served by /manifest.mpd?live=1 and /live_manifest.mpd",
    )
    parser.add_argument(
        "--fetch-timeout",
        type=float,
        default=DEFAULT_FETCH_TIMEOUT,
        help="Seconds to wait on the upstream server before failing the request",
    )
    parser.add_argument(
        "--progress-style",
        type=str,
        choices=[
            handler.tag
            for handler in msgspec.inspect.multi_type_info(typing.get_args(CLIMessageHandlers))
            if isinstance(handler, msgspec.inspect.StructType)
        ],
        default="console",
        help="Style to use for displaying status messages",
    )

    args = parser.parse_args()

    handler = msgspec.convert({"type": args.progress_style}, CLIMessageHandlers)
    config = msgspec.convert(vars(args), type=ProxyConfig)

    app = create_app(config, [handler])
    uvicorn.run(app, host=config.host, port=config.port, log_level="warning")
