#!/usr/bin/python3

"""
HTTP front end for the rewrite engine.

Routes:
  /manifest.mpd          static upstream, or the live upstream with 'live=1'
  /static_manifest.mpd   static upstream
  /live_manifest.mpd     live upstream

Alternatives are passed as repeated 'alt' query parameters in the form
'uri|presentationTime|duration|earliestResolutionTimeOffset|mode|returnOffset', e.g.

  ?alt=https://example.com/alt1.mpd|10000|10000|2000|insert|0
  &alt=https://example.com/alt2.mpd|30000|13000|5000|replace|500
"""

import contextlib

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import ProxyConfig
from .models import messages as msgtypes
from .models.descriptor import descriptors_or_default, is_known_mode, parse_descriptors
from .output import BaseMessageHandler, dispatch
from .rewriter import RewriteError, rewrite_manifest

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, x-requested-with",
}


def create_app(
    config: ProxyConfig,
    handlers: list[BaseMessageHandler] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Builds the proxy application.  'transport' replaces the network transport used for upstream
    fetches; this is only expected to be set when testing.
    """
    status_handlers: list[BaseMessageHandler] = handlers if handlers is not None else []

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        await dispatch(
            status_handlers,
            msgtypes.ServerStartedMessage(
                host=config.host,
                port=config.port,
                static_manifest_url=config.static_manifest_url,
                live_manifest_url=config.live_manifest_url,
            ),
        )
        yield

    app = FastAPI(
        title="altmpd",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def cors(request: Request, call_next) -> Response:
        # every preflight is answered here, regardless of path
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_error(request: Request, exc: StarletteHTTPException) -> Response:
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    async def rewrite_response(request: Request, source_url: str) -> Response:
        requested = parse_descriptors(request.query_params.getlist("alt"))
        descriptors = descriptors_or_default(requested)

        await dispatch(
            status_handlers,
            msgtypes.RewriteRequestedMessage(
                source_url=source_url,
                num_descriptors=len(descriptors),
                default_descriptors=not requested,
            ),
        )
        for descriptor in descriptors:
            if not is_known_mode(descriptor.mode):
                await dispatch(
                    status_handlers,
                    msgtypes.UnrecognizedModeMessage(mode=descriptor.mode, uri=descriptor.uri),
                )

        try:
            result = await rewrite_manifest(
                source_url, descriptors, timeout=config.fetch_timeout, transport=transport
            )
        except RewriteError as exc:
            await dispatch(
                status_handlers,
                msgtypes.RewriteFailedMessage(
                    source_url=source_url,
                    stage=str(exc.stage),
                    error_type=type(exc).__name__,
                    reason=exc.reason,
                    cause=repr(exc.__cause__) if exc.__cause__ else None,
                ),
            )
            return PlainTextResponse("Internal Server Error", status_code=500)

        await dispatch(
            status_handlers,
            msgtypes.RewriteFinishedMessage(
                source_url=source_url,
                events_added=result.events_added,
                base_location=result.base_location,
            ),
        )
        return Response(content=result.text, media_type=result.content_type)

    @app.api_route("/manifest.mpd", methods=["GET", "POST"])
    async def manifest(request: Request) -> Response:
        live = request.query_params.get("live") == "1"
        return await rewrite_response(request, config.manifest_url(live))

    @app.api_route("/static_manifest.mpd", methods=["GET", "POST"])
    async def static_manifest(request: Request) -> Response:
        return await rewrite_response(request, config.static_manifest_url)

    @app.api_route("/live_manifest.mpd", methods=["GET", "POST"])
    async def live_manifest(request: Request) -> Response:
        return await rewrite_response(request, config.live_manifest_url)

    return app
