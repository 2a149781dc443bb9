"""GET /ui/{name} — customised SVG rendering, GET /list — available templates."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from svgweb.api.decoder import decode_edit_request
from svgweb.dependencies import get_library
from svgweb.svg.library import SvgLibrary

router = APIRouter()
logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"


class SvgRequestLogger(logging.LoggerAdapter):
    """Prefixes every engine log line with the SVG being rendered."""

    def process(self, msg, kwargs):
        return f"[{self.extra['svg']}] {msg}", kwargs


@router.get("/ui/{name}")
def render_svg(name: str, request: Request, library: SvgLibrary = Depends(get_library)) -> Response:
    logger.info("SVG request: %s, User-Agent: %s", name, request.headers.get("user-agent", ""))

    params = decode_edit_request(request.query_params.multi_items())
    svg = library.render(name, params, SvgRequestLogger(logger, {"svg": name}))
    body = svg.encode("utf-8")

    logger.info("Successfully processed SVG: %s, size: %d bytes", name, len(body))
    return Response(
        content=body,
        media_type=SVG_MEDIA_TYPE,
        headers={
            "Cache-Control": "no-cache",
            "X-Content-Type-Options": "nosniff",
        },
    )


@router.get("/list", response_class=PlainTextResponse)
def list_svgs(request: Request, library: SvgLibrary = Depends(get_library)) -> PlainTextResponse:
    client = request.client.host if request.client else "unknown"
    logger.info("List SVGs request from: %s", client)

    names = library.list_available()
    logger.info("Found %d SVG files", len(names))
    return PlainTextResponse("".join(f"{n}\n" for n in names))
