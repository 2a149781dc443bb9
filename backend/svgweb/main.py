"""FastAPI app factory."""

from __future__ import annotations

import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from svgweb import __version__
from svgweb.config import Settings, settings
from svgweb.errors import DocumentNotFound, DocumentReadError, InvalidRequestEncoding
from svgweb.svg.library import SvgLibrary

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgweb_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings

    app = FastAPI(
        title="SVG Web Elements",
        description="Customisable SVG templates — text, colors and size via query parameters",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.state.library = SvgLibrary(Path(app_settings.svg_dir))

    _register_error_handlers(app)

    from svgweb.api.router import api_router

    app.include_router(api_router)

    logger.info("SVG files will be served from: %s", app.state.library.base_path)
    return app


def _register_error_handlers(app: FastAPI) -> None:
    """Map service errors onto plain-text HTTP responses."""

    @app.exception_handler(DocumentNotFound)
    async def _not_found(request: Request, exc: DocumentNotFound) -> PlainTextResponse:
        logger.warning("Error processing SVG %s: %s", exc.name, exc)
        return PlainTextResponse(str(exc), status_code=404)

    @app.exception_handler(DocumentReadError)
    async def _read_error(request: Request, exc: DocumentReadError) -> PlainTextResponse:
        logger.error("Error processing SVG %s: %s", exc.name, exc)
        return PlainTextResponse(f"Error processing SVG: {exc}", status_code=500)

    @app.exception_handler(InvalidRequestEncoding)
    async def _bad_request(request: Request, exc: InvalidRequestEncoding) -> PlainTextResponse:
        logger.warning("Error parsing parameters for %s: %s", request.url.path, exc)
        return PlainTextResponse(f"Invalid parameters: {exc}", status_code=400)


def main() -> None:
    """Console entry point — serve the app with uvicorn."""
    logger.info("Starting server on port %s...", settings.port)
    uvicorn.run(app, host=settings.svgweb_host, port=settings.port)


app = create_app()
