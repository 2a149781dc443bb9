"""Health check + meta endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from svgweb import __version__
from svgweb.dependencies import get_library
from svgweb.errors import DocumentReadError
from svgweb.models.responses import HealthResponse, SvgListResponse
from svgweb.svg.library import SvgLibrary

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health(library: SvgLibrary = Depends(get_library)) -> HealthResponse:
    try:
        count = len(library.list_available())
    except DocumentReadError as e:
        logger.warning("Health check cannot read SVG directory: %s", e)
        return HealthResponse(status="degraded", version=__version__)

    return HealthResponse(status="ok", version=__version__, svg_count=count)


@router.get("/svgs", response_model=SvgListResponse)
def svgs(library: SvgLibrary = Depends(get_library)) -> SvgListResponse:
    return SvgListResponse(svgs=library.list_available())
