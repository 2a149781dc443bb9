"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from svgweb.svg.library import SvgLibrary


def get_library(request: Request) -> SvgLibrary:
    return request.app.state.library
