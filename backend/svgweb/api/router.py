"""Master router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgweb.api import health, pages, svg

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(svg.router)
api_router.include_router(pages.router)
