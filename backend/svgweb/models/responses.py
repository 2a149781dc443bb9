"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    svg_count: int = 0


class SvgListResponse(BaseModel):
    svgs: list[str] = Field(default_factory=list)
