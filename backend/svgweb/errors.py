"""Error types raised around the substitution engine.

The engine itself never raises; these come from document loading and query decoding.
"""

from __future__ import annotations


class SvgWebError(Exception):
    """Base class for service errors."""


class DocumentNotFound(SvgWebError):
    def __init__(self, name: str) -> None:
        super().__init__(f"SVG file {name} not found")
        self.name = name


class DocumentReadError(SvgWebError):
    def __init__(self, name: str, cause: Exception | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"failed to read SVG file {name}{detail}")
        self.name = name
        self.cause = cause


class InvalidRequestEncoding(SvgWebError):
    """Malformed query parameters."""
