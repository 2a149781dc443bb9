"""SVG substitution engine and template library."""

from svgweb.svg.library import SvgLibrary, list_available
from svgweb.svg.substitution import (
    Geometry,
    ResolvedDimensions,
    TextStrategy,
    extract_geometry,
    transform,
)

__all__ = [
    "SvgLibrary",
    "list_available",
    "Geometry",
    "ResolvedDimensions",
    "TextStrategy",
    "extract_geometry",
    "transform",
]
