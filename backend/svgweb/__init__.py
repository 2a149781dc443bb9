"""SVG Web Elements — customisable SVG templates over HTTP."""

__version__ = "0.1.0"
