"""Loads SVG documents from the configured directory and renders them."""

from __future__ import annotations

import logging
from pathlib import Path

from svgweb.errors import DocumentNotFound, DocumentReadError
from svgweb.models.requests import EditRequest
from svgweb.svg.substitution import Logger, transform

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"


class SvgLibrary:
    """A directory of SVG templates."""

    def __init__(self, base_path: str | Path) -> None:
        self.base_path = Path(base_path)

    def path_for(self, name: str) -> Path:
        # Only the final component is used so names cannot escape base_path
        return self.base_path / Path(name).name

    def load(self, name: str) -> str:
        path = self.path_for(name)
        if not Path(name).name or not path.is_file():
            raise DocumentNotFound(name)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(name, e) from e

    def render(self, name: str, request: EditRequest, log: Logger | None = None) -> str:
        """Load ``name`` and apply the edit request to it."""
        return transform(self.load(name), request, log)

    def list_available(self) -> list[str]:
        return list_available(self.base_path)


def list_available(directory: str | Path) -> list[str]:
    """Names of the ``*.svg`` files directly inside ``directory``, sorted."""
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise DocumentReadError(str(directory), e) from e

    names = sorted(p.name for p in entries if p.is_file() and p.name.endswith(SVG_SUFFIX))
    logger.debug("Found %d SVG files in %s", len(names), directory)
    return names
