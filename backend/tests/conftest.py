"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from svgweb.config import Settings
from svgweb.main import create_app


SIMPLE_SVG = '<svg width="809" height="370"><text id="t"><tspan>Hi</tspan></text></svg>'

LOGIN_SVG = '''<svg width="809" height="370" viewBox="0 0 809 370" fill="none" xmlns="http://www.w3.org/2000/svg">
<rect id="page-background" width="809" height="370" fill="#F8FAFC"/>
<text id="text-title" fill="#0F172A" font-size="18"><tspan x="279" y="101.5">Sign in</tspan></text>
<text id="text-url" fill="#64748B" font-size="12"><tspan x="279" y="125.3">https://example.com</tspan></text>
<text id="btn-label" fill="white" font-size="14">Continue</text>
<rect id="outline" x="10" y="10" stroke="#000" stroke-width="2"/>
</svg>'''

# Exported from a design tool that repeats the namespace on the root
DUPLICATE_NS_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50" '
    'xmlns="http://www.w3.org/2000/svg"><rect id="r" fill="#000"/></svg>'
)

NESTED_TEXT_SVG = '''<svg width="200" height="100">
  <text x="5" y="20" id="caption">
    <tspan x="5" dy="0">First line</tspan>
  </text>
  <text class="note" id="note">Plain <a href="#">link</a></text>
</svg>'''


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    (tmp_path / "login.svg").write_text(LOGIN_SVG, encoding="utf-8")
    (tmp_path / "simple.svg").write_text(SIMPLE_SVG, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not an svg", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client(svg_dir: Path) -> TestClient:
    app = create_app(Settings(svg_dir=str(svg_dir)))
    return TestClient(app)
