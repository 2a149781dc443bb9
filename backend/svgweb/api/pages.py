"""GET / and GET /debug — HTML pages for browsing the templates."""

from __future__ import annotations

import logging
from html import escape

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from svgweb.dependencies import get_library
from svgweb.errors import InvalidRequestEncoding
from svgweb.svg.inspector import color_elements, text_elements
from svgweb.svg.library import SvgLibrary
from svgweb.svg.substitution import extract_geometry

router = APIRouter()
logger = logging.getLogger(__name__)

_STYLE = """
    body { font-family: system-ui, -apple-system, sans-serif; padding: 2rem; line-height: 1.5; }
    code { background: #f1f1f1; padding: 0.2rem 0.4rem; border-radius: 3px; }
    pre { background: #f1f1f1; padding: 1rem; overflow: auto; }
    .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 2rem; }
    .element, .example { margin-bottom: 1rem; border: 1px solid #ddd; padding: 1rem; }
    .swatch { display: inline-block; width: 20px; height: 20px; vertical-align: middle; }
"""

_INDEX_BODY = """
<h1>SVG Web Elements Service</h1>
<p>This service provides customizable SVG illustrations via URL parameters.</p>

<h2>Available SVGs</h2>
<ul>{items}</ul>
<p>Plain-text listing: <a href="/list">/list</a></p>

<h2>Usage</h2>
<code>&lt;img src="/ui/NAME.svg?width=400&amp;text.text-title=Login" /&gt;</code>

<h2>Parameters</h2>
<ul>
  <li><code>width</code> - SVG width (height scales proportionally if not given)</li>
  <li><code>height</code> - SVG height (width scales proportionally if not given)</li>
  <li><code>text.{{element-id}}</code> - replace the text of the element with that id</li>
  <li><code>color.{{element-id}}</code> - replace the fill of the element with that id
      (use <code>%23</code> instead of <code>#</code> for hex colors)</li>
  <li><code>url</code> - URL shown in the <code>text-url</code> element</li>
</ul>
"""


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        f"<title>{escape(title)}</title>\n<style>{_STYLE}</style>\n"
        f"</head>\n<body>\n{body}\n</body>\n</html>\n"
    )


@router.get("/", response_class=HTMLResponse)
def index(library: SvgLibrary = Depends(get_library)) -> HTMLResponse:
    items = "".join(
        f'<li><a href="/ui/{escape(n)}">{escape(n)}</a> '
        f'(<a href="/debug?svg={escape(n)}">inspect</a>)</li>'
        for n in library.list_available()
    )
    return HTMLResponse(_page("SVG Web Elements", _INDEX_BODY.format(items=items or "<li>none</li>")))


@router.get("/debug", response_class=HTMLResponse)
def debug(svg: str = Query(default=""), library: SvgLibrary = Depends(get_library)) -> HTMLResponse:
    if not svg:
        raise InvalidRequestEncoding("Missing svg parameter")

    source = library.load(svg)
    name = escape(svg)
    geometry = extract_geometry(source)

    text_html = "".join(
        '<div class="element">'
        f"<strong>ID:</strong> {escape(el.id)}<br>"
        f'<strong>Text:</strong> "{escape(el.text)}"<br>'
        f"<strong>Usage:</strong> <code>text.{escape(el.id)}=New+Text</code>"
        "</div>"
        for el in text_elements(source)
    )

    color_parts = []
    for el in color_elements(source):
        if el.fill is not None:
            current = (
                f'<span class="swatch" style="background:{escape(el.fill)}"></span> {escape(el.fill)}'
            )
        else:
            current = "no fill attribute (color parameter has no effect)"
        color_parts.append(
            '<div class="element">'
            f"<strong>ID:</strong> {escape(el.id)} &lt;{escape(el.tag)}&gt;<br>"
            f"<strong>Current Color:</strong> {current}<br>"
            f"<strong>Usage:</strong> <code>color.{escape(el.id)}=%23ff0000</code>"
            "</div>"
        )

    body = f"""
<h1>SVG Debug for {name}</h1>
<p><a href="/">&larr; Back to home</a></p>
<p>
  <strong>Scaling Examples:</strong>
  <a href="/ui/{name}?width=400">width=400</a> |
  <a href="/ui/{name}?height=200">height=200</a> |
  <a href="/ui/{name}?width=500&amp;height=250">width=500&amp;height=250</a>
</p>
<div class="grid">
  <div>
    <h2>SVG Preview</h2>
    <div class="element">{source}</div>
  </div>
  <div>
    <h2>Text Elements</h2>
    {text_html or "No text elements found"}
    <h2>Color Elements</h2>
    {"".join(color_parts) or "No color elements found"}
    <h2>Scaling</h2>
    <div class="element">
      <strong>Original Size:</strong> {escape(geometry.width)} x {escape(geometry.height)}<br>
      <strong>ViewBox:</strong> {escape(geometry.view_box)}
    </div>
  </div>
</div>
<h2>Raw SVG Source</h2>
<pre>{escape(source, quote=False)}</pre>
"""
    logger.debug("Debug page for %s", svg)
    return HTMLResponse(_page(f"SVG Debug - {svg}", body))
