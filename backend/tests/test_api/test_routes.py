"""Tests for the HTTP endpoints."""

from __future__ import annotations

from svgweb import __version__


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__
    assert data["svg_count"] == 2


def test_api_svgs(client):
    response = client.get("/api/svgs")
    assert response.status_code == 200
    assert response.json() == {"svgs": ["login.svg", "simple.svg"]}


def test_list(client):
    response = client.get("/list")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "login.svg\nsimple.svg\n"


def test_render_unmodified(client):
    response = client.get("/ui/simple.svg")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.headers["cache-control"] == "no-cache"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.text == '<svg width="809" height="370"><text id="t"><tspan>Hi</tspan></text></svg>'


def test_render_with_parameters(client):
    response = client.get(
        "/ui/login.svg",
        params={
            "width": "400",
            "text.text-title": "Login",
            "color.page-background": "#f0f9ff",
            "url": "example.com/?a=1&b=<2>",
        },
    )
    assert response.status_code == 200
    body = response.text
    assert 'width="400" height="183"' in body
    assert ">Login</tspan>" in body
    assert 'fill="#f0f9ff"' in body
    assert ">example.com/?a=1&amp;b=&lt;2&gt;</tspan>" in body
    assert 'preserveAspectRatio="xMidYMid meet"' in body


def test_render_missing_svg(client):
    response = client.get("/ui/missing.svg")
    assert response.status_code == 404
    assert "missing.svg" in response.text


def test_render_invalid_parameter(client):
    response = client.get("/ui/login.svg?text.=oops")
    assert response.status_code == 400
    assert response.text.startswith("Invalid parameters")


def test_render_rejects_color_breaking_attribute(client):
    response = client.get("/ui/login.svg", params={"color.page-background": '#f00" onload="x'})
    assert response.status_code == 400
    assert "onload" not in response.text


def test_index_lists_svgs(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert '/ui/login.svg' in response.text


def test_debug_page(client):
    response = client.get("/debug", params={"svg": "login.svg"})
    assert response.status_code == 200
    html = response.text
    assert "text.text-title=New+Text" in html
    assert "color.page-background=%23ff0000" in html
    assert "Sign in" in html
    assert "809 x 370" in html
    assert "&lt;svg width=" in html


def test_debug_requires_svg(client):
    response = client.get("/debug")
    assert response.status_code == 400


def test_debug_missing_svg(client):
    response = client.get("/debug?svg=missing.svg")
    assert response.status_code == 404
