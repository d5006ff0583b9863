from __future__ import annotations

import re

from app.main import app
from app.pages import HOME_HTML


def test_root_returns_200(client):
    r = client.get("/")
    assert r.status_code == 200


def test_root_content_type_is_plain_text_html(client):
    r = client.get("/")
    assert r.headers["content-type"] == "text/html"


def test_root_body_has_heading(client):
    r = client.get("/")
    assert "<h1>How AI is Changing the World</h1>" in r.text


def test_root_body_has_non_empty_paragraph(client):
    r = client.get("/")
    m = re.search(r"<p>(.*?)</p>", r.text, re.S)
    assert m is not None
    assert m.group(1).strip()


def test_root_body_is_the_constant_page(client):
    r = client.get("/")
    assert r.text == HOME_HTML
    assert int(r.headers["content-length"]) == len(HOME_HTML.encode("utf-8"))


def test_repeated_requests_are_byte_identical(client):
    bodies = {client.get("/").content for _ in range(5)}
    assert len(bodies) == 1


def test_request_input_is_ignored(client):
    plain = client.get("/").content
    noisy = client.get("/?q=robots", headers={"Accept": "application/json", "Cookie": "a=b"}).content
    assert noisy == plain


def test_unknown_path_is_not_found(client):
    r = client.get("/missing")
    assert r.status_code == 404
    assert "How AI is Changing the World" not in r.text


def test_docs_routes_are_not_served(client):
    for path in ("/docs", "/redoc", "/openapi.json"):
        assert client.get(path).status_code == 404


def test_other_methods_on_root_are_rejected(client):
    r = client.post("/")
    assert r.status_code == 405


def test_module_level_app_serves_root():
    from fastapi.testclient import TestClient

    with TestClient(app) as c:
        assert c.get("/").text == HOME_HTML
