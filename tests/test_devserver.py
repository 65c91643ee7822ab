# File: tests/test_devserver.py

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from chronoboard.devserver import StaticFileRouterMiddleware, resolve_static


@pytest.fixture
def web_root(tmp_path):
    root = tmp_path / "web"
    (root / "css").mkdir(parents=True)
    (root / "css" / "site.css").write_text("body {}")
    (root / "my file.txt").write_text("spaced")
    (tmp_path / "secret.txt").write_text("outside")
    return root


def test_existing_file_is_resolved(web_root):
    assert resolve_static(web_root, "/css/site.css") == (web_root / "css" / "site.css").resolve()


def test_query_string_is_ignored(web_root):
    assert resolve_static(web_root, "/css/site.css?v=3") is not None


def test_path_is_url_decoded(web_root):
    assert resolve_static(web_root, "/my%20file.txt") == (web_root / "my file.txt").resolve()


@pytest.mark.parametrize(
    "uri",
    ["/", "", "/css", "/css/", "/missing.js", "/site/index", "/foo%00bar", "/" + "a" * 300],
)
def test_front_controller_cases(web_root, uri):
    assert resolve_static(web_root, uri) is None


@pytest.mark.parametrize("uri", ["/../secret.txt", "/%2e%2e/secret.txt", "/css/../../secret.txt"])
def test_paths_outside_web_root_are_refused(web_root, uri):
    assert resolve_static(web_root, uri) is None


def test_missing_web_root(tmp_path):
    assert resolve_static(tmp_path / "nope", "/index.html") is None


def _app(web_root):
    app = FastAPI()
    app.add_middleware(StaticFileRouterMiddleware, web_root=web_root)

    @app.get("/{path:path}")
    def front_controller(path: str):
        return {"front_controller": path}

    @app.post("/{path:path}")
    def front_controller_post(path: str):
        return {"posted": path}

    return app


def test_middleware_serves_files_then_falls_through(web_root):
    client = TestClient(_app(web_root))

    asset = client.get("/css/site.css")
    assert asset.status_code == 200
    assert asset.text == "body {}"
    assert asset.headers["content-type"].startswith("text/css")

    routed = client.get("/site/about")
    assert routed.json() == {"front_controller": "site/about"}

    root = client.get("/")
    assert root.json() == {"front_controller": ""}


def test_middleware_ignores_post(web_root):
    client = TestClient(_app(web_root))
    assert client.post("/css/site.css").json() == {"posted": "css/site.css"}


def test_app_serves_bundled_web_root(client):
    resp = client.get("/robots.txt")
    assert resp.status_code == 200
    assert "User-agent" in resp.text


def test_directories_go_to_the_app(web_root):
    # only regular files are served; a directory URL is an app route
    client = TestClient(_app(web_root))
    assert client.get("/css").json() == {"front_controller": "css"}


def test_nul_byte_falls_through_to_app(client):
    resp = client.get("/foo%00bar")
    assert resp.status_code == 404
