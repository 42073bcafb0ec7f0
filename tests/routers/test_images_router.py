from fastapi import FastAPI
from fastapi.testclient import TestClient

from techtrail import dependencies as deps
from techtrail.routers import images
from techtrail.services.image_service import get_content_type_from_filename
from techtrail.settings import Settings


def build_client(content_dir, assets_dir):
    app = FastAPI()
    app.dependency_overrides[deps.get_settings] = lambda: Settings(
        CONTENT_DIR=str(content_dir), ASSETS_DIR=str(assets_dir)
    )
    app.include_router(images.router)
    return TestClient(app)


def test_get_post_image_serves_bytes_and_headers(tmp_path):
    data = b"DATA"
    (tmp_path / "blog" / "hello").mkdir(parents=True)
    (tmp_path / "blog" / "hello" / "foo.png").write_bytes(data)
    client = build_client(tmp_path / "blog", tmp_path / "assets")

    res = client.get("/images/hello/foo.png")

    assert res.status_code == 200
    assert res.content == data
    assert res.headers["content-type"] == get_content_type_from_filename("foo.png")
    assert res.headers["Content-Length"] == str(len(data))
    assert res.headers["Accept-Ranges"] == "bytes"


def test_get_asset_serves_hero(tmp_path):
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "welcome.png").write_bytes(b"PNG")
    client = build_client(tmp_path / "blog", tmp_path / "assets")

    res = client.get("/assets/welcome.png")

    assert res.status_code == 200
    assert res.content == b"PNG"
    assert res.headers["content-type"] == "image/png"


def test_get_image_returns_404_when_missing(tmp_path):
    client = build_client(tmp_path, tmp_path)

    res = client.get("/images/missing.png")

    assert res.status_code == 404
    assert res.json()["detail"] == "Image not found"
