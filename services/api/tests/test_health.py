"""Tests for health, landing page and static assets."""

import pytest
from httpx import AsyncClient

from users_api.routes import pages


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health endpoint returns ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_ignores_backend_failures(client: AsyncClient, fake_db, fake_cache):
    """Health stays green even when both stores are failing."""
    fake_db.error = ConnectionError("database unreachable")
    fake_cache.get_error = ConnectionError("redis unreachable")

    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert fake_db.queries == []
    assert fake_cache.gets == []


@pytest.mark.asyncio
async def test_index_serves_template(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text == pages.INDEX_TEMPLATE.read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_index_reads_template_on_every_request(
    client: AsyncClient, tmp_path, monkeypatch: pytest.MonkeyPatch
):
    template = tmp_path / "index.html"
    template.write_text("<h1>first</h1>", encoding="utf-8")
    monkeypatch.setattr(pages, "INDEX_TEMPLATE", template)

    assert (await client.get("/")).text == "<h1>first</h1>"
    template.write_text("<h1>second</h1>", encoding="utf-8")
    assert (await client.get("/")).text == "<h1>second</h1>"


@pytest.mark.asyncio
async def test_index_missing_template_returns_500(
    client: AsyncClient, tmp_path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setattr(pages, "INDEX_TEMPLATE", tmp_path / "missing.html")

    response = await client.get("/")
    assert response.status_code == 500
    assert response.text == "Internal Server Error"

    # The server keeps serving after a failed request
    assert (await client.get("/health")).status_code == 200


@pytest.mark.asyncio
async def test_static_file_served(client: AsyncClient):
    response = await client.get("/styles.css")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")
    assert "body" in response.text


@pytest.mark.asyncio
async def test_unknown_static_path_is_404(client: AsyncClient):
    response = await client.get("/nope.txt")
    assert response.status_code == 404
