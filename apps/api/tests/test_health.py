import pytest


@pytest.mark.asyncio
async def test_health_endpoint(client) -> None:
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_head_probes(client) -> None:
    root = await client.head("/")
    health = await client.head("/api/health")

    assert root.status_code == 200
    assert health.status_code == 200


@pytest.mark.asyncio
async def test_stylesheet_is_served(client) -> None:
    response = await client.get("/css/styles.css")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")
    assert ".video-container" in response.text


@pytest.mark.asyncio
async def test_unknown_stylesheet_is_404(client) -> None:
    response = await client.get("/css/missing.css")

    assert response.status_code == 404
    assert "error" in response.json()
