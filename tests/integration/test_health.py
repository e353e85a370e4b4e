"""Integration tests for the FastAPI shell."""

from httpx import AsyncClient


class TestHealthEndpoint:
    async def test_health_returns_ok(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "gemini-chat"}

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/health")

        assert response.status_code == 405

    async def test_cors_headers_present(self, async_client: AsyncClient) -> None:
        """Response includes CORS headers for cross-origin requests."""
        response = await async_client.get(
            "/health", headers={"Origin": "http://localhost:3000"}
        )

        assert "access-control-allow-origin" in response.headers
