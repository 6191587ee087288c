"""Unit tests for RequestLoggingMiddleware"""

import logging
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.middleware import RequestLoggingMiddleware


@pytest.fixture
def logged_app():
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/api/ping")
    async def ping():
        return {"pong": True}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


@pytest.mark.asyncio
class TestRequestLoggingMiddleware:
    async def test_logs_method_path_and_status(self, logged_app, caplog):
        caplog.set_level(logging.INFO, logger="src.api.middleware")

        async with AsyncClient(transport=ASGITransport(app=logged_app), base_url="http://test") as client:
            response = await client.get("/api/ping")

        assert response.status_code == 200
        assert any("GET /api/ping -> 200" in record.getMessage() for record in caplog.records)

    async def test_health_checks_are_not_logged(self, logged_app, caplog):
        caplog.set_level(logging.INFO, logger="src.api.middleware")

        async with AsyncClient(transport=ASGITransport(app=logged_app), base_url="http://test") as client:
            await client.get("/health")

        assert not [record for record in caplog.records if record.name == "src.api.middleware"]
