"""
Test cases for the filegate health endpoint
"""
from unittest.mock import MagicMock, patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.v1.filegate import router as filegate_router


def build_client():
    app = FastAPI()
    app.include_router(filegate_router, prefix="/api/v1/filegate")
    return TestClient(app)


class TestHealth:
    def test_healthy_with_default_storage(self):
        factory = MagicMock()
        factory.get_default_storage.return_value = object()

        with patch("apps.filegate.routes.health.get_resource_factory", return_value=factory):
            response = build_client().get("/api/v1/filegate/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["default_storage"] is True

    def test_unavailable_without_default_storage(self):
        factory = MagicMock()
        factory.get_default_storage.return_value = None

        with patch("apps.filegate.routes.health.get_resource_factory", return_value=factory):
            response = build_client().get("/api/v1/filegate/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unavailable"
        assert response.json()["default_storage"] is False
