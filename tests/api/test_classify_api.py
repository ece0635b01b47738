# SPDX-License-Identifier: MIT
"""Tests for the classification endpoint."""

import pytest

from api.dependencies import get_classification_batcher
from api.main import app
from conftest import FakeClassificationService
from crosslist.classification import ClassificationBatcher
from crosslist.config import get_settings
from crosslist.exceptions import ClassificationServiceError


@pytest.fixture
def no_server_key(monkeypatch):
    monkeypatch.setenv("CLASSIFIER_ANTHROPIC_API_KEY", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestClassifyEndpoint:
    """Test POST /api/classify."""

    def test_classifies_names(self, test_client, fake_batcher):
        app.dependency_overrides[get_classification_batcher] = lambda: fake_batcher
        response = test_client.post("/api/classify", json={"names": ["Ana", "Bruno", "Ana"]})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["results"] == [
            {"name": "Ana", "gender": "female", "confidence": 90},
            {"name": "Bruno", "gender": "male", "confidence": 90},
        ]

    def test_empty_names(self, test_client, fake_service, fake_batcher):
        app.dependency_overrides[get_classification_batcher] = lambda: fake_batcher
        response = test_client.post("/api/classify", json={"names": []})

        assert response.status_code == 200
        assert response.json()["results"] == []
        assert fake_service.calls == []

    def test_requires_names(self, test_client, fake_batcher):
        app.dependency_overrides[get_classification_batcher] = lambda: fake_batcher
        response = test_client.post("/api/classify", json={})
        assert response.status_code == 422

    def test_service_failure_degrades(self, test_client):
        batcher = ClassificationBatcher(FakeClassificationService(error=ClassificationServiceError("down")))
        app.dependency_overrides[get_classification_batcher] = lambda: batcher
        response = test_client.post("/api/classify", json={"names": ["Ana"]})

        assert response.status_code == 200
        assert response.json()["results"] == [{"name": "Ana", "gender": "unknown", "confidence": 0}]

    def test_missing_server_key(self, test_client, no_server_key):
        response = test_client.post("/api/classify", json={"names": ["Ana"]})

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert "CLASSIFIER_ANTHROPIC_API_KEY" in data["error"]
