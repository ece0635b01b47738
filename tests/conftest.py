# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for crosslist tests."""

import os
from collections.abc import Sequence
from typing import Generator

import pytest

# Set test environment variables before importing app
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("DISABLE_LOGGING", "1")

from crosslist.classification import ClassificationBatcher
from crosslist.models import Category, ClassificationResult, FailurePolicy


class FakeClassificationService:
    """In-memory ClassificationService answering from a name -> gender map."""

    def __init__(self, answers: dict[str, str] | None = None, error: Exception | None = None):
        self.answers = answers or {}
        self.error = error
        self.calls: list[list[str]] = []

    def submit(self, names: Sequence[str]) -> list[ClassificationResult]:
        self.calls.append(list(names))
        if self.error is not None:
            raise self.error
        return [
            ClassificationResult(name=name, category=Category.coerce(self.answers[name]), confidence=90)
            for name in names
            if name in self.answers
        ]


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio for async tests."""
    return "asyncio"


@pytest.fixture
def fake_service() -> FakeClassificationService:
    return FakeClassificationService(
        answers={"Ana": "female", "Bruno": "male", "Carlos": "male", "Alex": "unknown"}
    )


@pytest.fixture
def fake_batcher(fake_service) -> ClassificationBatcher:
    return ClassificationBatcher(fake_service, on_failure=FailurePolicy.DEGRADE)


@pytest.fixture
def test_client() -> Generator:
    """Create a test client for the FastAPI application."""
    from fastapi.testclient import TestClient
    from api.main import app

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_export() -> str:
    """Follower export as the browser extension writes it."""
    return (
        "id,username,full_name\n"
        "1,ana.silva,Ana 🌸 Silva\n"
        "2,bruno_m,Bruno Mendes\n"
        "3,carlos99,🔥Carlos🔥\n"
        "4,nameless,🎉🎉\n"
    )


@pytest.fixture
def other_export() -> str:
    return (
        "id,username,full_name\n"
        "10,carlos99,Carlos\n"
        "11,bruno_m,Bruno\n"
        "12,nameless,\n"
        "13,stranger,Zed\n"
    )
