"""Shared FastAPI dependencies."""

from collections.abc import AsyncIterator

import httpx

from crosslist.classification import AnthropicClassifier, ClassificationBatcher
from crosslist.config import InstagramSettings, get_settings
from crosslist.exceptions import MissingCredentialError
from crosslist.models import FailurePolicy


def get_classification_batcher() -> ClassificationBatcher:
    """Server-side batcher using the backend's own key.

    A missing key is a configuration error and fails the request; any other
    classification failure degrades the affected names to unknown.
    """
    settings = get_settings().classifier
    if not settings.anthropic_api_key:
        raise MissingCredentialError("CLASSIFIER_ANTHROPIC_API_KEY is not configured")
    return ClassificationBatcher(AnthropicClassifier(settings), on_failure=FailurePolicy.DEGRADE)


def get_instagram_settings() -> InstagramSettings:
    return get_settings().instagram


async def get_instagram_http_client() -> AsyncIterator[httpx.AsyncClient]:
    settings = get_settings().instagram
    async with httpx.AsyncClient(timeout=settings.timeout, follow_redirects=True) as client:
        yield client
