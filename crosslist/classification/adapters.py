"""
Classification service adapters.

Three transports reach the same classifier:

- AnthropicClassifier: anthropic SDK with the server's own (ambient) key.
- DirectHttpClassifier: raw Messages API call with a key the user supplies.
- BackendProxyClassifier: POST to our backend, which holds the key.

Each adapter only translates transport failures into ClassificationError
subclasses; whether a failure degrades or propagates is the batcher's call.
"""

from collections.abc import Sequence

import anthropic
import httpx
from loguru import logger

from crosslist.classification.parsing import coerce_results, parse_classification_response
from crosslist.classification.prompts import SYSTEM_PROMPT, build_prompt
from crosslist.config import ClassifierSettings
from crosslist.exceptions import (
    ClassificationParseError,
    ClassificationServiceError,
    InvalidCredentialError,
    MissingCredentialError,
)
from crosslist.models import ClassificationResult


class AnthropicClassifier:
    """Ambient-credential adapter over the anthropic SDK.

    The client is created lazily from settings, so a missing key surfaces as a
    MissingCredentialError from submit() rather than at construction.
    """

    def __init__(self, settings: ClassifierSettings, client: anthropic.Anthropic | None = None):
        self._settings = settings
        self._client = client

    def _get_client(self) -> anthropic.Anthropic:
        if self._client is None:
            if not self._settings.anthropic_api_key:
                raise MissingCredentialError("CLASSIFIER_ANTHROPIC_API_KEY is not configured")
            self._client = anthropic.Anthropic(
                api_key=self._settings.anthropic_api_key,
                timeout=self._settings.timeout,
            )
        return self._client

    def submit(self, names: Sequence[str]) -> list[ClassificationResult]:
        client = self._get_client()

        try:
            response = client.messages.create(
                model=self._settings.model,
                max_tokens=self._settings.max_tokens,
                temperature=self._settings.temperature,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": build_prompt(names)}],
            )
        except anthropic.AuthenticationError as e:
            raise InvalidCredentialError() from e
        except anthropic.APIStatusError as e:
            raise ClassificationServiceError(
                f"Anthropic API error: {e.status_code}", status_code=e.status_code
            ) from e
        except anthropic.APIError as e:
            raise ClassificationServiceError(f"Anthropic API error: {e}") from e

        if not response.content or not hasattr(response.content[0], "text"):
            raise ClassificationParseError("Empty classification response")

        return parse_classification_response(response.content[0].text)


class DirectHttpClassifier:
    """Explicit-credential adapter calling the Messages API over httpx."""

    def __init__(
        self,
        api_key: str,
        settings: ClassifierSettings,
        http_client: httpx.Client | None = None,
    ):
        if not api_key or not api_key.strip():
            raise MissingCredentialError("An API key is required")
        self._api_key = api_key.strip()
        self._settings = settings
        self._http_client = http_client

    def _post(self, payload: dict, headers: dict) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(self._settings.api_url, json=payload, headers=headers)
        with httpx.Client(timeout=self._settings.timeout) as client:
            return client.post(self._settings.api_url, json=payload, headers=headers)

    def submit(self, names: Sequence[str]) -> list[ClassificationResult]:
        payload = {
            "model": self._settings.model,
            "max_tokens": self._settings.max_tokens,
            "temperature": self._settings.temperature,
            "system": SYSTEM_PROMPT,
            "messages": [{"role": "user", "content": build_prompt(names)}],
        }
        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": self._settings.api_version,
            "content-type": "application/json",
        }

        try:
            response = self._post(payload, headers)
        except httpx.HTTPError as e:
            raise ClassificationServiceError(f"Classification request failed: {e}") from e

        if response.status_code == 401:
            raise InvalidCredentialError()
        if response.status_code >= 400:
            logger.error(f"Classification API error {response.status_code}: {response.text[:200]}")
            raise ClassificationServiceError(
                f"Classification API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ClassificationParseError(f"Classification API returned non-JSON body: {e}") from e
        if not isinstance(data, dict):
            raise ClassificationParseError("Classification API returned an unexpected body")

        text = "".join(
            block.get("text", "")
            for block in data.get("content") or []
            if isinstance(block, dict) and block.get("type") == "text"
        )
        return parse_classification_response(text)


class BackendProxyClassifier:
    """Adapter that delegates to the backend's /api/classify endpoint.

    The backend answers {"success": bool, "results": [...], "error": str}.
    """

    def __init__(
        self,
        settings: ClassifierSettings,
        http_client: httpx.Client | None = None,
        url: str | None = None,
    ):
        self._settings = settings
        self._http_client = http_client
        self.url = url or settings.backend_url

    def _post(self, payload: dict) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(self.url, json=payload)
        with httpx.Client(timeout=self._settings.timeout) as client:
            return client.post(self.url, json=payload)

    def submit(self, names: Sequence[str]) -> list[ClassificationResult]:
        try:
            response = self._post({"names": list(names)})
        except httpx.HTTPError as e:
            raise ClassificationServiceError(f"Backend request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code >= 400 or not data.get("success"):
            error = data.get("error") or f"Backend error: {response.status_code}"
            raise ClassificationServiceError(str(error), status_code=response.status_code)

        results = data.get("results")
        if not isinstance(results, list):
            raise ClassificationParseError("Backend response has no results array")
        return coerce_results(results)
