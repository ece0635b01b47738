"""
Classification API Routes.

Backend side of the proxied classifier: clients without a key of their own
send names here and the server classifies them with its configured key.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_classification_batcher
from crosslist.classification import ClassificationBatcher

logger = logging.getLogger(__name__)

router = APIRouter()


class ClassifyRequest(BaseModel):
    """Names to classify."""
    names: list[str]


class ClassificationItem(BaseModel):
    name: str
    gender: str
    confidence: int


class ClassifyResponse(BaseModel):
    """Envelope read by BackendProxyClassifier."""
    success: bool
    results: list[ClassificationItem] = []
    error: str | None = None


@router.post("", response_model=ClassifyResponse)
async def classify(
    request: ClassifyRequest,
    batcher: ClassificationBatcher = Depends(get_classification_batcher),
):
    """Classify a batch of names by apparent gender."""
    logger.info(f"Received request to classify {len(request.names)} names")

    results = await asyncio.to_thread(batcher.classify, request.names)

    logger.info(f"Classification finished: {len(results)} results")
    return ClassifyResponse(
        success=True,
        results=[ClassificationItem(**result.to_dict()) for result in results],
    )
