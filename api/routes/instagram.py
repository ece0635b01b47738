"""
Instagram API Routes.

Scrape a follower or following list and return the male-classified
profiles as a CSV export.
"""

import asyncio
import logging

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from api.dependencies import (
    get_classification_batcher,
    get_instagram_http_client,
    get_instagram_settings,
)
from crosslist.classification import ClassificationBatcher
from crosslist.config import InstagramSettings
from crosslist.connectors import InstagramListType, InstagramScraper
from crosslist.exceptions import InstagramError
from crosslist.export import filter_by_category, format_profiles_csv, merge_classifications
from crosslist.models import Category

logger = logging.getLogger(__name__)

router = APIRouter()

SESSION_HINT = (
    "Make sure your session_id is valid. To get it: 1) Open Instagram in a browser, "
    "2) Open DevTools (F12), 3) Go to the Application/Storage tab, 4) Find the \"sessionid\" cookie"
)


class ScrapeRequest(BaseModel):
    """Request to scrape one account's list."""
    username: str = Field(..., min_length=1)
    type: InstagramListType
    session_id: str = Field(..., min_length=1)


class ScrapeResponse(BaseModel):
    success: bool
    csv: str
    count: int


@router.post("/scrape", response_model=ScrapeResponse)
async def scrape(
    request: ScrapeRequest,
    batcher: ClassificationBatcher = Depends(get_classification_batcher),
    settings: InstagramSettings = Depends(get_instagram_settings),
    http_client: httpx.AsyncClient = Depends(get_instagram_http_client),
):
    """Fetch the list, classify the names in one batch, keep the male profiles."""
    logger.info(f"Processing request for {request.username} - {request.type.value}")

    try:
        scraper = InstagramScraper(request.session_id, settings=settings, http_client=http_client)
        profiles = await scraper.fetch_profiles(request.username, request.type)
    except InstagramError as e:
        logger.error(f"Error in instagram scrape: {e}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e), "hint": SESSION_HINT},
        )

    named = [profile for profile in profiles if profile.full_name.strip()]
    logger.info(f"Filtered to {len(named)} users with names (from {len(profiles)} total)")

    records = [profile.to_record() for profile in named]
    results = await asyncio.to_thread(batcher.classify, [record.display_name for record in records])
    male_usernames = {
        record.username
        for record in filter_by_category(merge_classifications(records, results), Category.MALE)
    }
    male_profiles = [profile for profile in named if profile.username in male_usernames]

    logger.info(f"Final result: {len(male_profiles)} male users")
    return ScrapeResponse(success=True, csv=format_profiles_csv(male_profiles), count=len(male_profiles))
