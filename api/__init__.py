"""
Crosslist API.

FastAPI backend holding the classifier credential for the proxied adapter,
plus the Instagram scrape endpoint.

Run with:
    uvicorn api.main:app --reload --port 8000
"""

from api.main import app

__version__ = "1.0.0"

__all__ = ["app"]
