"""
FastAPI Backend for Crosslist.

Holds the classifier credential so browser clients never see it, and runs
the Instagram scraper server-side.
"""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import classify, instagram
from crosslist.config import get_settings
from crosslist.exceptions import CrosslistError

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Crosslist API",
    description="Follower list intersection and name classification",
    version="1.0.0",
)

# CORS - allow frontend to connect (configured via API_CORS_ORIGINS env var)
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)

app.include_router(classify.router, prefix="/api/classify", tags=["classify"])
app.include_router(instagram.router, prefix="/api/instagram", tags=["instagram"])


@app.exception_handler(CrosslistError)
async def crosslist_error_handler(request: Request, exc: CrosslistError):
    logger.error(f"{request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "version": "1.0.0", "service": "Crosslist API"}
