"""FastAPI application entry point"""

from fastapi import FastAPI, Header, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import logging

from github_wrapped.config.settings import settings
from github_wrapped.orchestrator import WrappedOrchestrator, failure_status_code

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Annual GitHub activity statistics for wrapped slides",
    version=settings.APP_VERSION
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global orchestrator instance
orchestrator = WrappedOrchestrator()


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "endpoints": {
            "health": "/api/health",
            "wrapped": "GET /api/wrapped/{login}?year=2025",
        }
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint for serverless platforms"""
    return {
        "status": "healthy",
        "service": "github-wrapped",
        "version": settings.APP_VERSION
    }


@app.get("/api/wrapped/{login}")
async def get_wrapped(
    login: str,
    year: Optional[int] = Query(default=None, ge=2008, le=9999),
    x_github_token: Optional[str] = Header(default=None),
):
    """Fetch a user's year and return derived stats plus slide payloads"""
    logger.info(f"Wrapped requested for {login}")

    result = await orchestrator.run(login, token=x_github_token, year=year)
    if not result["success"]:
        raise HTTPException(status_code=failure_status_code(result), detail=result["error"])
    return result
