"""
FastAPI main application for Hotel Browser.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from hotel_browser import __version__
from hotel_browser.config import get_app_settings
from hotel_browser.db import close_db

# Configure logging
logging.basicConfig(
    level=get_app_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # The pool is created lazily by the first request
    logger.info("Starting Hotel Browser API...")

    yield

    # Shutdown
    logger.info("Shutting down Hotel Browser API...")
    await close_db()


app = FastAPI(
    title="Hotel Browser API",
    description="Hotel search with name, city and price filters",
    version=__version__,
    lifespan=lifespan
)

# CORS middleware - allow all origins for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__
    }


# Import and include routers
from hotel_browser.routers import hotels, pages

app.include_router(hotels.router, prefix="/api", tags=["hotels"])
app.include_router(pages.router, tags=["pages"])
