"""
Main application initialization and configuration.
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from musicplayer.api.routes import (
    artists,
    auth,
    health,
    playlists,
    search,
    songs,
    users,
)
from musicplayer.core.exceptions import MusicPlayerError
from musicplayer.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

# Comma separated list of allowed frontend origins
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# Initialize FastAPI application
app = FastAPI(title="Music Player API", version=API_VERSION)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(artists.router)
app.include_router(songs.router)
app.include_router(users.router)
app.include_router(auth.router)
app.include_router(playlists.router)
app.include_router(search.router)
app.include_router(health.router)


@app.exception_handler(MusicPlayerError)
async def music_player_error_handler(request: Request, exc: MusicPlayerError):
    """Render service errors as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors (unknown path, wrong method) in the same envelope."""
    message = "Endpoint not found" if exc.status_code == 404 else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies, path or query parameters are client errors."""
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc)},
    )


@app.get("/")
def read_root():
    """Return the service banner with the main endpoints."""
    return {
        "message": "Music Player Backend API",
        "version": API_VERSION,
        "endpoints": {
            "artists": "/api/artists",
            "songs": "/api/songs",
            "playlists": "/api/playlists/{user_id}",
            "search": "/api/search?q=query",
            "health": "/api/health",
        },
    }


@app.get("/api")
@app.get("/api/")
def read_api_root():
    """Return a message with the available API resources."""
    return {
        "message": "Music Player API - Available resources: /api/artists, "
        "/api/songs, /api/users, /api/auth, /api/playlists, /api/search, /api/health"
    }
