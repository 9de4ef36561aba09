"""Main FastAPI application with hexagonal architecture."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from stylemap.config import data_dir_from_env

from . import __version__
from .api.rest.routes import router as style_map_router

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    yield
    # Shutdown


app = FastAPI(
    title="Style Map API",
    description="Champion style maps: similarity graph, layout and clusters of a player's pool",
    version=__version__,
    lifespan=lifespan,
)

# CORS configuration for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",  # Vite dev server
        "http://localhost:3000",  # Alternative dev port
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    data_dir_configured: bool


@app.get("/", tags=["meta"])
async def root():
    """API root with information and available endpoints."""
    return {
        "name": "Style Map API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "health": "GET /health",
            "build": "POST /api/style-map",
            "player": "GET /api/players/{player_id}/style-map",
            "sample": "GET /api/style-map/sample",
        },
    }


@app.get("/health", response_model=HealthResponse, tags=["meta"])
async def health_check():
    """Check API health and configuration status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        data_dir_configured=bool(os.environ.get("STYLEMAP_DATA_DIR")) or data_dir_from_env().exists(),
    )


# Include REST routes
app.include_router(style_map_router)
