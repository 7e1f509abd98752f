"""
FastAPI entrypoint for the Weather Diary backend application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from weather_diary.core.config import settings
from weather_diary.core.events import lifespan
from weather_diary.api.router import api_router

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

app = FastAPI(
    title="Weather Diary API",
    description="Daily diary entries annotated with the day's weather",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Weather Diary API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
