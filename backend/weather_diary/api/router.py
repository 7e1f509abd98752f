"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from weather_diary.api.routes import diary, weather

api_router = APIRouter()

# Include all route modules
api_router.include_router(diary.router)
api_router.include_router(weather.router)
