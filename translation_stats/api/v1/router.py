"""API v1 router aggregation."""

from fastapi import APIRouter

from translation_stats.api.v1 import settings

api_router = APIRouter()

api_router.include_router(settings.router, tags=["Settings"])
