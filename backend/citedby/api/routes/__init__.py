"""
API Routes
"""

from fastapi import APIRouter

from .visibility import router as visibility_router
from .nap import router as nap_router

api_router = APIRouter()

api_router.include_router(visibility_router, prefix="/visibility", tags=["Visibility Scoring"])
api_router.include_router(nap_router, prefix="/nap", tags=["NAP Consistency"])
