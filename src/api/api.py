from api.endpoints import autosort
from fastapi import APIRouter

api_router = APIRouter()
api_router.include_router(autosort.router, prefix="/trips", tags=["Trip Autosort"])
