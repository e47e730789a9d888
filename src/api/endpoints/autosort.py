import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from core.dependencies import TripLockRegistry, get_trip_locks
from app.autosort.schema import TripDto
from app.autosort.services.formatters import trip_from_schema, trip_to_schema
from app.autosort.services.trip_autosort import TripAutosortService

logger = logging.getLogger(__name__)
router = APIRouter()


def get_autosort_service() -> TripAutosortService:
    return TripAutosortService()


@router.post("/autosort", response_model=TripDto, response_model_by_alias=True)
async def autosort_trip(
    req: TripDto,
    service: TripAutosortService = Depends(get_autosort_service),
    locks: TripLockRegistry = Depends(get_trip_locks),
):
    """
    Autosort trip media by creation time and geolocation.
    """
    logger.info(f"📥 [Trip {req.trip_id}] Autosort requested. Albums: {len(req.albums)}")

    trip = trip_from_schema(req)
    async with locks.hold(req.trip_id):
        sorted_trip = await run_in_threadpool(service.autosort_trip, trip)

    return trip_to_schema(sorted_trip)
