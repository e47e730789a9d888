import logging
import traceback
from typing import Optional

from app.autosort.services.autosorter import AutoSorter
from app.common.exceptions import AutosortError, InvalidDataError
from app.models.trip import Trip
from app.utils.performance import AUTOSORT_MEDIA_TOTAL, PerformanceMonitor

logger = logging.getLogger(__name__)


class TripAutosortService:
    def __init__(self, autosorter: Optional[AutoSorter] = None):
        self.autosorter = autosorter or AutoSorter()

    def autosort_trip(self, trip: Trip) -> Trip:
        """
        Validates the trip and re-clusters its media.

        Raises:
            InvalidDataError: the trip has no albums, or one of its albums is empty.
            AutosortError: anything else went wrong during the run.
        """
        self.validate_trip(trip)

        media_count = sum(len(a.media) for a in trip.albums)
        logger.info(f"🏁 [Trip {trip.trip_id}] Autosort started. Albums: {len(trip.albums)}, media: {media_count}")

        try:
            with PerformanceMonitor() as monitor:
                sorted_trip = self.autosorter.auto_sort(trip)
        except InvalidDataError:
            raise
        except Exception as e:
            logger.error(f"💥 [Trip {trip.trip_id}] Autosort failed: {e}")
            logger.debug(traceback.format_exc())
            raise AutosortError(f"Failed to autosort trip {trip.trip_id}.") from e

        AUTOSORT_MEDIA_TOTAL.inc(media_count)
        logger.info(
            f"✅ [Trip {trip.trip_id}] Autosort completed. "
            f"{monitor.report('autosort', count=media_count)}, albums: {len(sorted_trip.albums)}"
        )
        return sorted_trip

    @staticmethod
    def validate_trip(trip: Trip) -> None:
        if not trip.albums:
            raise InvalidDataError("Trip must contain at least one album.")

        if any(not a.media for a in trip.albums):
            raise InvalidDataError("Albums must not be empty.")
