from typing import Optional

from app.autosort.signature import AlbumSignature
from app.models.trip import MediaItem

UNSORTED_TITLE = "Unsorted"
UNSORTED_CLUSTER_TITLE = "Unsorted Cluster"
LOCATION_PREFIX = "Location"


def is_title_generated(title: Optional[str]) -> bool:
    """True for titles the autosorter made up, as opposed to ones a user typed."""
    return title is None or title == UNSORTED_TITLE or title.startswith(LOCATION_PREFIX)


def title_for_media(media: MediaItem) -> str:
    """Title of a fresh single-item cluster."""
    title = ""
    if media.has_location:
        title += f"{LOCATION_PREFIX} ({media.geo_location.latitude}, {media.geo_location.longitude}) "
    if media.has_time:
        title += media.created_at.date().isoformat()
    return title if title.strip() else UNSORTED_TITLE


def title_for_signature(signature: AlbumSignature) -> str:
    """Title of a finished cluster, e.g. 'Location (41.8902, 12.4922) 2024-06-05'."""
    title = ""
    if signature.centroid_location is not None:
        lat = f"{signature.centroid_location.latitude:.4f}"
        lon = f"{signature.centroid_location.longitude:.4f}"
        title += f"{LOCATION_PREFIX} ({lat}, {lon}) "
    if signature.median_time is not None:
        title += signature.median_time.date().isoformat()
    return title if title.strip() else UNSORTED_CLUSTER_TITLE
