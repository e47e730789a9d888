import math
from datetime import datetime
from typing import List, Optional

from app.autosort.signature import AlbumSignature
from app.config import AUTOSORT_CONFIG, AutoSortConfig
from app.models.trip import GeoLocation, MediaItem

EARTH_RADIUS_M = 6371000.0

SCORE_NONE = 0
SCORE_TIME = 2
SCORE_GEO = 3
SCORE_TIME_AND_GEO = 5


def haversine_m(a: GeoLocation, b: GeoLocation) -> float:
    """Great-circle distance in meters."""
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude)) * math.cos(math.radians(b.latitude)) * math.sin(d_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(h))


def minutes_between(a: datetime, b: datetime) -> int:
    """Absolute difference in whole minutes, partial minutes truncated."""
    return int(abs((b - a).total_seconds()) // 60)


def score(media: MediaItem, signature: AlbumSignature, config: AutoSortConfig = AUTOSORT_CONFIG) -> int:
    """
    Scores how well a media item fits a cluster signature.

    5 when time and location are both comparable and both within the match window,
    0 when both are comparable but either one is out of range. With a single
    comparable axis, a location hit (3) outranks a time hit (2).
    """
    has_time = media.has_time and signature.median_time is not None
    has_geo = media.has_location and signature.centroid_location is not None

    time_ok = has_time and minutes_between(media.created_at, signature.median_time) <= config.match_time_window_minutes
    geo_ok = has_geo and haversine_m(media.geo_location, signature.centroid_location) <= config.match_geo_radius_meters

    if has_time and has_geo:
        return SCORE_TIME_AND_GEO if time_ok and geo_ok else SCORE_NONE
    if time_ok:
        return SCORE_TIME
    if geo_ok:
        return SCORE_GEO
    return SCORE_NONE


def find_best_match(
    media: MediaItem,
    signatures: List[AlbumSignature],
    config: AutoSortConfig = AUTOSORT_CONFIG,
) -> Optional[int]:
    """
    Returns the position of the best scoring signature, or None if nothing scores above 0.
    Ties go to the signature seen first.
    """
    best_idx = None
    best_score = SCORE_NONE
    for idx, sig in enumerate(signatures):
        s = score(media, sig, config)
        if s > best_score:
            best_idx, best_score = idx, s
    return best_idx
