from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.models.trip import Album, GeoLocation


@dataclass(frozen=True)
class AlbumSignature:
    """Temporal/spatial fingerprint of an album's current media."""
    median_time: Optional[datetime] = None
    centroid_location: Optional[GeoLocation] = None

    @property
    def is_complete(self) -> bool:
        return self.median_time is not None and self.centroid_location is not None


def compute_signature(album: Album) -> AlbumSignature:
    """
    Derives the signature from the album's media as they are right now.

    median_time is the upper-middle timestamp (index n // 2 of the sorted list),
    not an average of the two middle values. centroid_location is the plain
    arithmetic mean of coordinates, which is good enough at a few hundred meters.
    """
    times = sorted(m.created_at for m in album.media if m.has_time)
    median_time = times[len(times) // 2] if times else None

    locations = [m.geo_location for m in album.media if m.has_location]
    centroid = None
    if locations:
        centroid = GeoLocation(
            latitude=sum(loc.latitude for loc in locations) / len(locations),
            longitude=sum(loc.longitude for loc in locations) / len(locations),
        )

    return AlbumSignature(median_time=median_time, centroid_location=centroid)
