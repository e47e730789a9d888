from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

# Persisted in place of a missing capture time
DEFAULT_DATE = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class GeoLocation:
    latitude: float = 0.0
    longitude: float = 0.0

    def has_unknown_coordinates(self) -> bool:
        # NOTE: (0, 0) is a real place in the Gulf of Guinea, but storage uses it as "unknown"
        return self.latitude == 0.0 and self.longitude == 0.0


UNKNOWN_LOCATION = GeoLocation()


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive timestamps are taken to be UTC so they compare with aware ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class MediaItem:
    path_url: str
    uploader: Optional[str] = None
    media_id: Optional[int] = None
    file_type: Optional[str] = None  # image | video
    file_format: Optional[str] = None  # jpg, png, mp4 ...
    file_size: Optional[int] = None
    geo_location: Optional[GeoLocation] = None
    created_at: Optional[datetime] = None
    uploaded_at: Optional[datetime] = None

    def __post_init__(self):
        self.created_at = as_utc(self.created_at)
        self.uploaded_at = as_utc(self.uploaded_at)

    @property
    def has_time(self) -> bool:
        return self.created_at is not None and self.created_at != DEFAULT_DATE

    @property
    def has_location(self) -> bool:
        return self.geo_location is not None and not self.geo_location.has_unknown_coordinates()


@dataclass
class Album:
    album_id: Optional[int]
    title: Optional[str] = None
    description: Optional[str] = None
    media: List[MediaItem] = field(default_factory=list)


@dataclass
class Trip:
    trip_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[str] = None
    visibility: Optional[str] = None
    cover_photo_url: Optional[str] = None
    collaborators: List[str] = field(default_factory=list)
    viewers: List[str] = field(default_factory=list)
    default_album: Optional[int] = None
    albums: List[Album] = field(default_factory=list)
    created_at: Optional[datetime] = None
