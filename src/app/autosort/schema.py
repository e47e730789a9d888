from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeoLocationDto(CamelModel):
    latitude: float = 0.0
    longitude: float = 0.0


class MediaDto(CamelModel):
    media_id: Optional[int] = None
    path_url: Optional[str] = Field(None, description="Reference into file storage")
    uploader: Optional[str] = None
    file_type: Optional[str] = Field(None, description="image | video")
    file_format: Optional[str] = Field(None, description="jpg, png, mp4 ...")
    file_size: Optional[int] = None
    geo_location: Optional[GeoLocationDto] = None
    created_at: Optional[datetime] = Field(None, description="Capture time")
    uploaded_at: Optional[datetime] = None


class AlbumDto(CamelModel):
    album_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    media: List[MediaDto] = Field(default_factory=list)


class TripDto(CamelModel):
    trip_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[str] = None
    visibility: Optional[str] = None
    cover_photo_url: Optional[str] = None
    collaborators: List[str] = Field(default_factory=list)
    viewers: List[str] = Field(default_factory=list)
    default_album: Optional[int] = Field(None, description="Album receiving media without time and location")
    albums: List[AlbumDto] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class ErrorResponse(BaseModel):
    message: str
    status: int
    timestamp: datetime
    path: Optional[str] = None
