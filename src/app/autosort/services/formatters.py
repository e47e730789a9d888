from app.autosort.schema import AlbumDto, GeoLocationDto, MediaDto, TripDto
from app.models.trip import DEFAULT_DATE, UNKNOWN_LOCATION, Album, GeoLocation, MediaItem, Trip


def media_from_schema(dto: MediaDto) -> MediaItem:
    # Missing values get the same placeholders the media table stores
    geo = GeoLocation(dto.geo_location.latitude, dto.geo_location.longitude) if dto.geo_location else UNKNOWN_LOCATION
    return MediaItem(
        media_id=dto.media_id,
        path_url=dto.path_url or "",
        uploader=dto.uploader,
        file_type=dto.file_type,
        file_format=dto.file_format,
        file_size=dto.file_size,
        geo_location=geo,
        created_at=dto.created_at or DEFAULT_DATE,
        uploaded_at=dto.uploaded_at,
    )


def media_to_schema(media: MediaItem) -> MediaDto:
    geo = media.geo_location
    return MediaDto(
        media_id=media.media_id,
        path_url=media.path_url,
        uploader=media.uploader,
        file_type=media.file_type,
        file_format=media.file_format,
        file_size=media.file_size,
        geo_location=GeoLocationDto(latitude=geo.latitude, longitude=geo.longitude) if geo else None,
        created_at=media.created_at,
        uploaded_at=media.uploaded_at,
    )


def trip_from_schema(dto: TripDto) -> Trip:
    return Trip(
        trip_id=dto.trip_id,
        title=dto.title,
        description=dto.description,
        owner_id=dto.owner_id,
        visibility=dto.visibility,
        cover_photo_url=dto.cover_photo_url,
        collaborators=list(dto.collaborators),
        viewers=list(dto.viewers),
        default_album=dto.default_album,
        albums=[
            Album(a.album_id, a.title, a.description, [media_from_schema(m) for m in a.media])
            for a in dto.albums
        ],
        created_at=dto.created_at,
    )


def trip_to_schema(trip: Trip) -> TripDto:
    return TripDto(
        trip_id=trip.trip_id,
        title=trip.title,
        description=trip.description,
        owner_id=trip.owner_id,
        visibility=trip.visibility,
        cover_photo_url=trip.cover_photo_url,
        collaborators=list(trip.collaborators),
        viewers=list(trip.viewers),
        default_album=trip.default_album,
        albums=[
            AlbumDto(
                album_id=a.album_id,
                title=a.title,
                description=a.description,
                media=[media_to_schema(m) for m in a.media],
            )
            for a in trip.albums
        ],
        created_at=trip.created_at,
    )
