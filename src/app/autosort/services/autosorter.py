import logging
from dataclasses import replace
from typing import List, Optional

from app.autosort.merger import merge_similar_albums
from app.autosort.scoring import find_best_match
from app.autosort.signature import AlbumSignature, compute_signature
from app.autosort.titles import is_title_generated, title_for_media, title_for_signature
from app.common.exceptions import NoDestinationAlbumError
from app.config import AUTOSORT_CONFIG, AutoSortConfig
from app.models.trip import DEFAULT_DATE, Album, MediaItem, Trip

logger = logging.getLogger(__name__)


def _media_sort_key(media: MediaItem):
    return (media.created_at or DEFAULT_DATE, media.path_url or "")


class AutoSorter:
    """
    Re-clusters a trip's media into "moments" by capture time and location.

    One greedy left-to-right pass over every media item of the trip, followed by a
    merge pass over the resulting clusters. The outcome depends on input order:
    earlier assignments are never revisited and ties go to the first album seen.
    """

    def __init__(self, config: AutoSortConfig = AUTOSORT_CONFIG):
        self.config = config

    def auto_sort(self, trip: Trip) -> Trip:
        albums = [
            Album(a.album_id, a.title, a.description, list(a.media))
            for a in trip.albums
        ]
        default_album = self._find_default_album(trip, albums)

        # Seed signatures, positionally aligned with `albums` for the whole run
        signatures: List[AlbumSignature] = [compute_signature(a) for a in albums]

        pool = [m for a in albums for m in a.media]
        for a in albums:
            a.media.clear()

        logger.info(f"Autosorting trip {trip.trip_id}: {len(pool)} media across {len(albums)} albums")

        created = 0
        for media in pool:
            if not media.has_time and not media.has_location:
                default_album.media.append(media)
                continue

            match_idx = find_best_match(media, signatures, self.config)
            if match_idx is not None:
                albums[match_idx].media.append(media)
                signatures[match_idx] = compute_signature(albums[match_idx])
            else:
                new_album = Album(album_id=None, title=title_for_media(media), media=[media])
                albums.append(new_album)
                signatures.append(compute_signature(new_album))
                created += 1
                logger.debug(f"Created cluster {new_album.title!r} for {media.path_url}")

        merged = merge_similar_albums(albums, self.config)
        final_albums = [
            self._finalize(a) for a in merged
            if a.media or a is default_album
        ]

        logger.info(
            f"Autosort of trip {trip.trip_id} finished: {created} clusters created, "
            f"{len(albums) - len(merged)} merged away, {len(final_albums)} albums kept"
        )
        return replace(trip, albums=final_albums)

    @staticmethod
    def _find_default_album(trip: Trip, albums: List[Album]) -> Album:
        if not albums:
            raise NoDestinationAlbumError(f"Trip {trip.trip_id} has no album to sort media into.")

        default: Optional[Album] = next((a for a in albums if a.album_id == trip.default_album), None)
        if default is None:
            logger.warning(
                f"Default album {trip.default_album} not found in trip {trip.trip_id}, "
                f"falling back to album {albums[0].album_id}"
            )
            default = albums[0]
        return default

    @staticmethod
    def _finalize(album: Album) -> Album:
        album.media.sort(key=_media_sort_key)
        if album.media and is_title_generated(album.title):
            album.title = title_for_signature(compute_signature(album))
        return album
