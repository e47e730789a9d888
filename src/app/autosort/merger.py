import logging
from typing import List

from app.autosort.scoring import haversine_m, minutes_between
from app.autosort.signature import AlbumSignature, compute_signature
from app.autosort.titles import is_title_generated
from app.config import AUTOSORT_CONFIG, AutoSortConfig
from app.models.trip import Album

logger = logging.getLogger(__name__)


def should_merge(a: AlbumSignature, b: AlbumSignature, config: AutoSortConfig = AUTOSORT_CONFIG) -> bool:
    """Both clusters need a median time and a centroid, and both must be within the merge limits."""
    if not (a.is_complete and b.is_complete):
        return False

    time_diff = minutes_between(a.median_time, b.median_time)
    space_diff = haversine_m(a.centroid_location, b.centroid_location)
    return time_diff <= config.merge_time_window_minutes and space_diff <= config.merge_geo_radius_meters


def resolve_metadata(target: Album, candidate: Album) -> None:
    """
    Decides which id/title/description survive when candidate is folded into target.

    A user-authored album wins over a generated one. Two user-authored albums keep
    the target's identity and join their descriptions.
    """
    target_generated = is_title_generated(target.title)
    candidate_generated = is_title_generated(candidate.title)

    if target_generated and not candidate_generated:
        target.album_id = candidate.album_id
        target.title = candidate.title
        target.description = candidate.description
    elif not target_generated and not candidate_generated:
        if target.description != candidate.description:
            joined = " | ".join(d for d in (target.description, candidate.description) if d is not None)
            target.description = joined if joined.strip() else None


def merge_similar_albums(albums: List[Album], config: AutoSortConfig = AUTOSORT_CONFIG) -> List[Album]:
    """
    Folds clusters whose signatures are close under the looser merge limits.

    The target index only advances once no remaining candidate merges with it, so a
    target that grew can pick up clusters it did not match before. Signatures are
    recomputed on every comparison since targets change as they absorb candidates.
    """
    result = list(albums)
    if len(result) < 2:
        return result

    target_idx = 0
    while target_idx < len(result):
        target = result[target_idx]
        candidate_idx = target_idx + 1

        while candidate_idx < len(result):
            candidate = result[candidate_idx]

            if should_merge(compute_signature(target), compute_signature(candidate), config):
                logger.debug(
                    f"Merging album {candidate.album_id!r} ({candidate.title!r}) "
                    f"into {target.album_id!r} ({target.title!r})"
                )
                target.media.extend(candidate.media)
                resolve_metadata(target, candidate)
                del result[candidate_idx]
            else:
                candidate_idx += 1

        target_idx += 1

    return result
