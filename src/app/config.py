from dataclasses import dataclass


@dataclass(frozen=True)
class AutoSortConfig:
    # Greedy assignment of a single media item to a cluster
    match_time_window_minutes: int = 90
    match_geo_radius_meters: float = 250.0

    # Post-hoc merging of two whole clusters
    merge_time_window_minutes: int = 180
    merge_geo_radius_meters: float = 500.0


AUTOSORT_CONFIG = AutoSortConfig()
