class TripServiceError(Exception):
    """Base class for errors surfaced by the trip service."""


class InvalidDataError(TripServiceError):
    """Request data is malformed (HTTP 400)."""


class NoDestinationAlbumError(InvalidDataError):
    """The trip has no album that could receive media."""


class AutosortError(TripServiceError):
    """An autosort run failed unexpectedly (HTTP 422)."""
