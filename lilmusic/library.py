"""Local library state: which tracks the user has marked as favourite."""

from __future__ import annotations


class LibraryRepository:
    """In-memory store of favourite track ids, independent of any remote service."""

    def __init__(self) -> None:
        self._favorite_track_ids: set[str] = set()

    def is_favorite(self, track_id: str) -> bool:
        """True if ``track_id`` is among the favourites."""
        return track_id in self._favorite_track_ids

    def set_favorite(self, track_id: str, is_favorite: bool) -> bool:
        """Add or remove ``track_id`` and return the resulting favourite flag."""
        if is_favorite:
            self._favorite_track_ids.add(track_id)
            return True
        self._favorite_track_ids.discard(track_id)
        return False