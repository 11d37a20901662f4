"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in movies/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime

from movies.domain.value_objects import MovieId, MoviePatch


@dataclass(frozen=True)
class Movie:
    """Domain representation of a watch-list entry."""

    id: MovieId
    name: str
    genre: str
    seen: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    def apply(self, patch: MoviePatch, now: datetime) -> "Movie":
        """Return a copy with the patched fields set; omitted fields keep their value.

        A patch that changes nothing returns the movie as is, timestamps included.
        """
        seen = self.seen if patch.seen is None else patch.seen
        is_deleted = self.is_deleted if patch.is_deleted is None else patch.is_deleted
        if (seen, is_deleted) == (self.seen, self.is_deleted):
            return self
        return replace(self, seen=seen, is_deleted=is_deleted, updated_at=now)
