"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class MovieId:
    """Unique identifier for a Movie."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MovieDetails:
    """Name and genre of a movie to be created.

    Both are stored trimmed; a value that is empty after trimming is invalid.
    """

    name: str
    genre: str

    def __post_init__(self) -> None:
        for label, value in (("name", self.name), ("genre", self.genre)):
            if not isinstance(value, str):
                raise ValueError(f"Movie {label} must be text")
        name = self.name.strip()
        genre = self.genre.strip()
        if not name or not genre:
            raise ValueError("Name and genre are required")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "genre", genre)


@dataclass(frozen=True)
class MoviePatch:
    """Merge patch for a movie. ``None`` means "leave the field unchanged"."""

    seen: bool | None = None
    is_deleted: bool | None = None

    def __post_init__(self) -> None:
        if self.seen is not None and not isinstance(self.seen, bool):
            raise ValueError("seen must be a boolean")
        if self.is_deleted is not None and not isinstance(self.is_deleted, bool):
            raise ValueError("isDeleted must be a boolean")
        if self.is_deleted is False:
            raise ValueError("A deleted movie cannot be restored")

    @property
    def is_empty(self) -> bool:
        return self.seen is None and self.is_deleted is None

    def changed_fields(self) -> list[str]:
        fields = []
        if self.seen is not None:
            fields.append("seen")
        if self.is_deleted is not None:
            fields.append("is_deleted")
        return fields
