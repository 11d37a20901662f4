"""Client-side copy of a movie as returned by the API."""

from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True)
class MovieRecord:
    """A cached movie. The server copy is authoritative."""

    id: str
    name: str
    genre: str
    seen: bool = False
    is_deleted: bool = False

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> Self:
        return cls(
            id=str(payload["id"]),
            name=payload["name"],
            genre=payload["genre"],
            seen=bool(payload.get("seen", False)),
            is_deleted=bool(payload.get("isDeleted", False)),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "genre": self.genre,
            "seen": self.seen,
            "isDeleted": self.is_deleted,
        }
