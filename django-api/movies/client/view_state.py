"""View-state engine: derives the presented order of the cached collection.

Nothing here mutates its inputs or keeps state between calls. The only
randomness is in ``shuffle_order``, which callers invoke when the user asks
for a fresh shuffle; the resulting permutation is then frozen in
``ViewOptions`` and replayed by ``render`` until the next shuffle.
"""

import random
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

from movies.client.records import MovieRecord

Rendered = list[MovieRecord] | dict[str, list[MovieRecord]]


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class ViewOptions:
    """Presentation controls for the collection."""

    sort_dir: SortDirection = SortDirection.ASC
    grouped: bool = False
    shuffled: bool = False
    frozen_order: tuple[str, ...] = ()


def collation_key(name: str) -> str:
    """Case- and accent-insensitive sort key ("Éclair" sorts with "eclair")."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def sort_movies(collection: Sequence[MovieRecord], sort_dir: SortDirection) -> list[MovieRecord]:
    """Order by name. Equal names keep their collection order in both directions."""
    return sorted(
        collection,
        key=lambda movie: collation_key(movie.name),
        reverse=sort_dir is SortDirection.DESC,
    )


def apply_frozen_order(
    collection: Sequence[MovieRecord], frozen_order: Sequence[str]
) -> list[MovieRecord]:
    """Lay the collection out in the frozen permutation.

    IDs no longer in the collection are skipped; movies the permutation does
    not know about (added after the shuffle) follow in collection order.
    """
    by_id = {movie.id: movie for movie in collection}
    ordered = [by_id[movie_id] for movie_id in frozen_order if movie_id in by_id]
    placed = {movie.id for movie in ordered}
    ordered.extend(movie for movie in collection if movie.id not in placed)
    return ordered


def group_by_genre(movies: Sequence[MovieRecord]) -> dict[str, list[MovieRecord]]:
    """Partition by genre; keys follow first appearance, movies keep their order."""
    groups: dict[str, list[MovieRecord]] = {}
    for movie in movies:
        groups.setdefault(movie.genre, []).append(movie)
    return groups


def render(
    collection: Sequence[MovieRecord],
    sort_dir: SortDirection,
    grouped: bool,
    shuffled: bool,
    frozen_order: Sequence[str],
) -> Rendered:
    """Return the presented sequence, or a genre mapping when grouped."""
    if shuffled:
        processed = apply_frozen_order(collection, frozen_order)
    else:
        processed = sort_movies(collection, sort_dir)
    if grouped:
        return group_by_genre(processed)
    return processed


def render_view(collection: Sequence[MovieRecord], options: ViewOptions) -> Rendered:
    return render(
        collection,
        options.sort_dir,
        options.grouped,
        options.shuffled,
        options.frozen_order,
    )


def shuffle_order(
    collection: Sequence[MovieRecord], rng: random.Random | None = None
) -> tuple[str, ...]:
    """Draw a uniform random permutation of the collection's IDs (Fisher-Yates).

    Always starts from collection order, so the previous shuffle has no influence.
    """
    rng = rng or random.Random()
    ids = [movie.id for movie in collection]
    for i in range(len(ids) - 1, 0, -1):
        j = rng.randrange(i + 1)
        ids[i], ids[j] = ids[j], ids[i]
    return tuple(ids)


def toggle_sort(options: ViewOptions) -> ViewOptions:
    """Flip the sort direction and leave shuffle mode."""
    return replace(options, sort_dir=options.sort_dir.toggled(), shuffled=False, frozen_order=())


def toggle_group(options: ViewOptions) -> ViewOptions:
    """Flip grouping and leave shuffle mode."""
    return replace(options, grouped=not options.grouped, shuffled=False, frozen_order=())


def apply_shuffle(options: ViewOptions, order: Sequence[str]) -> ViewOptions:
    return replace(options, shuffled=True, frozen_order=tuple(order))
