"""Unit tests for the view-state engine.

Run with: pytest django-api/tests/test_view_state.py -v
"""

import random

import pytest

from movies.client.records import MovieRecord
from movies.client.view_state import (
    SortDirection,
    ViewOptions,
    apply_shuffle,
    collation_key,
    render,
    shuffle_order,
    toggle_group,
    toggle_sort,
)


def movie(movie_id: str, name: str, genre: str = "Drama") -> MovieRecord:
    return MovieRecord(id=movie_id, name=name, genre=genre)


def names(movies) -> list[str]:
    return [m.name for m in movies]


@pytest.fixture
def collection() -> list[MovieRecord]:
    return [movie(str(i), f"Movie {i:02d}", "XY"[i % 2]) for i in range(20)]


class TestSorting:
    """Tests for deterministic name ordering."""

    def test_ascending(self):
        movies = [movie("1", "Zeta"), movie("2", "Alpha"), movie("3", "Mike")]

        assert names(render(movies, SortDirection.ASC, False, False, ())) == ["Alpha", "Mike", "Zeta"]

    def test_descending_is_reverse(self):
        movies = [movie("1", "Zeta"), movie("2", "Alpha"), movie("3", "Mike")]

        assert names(render(movies, SortDirection.DESC, False, False, ())) == ["Zeta", "Mike", "Alpha"]

    def test_case_insensitive(self):
        movies = [movie("1", "beta"), movie("2", "Alpha"), movie("3", "Charlie")]

        assert names(render(movies, SortDirection.ASC, False, False, ())) == ["Alpha", "beta", "Charlie"]

    def test_accents_sort_with_base_letter(self):
        movies = [movie("1", "Frozen"), movie("2", "Éclair"), movie("3", "Dune")]

        assert names(render(movies, SortDirection.ASC, False, False, ())) == ["Dune", "Éclair", "Frozen"]

    def test_equal_names_keep_collection_order(self):
        movies = [movie("b", "Heat"), movie("a", "heat"), movie("c", "Alien")]

        asc = render(movies, SortDirection.ASC, False, False, ())
        desc = render(movies, SortDirection.DESC, False, False, ())

        assert [m.id for m in asc] == ["c", "b", "a"]
        assert [m.id for m in desc] == ["b", "a", "c"]

    def test_render_does_not_mutate_input(self):
        movies = [movie("1", "Zeta"), movie("2", "Alpha")]

        render(movies, SortDirection.ASC, True, False, ())

        assert names(movies) == ["Zeta", "Alpha"]

    def test_collation_key(self):
        assert collation_key("Ámélie") == collation_key("amelie")


class TestGrouping:
    """Tests for group-by-genre."""

    def test_grouped_ascending(self):
        movies = [movie("1", "A", "X"), movie("2", "B", "Y"), movie("3", "C", "X")]

        grouped = render(movies, SortDirection.ASC, True, False, ())

        assert list(grouped) == ["X", "Y"]
        assert {genre: names(ms) for genre, ms in grouped.items()} == {"X": ["A", "C"], "Y": ["B"]}

    def test_group_keys_follow_processed_order(self):
        movies = [movie("1", "A", "X"), movie("2", "B", "Y"), movie("3", "C", "X")]

        grouped = render(movies, SortDirection.DESC, True, False, ())

        assert list(grouped) == ["X", "Y"]
        assert names(grouped["X"]) == ["C", "A"]

    def test_grouped_shuffle_keeps_shuffle_order(self):
        movies = [movie("1", "A", "X"), movie("2", "B", "Y"), movie("3", "C", "X")]

        grouped = render(movies, SortDirection.ASC, True, True, ("2", "3", "1"))

        assert list(grouped) == ["Y", "X"]
        assert names(grouped["X"]) == ["C", "A"]

    def test_empty_collection(self):
        assert render([], SortDirection.ASC, True, False, ()) == {}
        assert render([], SortDirection.ASC, False, False, ()) == []


class TestShuffle:
    """Tests for the frozen random permutation."""

    def test_shuffle_is_permutation(self, collection):
        order = shuffle_order(collection, random.Random(7))

        assert sorted(order) == sorted(m.id for m in collection)
        assert len(order) == len(collection)

    def test_shuffled_render_ignores_sort(self, collection):
        order = shuffle_order(collection, random.Random(7))

        asc = render(collection, SortDirection.ASC, False, True, order)
        desc = render(collection, SortDirection.DESC, False, True, order)

        assert [m.id for m in asc] == list(order)
        assert [m.id for m in desc] == list(order)

    def test_frozen_order_is_stable_across_renders(self, collection):
        order = shuffle_order(collection, random.Random(3))

        first = render(collection, SortDirection.ASC, False, True, order)
        second = render(collection, SortDirection.ASC, False, True, order)

        assert first == second

    def test_reshuffle_draws_new_order(self, collection):
        rng = random.Random(11)

        first = shuffle_order(collection, rng)
        second = shuffle_order(collection, rng)

        assert first != second

    def test_shuffle_uses_every_position(self):
        """Each element lands in each slot over many draws."""
        movies = [movie(str(i), f"M{i}") for i in range(4)]
        rng = random.Random(0)
        seen_positions = {m.id: set() for m in movies}

        for _ in range(400):
            for position, movie_id in enumerate(shuffle_order(movies, rng)):
                seen_positions[movie_id].add(position)

        assert all(positions == {0, 1, 2, 3} for positions in seen_positions.values())

    def test_shuffle_does_not_mutate_input(self, collection):
        before = list(collection)

        shuffle_order(collection, random.Random(1))

        assert collection == before

    def test_added_movies_follow_frozen_order(self):
        movies = [movie("1", "A"), movie("2", "B")]
        order = ("2", "1")
        extended = [*movies, movie("3", "C")]

        assert [m.id for m in render(extended, SortDirection.ASC, False, True, order)] == ["2", "1", "3"]

    def test_removed_movies_are_skipped(self):
        movies = [movie("1", "A"), movie("3", "C")]

        rendered = render(movies, SortDirection.ASC, False, True, ("3", "2", "1"))

        assert [m.id for m in rendered] == ["3", "1"]


class TestTransitions:
    """Tests for toggles on ViewOptions."""

    def test_toggle_sort_clears_shuffle(self):
        options = apply_shuffle(ViewOptions(), ("1", "2"))

        toggled = toggle_sort(options)

        assert toggled.shuffled is False
        assert toggled.frozen_order == ()
        assert toggled.sort_dir is SortDirection.DESC

    def test_toggle_group_clears_shuffle(self):
        options = apply_shuffle(ViewOptions(), ("1", "2"))

        toggled = toggle_group(options)

        assert toggled.shuffled is False
        assert toggled.grouped is True

    def test_shuffle_keeps_grouping_and_direction(self):
        options = ViewOptions(sort_dir=SortDirection.DESC, grouped=True)

        shuffled = apply_shuffle(options, ("1",))

        assert shuffled.grouped is True
        assert shuffled.sort_dir is SortDirection.DESC
        assert shuffled.shuffled is True
