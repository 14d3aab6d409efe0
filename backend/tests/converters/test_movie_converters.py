from datetime import datetime

import pytest

from movietracker.converters import movie as movie_converters
from movietracker.models.movie import Movie
from movietracker.schemas.movie import MoviePublic


def _movie(genre) -> Movie:
    return Movie(
        id=1,
        title="Heat",
        type="movie",
        genre=genre,
        watched=True,
        priority=2,
        rating=8,
        review="",
        poster=None,
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 2),
    )


def test_to_public():
    result = movie_converters.to_public(_movie('["Crime", "Drama"]'))

    assert isinstance(result, MoviePublic)
    assert result.id == 1
    assert result.genre == ["Crime", "Drama"]
    assert result.watched is True
    assert result.rating == 8


@pytest.mark.parametrize(
    "stored",
    ["not json", '{"genre": "Drama"}', '"Drama"', "42", "", None],
)
def test_to_public_unreadable_genre_is_empty(stored):
    assert movie_converters.to_public(_movie(stored)).genre == []


def test_to_public_drops_non_string_genres():
    result = movie_converters.to_public(_movie('["Drama", 3, null, ""]'))

    assert result.genre == ["Drama"]
