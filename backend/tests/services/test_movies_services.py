import pytest
from pytest_mock import MockerFixture
from sqlmodel import Session

from movietracker.exceptions.base import AppError
from movietracker.exceptions.movie_exceptions import (
    MovieNotFoundError,
    NoFieldsToUpdateError,
)
from movietracker.models.movie import Movie
from movietracker.schemas.movie import MovieCreateRequest, MovieUpdateRequest
from movietracker.services import movies as movies_services


def test_get_movies_decodes_genre(
    *,
    db_transaction: Session,
    movie_factory,
):
    movie_factory(genre='["Horror", "Thriller"]')
    movie_factory(genre="{not json")

    movies = movies_services.get_movies(session=db_transaction)

    assert sorted(m.genre for m in movies) == [[], ["Horror", "Thriller"]]


def test_create_movie_applies_defaults(
    *,
    db_transaction: Session,
):
    movie = movies_services.create_movie(
        session=db_transaction,
        movie_in=MovieCreateRequest(title="  Arrival  "),
    )

    assert movie.id is not None
    assert movie.title == "Arrival"
    assert movie.type == "movie"
    assert movie.genre == []
    assert movie.watched is False
    assert movie.priority == 3
    assert movie.rating is None
    assert movie.review == ""
    assert movie.poster is None


def test_save_new_movie_rolls_back_on_failure(mocker: MockerFixture):
    mock_crud = mocker.patch("movietracker.crud.movie.create_movie")
    mock_crud.side_effect = RuntimeError("boom")
    mock_session = mocker.MagicMock()

    with pytest.raises(AppError):
        movies_services.save_new_movie(
            session=mock_session,
            movie_create=mocker.MagicMock(),
        )

    mock_session.rollback.assert_called_once()
    mock_session.commit.assert_not_called()


def test_update_movie_without_fields_skips_lookup(mocker: MockerFixture):
    mock_get = mocker.patch("movietracker.crud.movie.get_movie_by_id")
    mock_session = mocker.MagicMock()

    with pytest.raises(NoFieldsToUpdateError) as exc_info:
        movies_services.update_movie(
            session=mock_session,
            movie_in=MovieUpdateRequest(id=5),
        )

    assert exc_info.value.movie_id == 5
    mock_get.assert_not_called()


def test_update_movie_not_found(
    *,
    db_transaction: Session,
):
    with pytest.raises(MovieNotFoundError) as exc_info:
        movies_services.update_movie(
            session=db_transaction,
            movie_in=MovieUpdateRequest(id=424242, watched=True),
        )

    assert exc_info.value.movie_id == 424242


def test_update_movie_is_idempotent(
    *,
    db_transaction: Session,
    movie_factory,
):
    movie: Movie = movie_factory(watched=False)
    movie_in = MovieUpdateRequest(id=movie.id, watched=True)

    first = movies_services.update_movie(session=db_transaction, movie_in=movie_in)
    second = movies_services.update_movie(session=db_transaction, movie_in=movie_in)

    assert first.watched is True
    assert second.watched is True
    assert first.model_dump(exclude={"updated_at"}) == second.model_dump(
        exclude={"updated_at"}
    )


def test_update_movie_review_null_becomes_empty(
    *,
    db_transaction: Session,
    movie_factory,
):
    movie: Movie = movie_factory(review="Too long")

    updated = movies_services.update_movie(
        session=db_transaction,
        movie_in=MovieUpdateRequest.model_validate({"id": movie.id, "review": None}),
    )

    assert updated.review == ""


def test_delete_movie_not_found(
    *,
    db_transaction: Session,
):
    with pytest.raises(MovieNotFoundError):
        movies_services.delete_movie(session=db_transaction, movie_id=424242)


def test_delete_movie_success(
    *,
    db_transaction: Session,
    movie_factory,
):
    movie: Movie = movie_factory()
    movie_id = movie.id

    assert movies_services.delete_movie(session=db_transaction, movie_id=movie_id) == movie_id
    assert movies_services.get_movies(session=db_transaction) == []
