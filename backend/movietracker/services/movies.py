from loguru import logger
from sqlmodel import Session

from movietracker.converters import movie as movie_converters
from movietracker.crud import movie as movies_crud
from movietracker.exceptions.base import AppError
from movietracker.exceptions.movie_exceptions import (
    MovieNotFoundError,
    NoFieldsToUpdateError,
)
from movietracker.models.movie import MovieCreate
from movietracker.schemas.movie import (
    MovieCreateRequest,
    MoviePublic,
    MovieUpdateRequest,
)


def get_movies(*, session: Session) -> list[MoviePublic]:
    """
    List every movie, newest first.

    Parameters:
        session (Session): Database session.
    Returns:
        list[MoviePublic]: All movies; unreadable genre values come back empty.
    """
    movies_db = movies_crud.get_movies(session=session)
    return [movie_converters.to_public(movie) for movie in movies_db]


def save_new_movie(*, session: Session, movie_create: MovieCreate) -> MoviePublic:
    """
    Persist a new movie and commit. Shared by manual creation and import.

    Parameters:
        session (Session): Database session.
        movie_create (MovieCreate): Normalized movie data.
    Returns:
        MoviePublic: The stored movie, including id and timestamps.
    Raises:
        AppError: If the database rejected the insert.
    """
    try:
        movie_db = movies_crud.create_movie(session=session, movie_create=movie_create)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError("Failed to save movie.") from e
    session.refresh(movie_db)
    logger.info(f"Created movie {movie_db.id} ({movie_db.title!r})")
    return movie_converters.to_public(movie_db)


def create_movie(*, session: Session, movie_in: MovieCreateRequest) -> MoviePublic:
    """
    Create a movie from a validated create request.

    Parameters:
        session (Session): Database session.
        movie_in (MovieCreateRequest): The validated request body.
    Returns:
        MoviePublic: The stored movie.
    """
    return save_new_movie(session=session, movie_create=movie_in.to_movie_create())


def update_movie(*, session: Session, movie_in: MovieUpdateRequest) -> MoviePublic:
    """
    Apply a partial update to a movie.

    Only fields present in the request are written. Applying the same update
    twice leaves the same state as applying it once.

    Parameters:
        session (Session): Database session.
        movie_in (MovieUpdateRequest): The validated request body.
    Returns:
        MoviePublic: The full movie after the update.
    Raises:
        NoFieldsToUpdateError: If the request carries no updatable field.
        MovieNotFoundError: If no movie has the given id.
    """
    if not movie_in.present_fields:
        raise NoFieldsToUpdateError(movie_in.id)

    movie_db = movies_crud.get_movie_by_id(session=session, id=movie_in.id)
    if movie_db is None:
        raise MovieNotFoundError(movie_in.id)

    movies_crud.update_movie(db_movie=movie_db, movie_update=movie_in.to_movie_update())
    session.add(movie_db)
    session.commit()
    session.refresh(movie_db)
    return movie_converters.to_public(movie_db)


def delete_movie(*, session: Session, movie_id: int) -> int:
    """
    Delete a movie by id.

    Parameters:
        session (Session): Database session.
        movie_id (int): ID of the movie to delete.
    Returns:
        int: The deleted id.
    Raises:
        MovieNotFoundError: If no movie has the given id.
    """
    deleted_id = movies_crud.delete_movie(session=session, id=movie_id)
    if deleted_id is None:
        raise MovieNotFoundError(movie_id)
    session.commit()
    logger.info(f"Deleted movie {deleted_id}")
    return deleted_id
