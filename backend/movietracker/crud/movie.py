from sqlalchemy import func, select
from sqlmodel import Session, col

from movietracker.models.movie import Movie, MovieCreate, MovieUpdate
from movietracker.models.utils import encode_genre
from movietracker.utils import now_utc_naive


def get_movies(*, session: Session) -> list[Movie]:
    """
    Retrieve every movie, newest first.

    Parameters:
        session (Session): The database session.
    Returns:
        list[Movie]: All movies ordered by creation time, descending.
    """
    stmt = select(Movie).order_by(col(Movie.created_at).desc(), col(Movie.id).desc())
    result = session.execute(stmt)
    movies: list[Movie] = list(result.scalars().all())
    return movies


def get_movie_by_id(*, session: Session, id: int) -> Movie | None:
    """
    Retrieve a movie by its ID.

    Parameters:
        session (Session): The database session.
        id (int): The ID of the movie to retrieve.
    Returns:
        Movie | None: The movie object if found, otherwise None.
    """
    movie = session.get(Movie, id)
    return movie


def get_movie_by_title(*, session: Session, title: str) -> Movie | None:
    """
    Retrieve a movie whose title equals the given one, ignoring case.

    Parameters:
        session (Session): The database session.
        title (str): The title to look for.
    Returns:
        Movie | None: The first matching movie, otherwise None.
    """
    stmt = (
        select(Movie)
        .where(func.lower(col(Movie.title)) == func.lower(title))
        .limit(1)
    )
    result = session.execute(stmt)
    movie: Movie | None = result.scalars().first()
    return movie


def create_movie(*, session: Session, movie_create: MovieCreate) -> Movie:
    """
    Create a new movie in the database. The genre list is serialized before
    it is stored; id and timestamps are assigned on flush.

    Parameters:
        session (Session): The database session.
        movie_create (MovieCreate): The movie data to create.
    Returns:
        Movie: The created movie object.
    """
    movie_data = movie_create.model_dump(mode="json")
    movie_data["genre"] = encode_genre(movie_create.genre)
    db_obj = Movie(**movie_data)
    session.add(db_obj)
    session.flush()
    return db_obj


def update_movie(*, db_movie: Movie, movie_update: MovieUpdate) -> Movie:
    """
    Apply a partial update to an existing movie. Only fields explicitly set on
    ``movie_update`` are touched; ``updated_at`` is always refreshed. Does not
    flush, the caller commits.

    Parameters:
        db_movie (Movie): The existing movie object to update.
        movie_update (MovieUpdate): The fields to change.
    Returns:
        Movie: The updated movie object.
    """
    movie_data = movie_update.model_dump(exclude_unset=True)
    db_movie.sqlmodel_update(movie_data)
    db_movie.updated_at = now_utc_naive()
    return db_movie


def delete_movie(*, session: Session, id: int) -> int | None:
    """
    Delete a movie by its ID.

    Parameters:
        session (Session): The database session.
        id (int): The ID of the movie to delete.
    Returns:
        int | None: The deleted ID, or None when no movie had that ID.
    """
    movie = session.get(Movie, id)
    if movie is None:
        return None
    session.delete(movie)
    session.flush()
    return id
