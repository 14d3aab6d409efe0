from loguru import logger
from sqlmodel import Session

from movietracker.crud import movie as movies_crud
from movietracker.exceptions.import_exceptions import (
    InvalidImdbLinkError,
    MissingImdbLinkError,
)
from movietracker.exceptions.movie_exceptions import DuplicateMovieError
from movietracker.imdb.identifiers import extract_imdb_id
from movietracker.imdb.normalization import normalize_omdb_payload
from movietracker.imdb.omdb import OmdbClient
from movietracker.schemas.movie import MoviePublic
from movietracker.services.movies import save_new_movie


def import_movie(
    *,
    session: Session,
    omdb_client: OmdbClient,
    imdb_link: str | None,
) -> MoviePublic:
    """
    Import a movie from an IMDb link or ID.

    Steps run strictly in order: extract the ID, fetch OMDb metadata,
    normalize it, check for a duplicate title, persist. The duplicate check
    happens after the fetch, so a rejected duplicate still costs one OMDb call.
    Either a full movie is stored or nothing is.

    Parameters:
        session (Session): Database session.
        omdb_client (OmdbClient): Client used to fetch the metadata.
        imdb_link (str | None): The raw link or ID supplied by the user.
    Returns:
        MoviePublic: The stored movie.
    Raises:
        MissingImdbLinkError: If no link was supplied.
        InvalidImdbLinkError: If no IMDb ID could be extracted.
        MetadataNotFoundError: If OMDb has no such title or is unreachable.
        MetadataProviderConfigError: If the OMDb API key is missing or rejected.
        DuplicateMovieError: If a movie with the same title already exists.
    """
    if imdb_link is None or not imdb_link.strip():
        raise MissingImdbLinkError()

    imdb_id = extract_imdb_id(imdb_link)
    if imdb_id is None:
        raise InvalidImdbLinkError(imdb_link)

    payload = omdb_client.fetch_by_imdb_id(imdb_id)
    movie_create = normalize_omdb_payload(payload)

    if movies_crud.get_movie_by_title(session=session, title=movie_create.title):
        raise DuplicateMovieError(movie_create.title)

    movie = save_new_movie(session=session, movie_create=movie_create)
    logger.info(f"Imported {imdb_id} as movie {movie.id}")
    return movie
