from fastapi import APIRouter, Query, status

from movietracker.api.deps import OmdbClientDep, SessionDep
from movietracker.exceptions.movie_exceptions import MissingMovieIdError
from movietracker.schemas.movie import (
    ErrorResponse,
    MovieCreateRequest,
    MovieDeleted,
    MovieImported,
    MovieImportRequest,
    MoviePublic,
    MovieUpdateRequest,
)
from movietracker.services import imports as imports_service
from movietracker.services import movies as movies_service

router = APIRouter(
    prefix="/movies",
    tags=["movies"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[MoviePublic])
def read_movies(session: SessionDep) -> list[MoviePublic]:
    return movies_service.get_movies(session=session)


@router.post("", response_model=MoviePublic, status_code=status.HTTP_201_CREATED)
def create_movie(session: SessionDep, movie_in: MovieCreateRequest) -> MoviePublic:
    return movies_service.create_movie(session=session, movie_in=movie_in)


@router.put(
    "",
    response_model=MoviePublic,
    responses={404: {"model": ErrorResponse}},
)
def update_movie(session: SessionDep, movie_in: MovieUpdateRequest) -> MoviePublic:
    return movies_service.update_movie(session=session, movie_in=movie_in)


@router.delete(
    "",
    response_model=MovieDeleted,
    responses={404: {"model": ErrorResponse}},
)
def delete_movie(
    session: SessionDep,
    id: int | None = Query(default=None),
) -> MovieDeleted:
    if id is None:
        raise MissingMovieIdError()
    deleted_id = movies_service.delete_movie(session=session, movie_id=id)
    return MovieDeleted(id=deleted_id)


@router.post(
    "/import",
    response_model=MovieImported,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def import_movie(
    session: SessionDep,
    omdb_client: OmdbClientDep,
    import_in: MovieImportRequest,
) -> MovieImported:
    movie = imports_service.import_movie(
        session=session,
        omdb_client=omdb_client,
        imdb_link=import_in.imdb_link,
    )
    return MovieImported(movie=movie)
