from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from movietracker.core.db import Database
from movietracker.imdb.omdb import OmdbClient


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    with database.session() as session:
        yield session


def get_omdb_client(request: Request) -> OmdbClient:
    return request.app.state.omdb_client


SessionDep = Annotated[Session, Depends(get_db)]
OmdbClientDep = Annotated[OmdbClient, Depends(get_omdb_client)]
