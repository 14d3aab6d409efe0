from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Column, Field, SQLModel

from movietracker.core.enums import MovieType
from movietracker.utils import now_utc_naive

__all__ = [
    "MovieBase",
    "MovieCreate",
    "MovieUpdate",
    "Movie",
]

DEFAULT_PRIORITY = 3


# Shared properties
class MovieBase(SQLModel):
    title: str
    type: MovieType = MovieType.MOVIE
    watched: bool = False
    priority: int = DEFAULT_PRIORITY
    rating: int | None = None
    review: str = ""
    poster: str | None = None


# Properties to receive on movie creation, genre still as a list
class MovieCreate(MovieBase):
    genre: list[str] = Field(default_factory=list)


# Properties that may change after creation; only fields that were
# explicitly set are applied
class MovieUpdate(SQLModel):
    watched: bool | None = None
    review: str | None = None
    rating: int | None = None
    priority: int | None = None


# Database model. The genre list is kept as a serialized JSON array
class Movie(SQLModel, table=True):
    __tablename__ = "movies"
    __table_args__ = (
        sa.CheckConstraint("type IN ('movie', 'series')", name="ck_movies_type"),
        sa.CheckConstraint("priority BETWEEN 1 AND 5", name="ck_movies_priority"),
        {"sqlite_autoincrement": True},
    )

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(sa_column=Column(sa.Text, nullable=False))
    type: str = Field(
        default=MovieType.MOVIE.value,
        sa_column=Column(sa.String(16), nullable=False, server_default="movie"),
    )
    genre: str = Field(
        default="[]",
        sa_column=Column(sa.Text, nullable=False, server_default="[]"),
    )
    watched: bool = Field(
        default=False,
        sa_column=Column(sa.Boolean, nullable=False, server_default=sa.false()),
    )
    priority: int = Field(
        default=DEFAULT_PRIORITY,
        sa_column=Column(sa.Integer, nullable=False, server_default="3"),
    )
    rating: int | None = Field(default=None, sa_column=Column(sa.Integer))
    review: str = Field(
        default="",
        sa_column=Column(sa.Text, nullable=False, server_default=""),
    )
    poster: str | None = Field(default=None, sa_column=Column(sa.Text))
    created_at: datetime = Field(
        default_factory=now_utc_naive,
        sa_column=Column(
            sa.DateTime, nullable=False, index=True, server_default=sa.func.now()
        ),
    )
    updated_at: datetime = Field(
        default_factory=now_utc_naive,
        sa_column=Column(sa.DateTime, nullable=False, server_default=sa.func.now()),
    )
