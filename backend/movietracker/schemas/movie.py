from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from movietracker.core.enums import MovieType
from movietracker.models.movie import DEFAULT_PRIORITY, MovieCreate, MovieUpdate

__all__ = [
    "MoviePublic",
    "MovieCreateRequest",
    "MovieUpdateRequest",
    "MovieImportRequest",
    "MovieImported",
    "MovieDeleted",
    "ErrorResponse",
]

PRIORITY_RANGE = (1, 5)
RATING_RANGE = (1, 10)
UPDATABLE_FIELDS = ("watched", "review", "rating", "priority")


def _check_priority(value: int) -> int:
    low, high = PRIORITY_RANGE
    if not low <= value <= high:
        raise ValueError(f"Priority must be between {low} and {high}")
    return value


def _check_rating(value: int) -> int:
    low, high = RATING_RANGE
    if not low <= value <= high:
        raise ValueError(f"Rating must be between {low} and {high}")
    return value


class MoviePublic(BaseModel):
    id: int
    title: str
    type: MovieType
    genre: list[str]
    watched: bool
    priority: int
    rating: int | None
    review: str
    poster: str | None
    created_at: datetime
    updated_at: datetime


class MovieCreateRequest(BaseModel):
    title: str
    type: MovieType | None = None
    genre: list[str] | str | None = None
    priority: int | None = None
    rating: int | None = None
    review: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def title_not_blank(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("Title is required")
        return value

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        return value.strip()

    # Falsy values (0, "", null) mean "not provided" for these fields
    @field_validator("type", "priority", "rating", "review", mode="before")
    @classmethod
    def falsy_is_missing(cls, value: Any) -> Any:
        if not value:
            return None
        return value

    @field_validator("priority")
    @classmethod
    def priority_in_range(cls, value: int | None) -> int | None:
        return None if value is None else _check_priority(value)

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, value: int | None) -> int | None:
        return None if value is None else _check_rating(value)

    def to_movie_create(self) -> MovieCreate:
        if isinstance(self.genre, list):
            genre = [g.strip() for g in self.genre if g and g.strip()]
        elif self.genre and self.genre.strip():
            genre = [self.genre.strip()]
        else:
            genre = []
        return MovieCreate(
            title=self.title,
            type=self.type or MovieType.MOVIE,
            genre=genre,
            watched=False,
            priority=self.priority or DEFAULT_PRIORITY,
            rating=self.rating,
            review=self.review or "",
        )


class MovieUpdateRequest(BaseModel):
    """
    Partial update payload.

    A field that is absent from the payload is left untouched; ``rating`` may
    be sent as null to clear it and ``review`` as null or "" to empty it.
    """

    id: int = Field(gt=0)
    watched: bool | None = None
    review: str | None = None
    rating: int | None = None
    priority: int | None = None

    @model_validator(mode="after")
    def check_present_fields(self) -> "MovieUpdateRequest":
        present = self.model_fields_set
        if "watched" in present and self.watched is None:
            raise ValueError("Watched must be true or false")
        if "priority" in present:
            if self.priority is None:
                raise ValueError("Priority must be between 1 and 5")
            _check_priority(self.priority)
        if "rating" in present and self.rating is not None:
            _check_rating(self.rating)
        return self

    @property
    def present_fields(self) -> list[str]:
        return [name for name in UPDATABLE_FIELDS if name in self.model_fields_set]

    def to_movie_update(self) -> MovieUpdate:
        values: dict[str, Any] = {name: getattr(self, name) for name in self.present_fields}
        if "review" in values:
            values["review"] = values["review"] or ""
        return MovieUpdate(**values)


class MovieImportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    imdb_link: str | None = Field(default=None, alias="imdbLink")


class MovieImported(BaseModel):
    message: str = "Movie imported successfully"
    movie: MoviePublic


class MovieDeleted(BaseModel):
    message: str = "Movie deleted successfully"
    id: int


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
