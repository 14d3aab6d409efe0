from fastapi import status

from movietracker.core.enums import ErrorKind

from .base import AppError


class MovieNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"
    kind = ErrorKind.NOT_FOUND

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        detail = f"Movie with ID {movie_id} not found."
        super().__init__(detail)


class MissingMovieIdError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "validation_error"
    kind = ErrorKind.VALIDATION

    def __init__(self):
        super().__init__("Movie ID is required.")


class NoFieldsToUpdateError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "no_fields_to_update"
    kind = ErrorKind.VALIDATION

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        detail = (
            f"No fields to update for movie {movie_id}. "
            "Provide at least one of: watched, review, rating, priority."
        )
        super().__init__(detail)


class DuplicateMovieError(AppError):
    status_code = status.HTTP_409_CONFLICT
    error = "movie_already_exists"
    kind = ErrorKind.CONFLICT

    def __init__(self, title: str):
        self.title = title
        detail = f'A movie with the title "{title}" already exists.'
        super().__init__(detail)
