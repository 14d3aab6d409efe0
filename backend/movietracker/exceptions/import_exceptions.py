from fastapi import status

from movietracker.core.enums import ErrorKind

from .base import AppError


class MissingImdbLinkError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "missing_field"
    kind = ErrorKind.VALIDATION

    def __init__(self):
        super().__init__("imdbLink is required in the request body.")


class InvalidImdbLinkError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "invalid_imdb_link"
    kind = ErrorKind.VALIDATION

    def __init__(self, imdb_link: object):
        self.imdb_link = imdb_link
        detail = (
            "Could not extract an IMDb ID from the provided link. "
            "Provide a valid IMDb URL or ID (e.g. tt3896198)."
        )
        super().__init__(detail)


class MetadataNotFoundError(AppError):
    """The provider could not deliver metadata for the identifier.

    Raised both for a genuine "not found" answer and for an unreachable
    provider; ``provider_unavailable`` tells the two apart for operators.
    """

    status_code = status.HTTP_404_NOT_FOUND
    error = "movie_not_found"
    kind = ErrorKind.PROVIDER

    def __init__(self, imdb_id: str, reason: str, *, provider_unavailable: bool = False):
        self.imdb_id = imdb_id
        self.provider_unavailable = provider_unavailable
        super().__init__(f"Could not fetch metadata for {imdb_id}: {reason}")


class MetadataProviderConfigError(AppError):
    error = "provider_configuration_error"
    kind = ErrorKind.CONFIGURATION
    detail = "OMDb API key is invalid or missing. Set OMDB_API_KEY."
