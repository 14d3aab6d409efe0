from .movie import (
    ErrorResponse,
    MovieCreateRequest,
    MovieDeleted,
    MovieImported,
    MovieImportRequest,
    MoviePublic,
    MovieUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "MovieCreateRequest",
    "MovieDeleted",
    "MovieImported",
    "MovieImportRequest",
    "MoviePublic",
    "MovieUpdateRequest",
]
