from enum import Enum, unique


@unique
class MovieType(str, Enum):
    MOVIE = "movie"
    SERIES = "series"


@unique
class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PROVIDER = "provider"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"
