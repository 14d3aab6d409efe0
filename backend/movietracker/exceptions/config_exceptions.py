from movietracker.core.enums import ErrorKind

from .base import AppError


class DatabaseNotConfiguredError(AppError):
    error = "database_configuration_error"
    kind = ErrorKind.CONFIGURATION
    detail = "DATABASE_URL environment variable is not set."
