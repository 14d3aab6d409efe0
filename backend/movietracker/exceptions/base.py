from fastapi import status

from movietracker.core.enums import ErrorKind


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "internal_error"
    kind: ErrorKind = ErrorKind.INTERNAL
    detail: str = "An unexpected error occurred"

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)

    @property
    def exposes_detail(self) -> bool:
        """Whether the detail may be shown to a client outside development."""
        return self.kind not in (ErrorKind.CONFIGURATION, ErrorKind.INTERNAL)
