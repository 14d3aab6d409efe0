from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Movie Tracker"
    ENVIRONMENT: Literal["local", "development", "staging", "production"] = "local"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    BACKEND_CORS_ORIGINS: Annotated[list[str] | str, BeforeValidator(parse_cors)] = [
        "*"
    ]

    # Unset means the backing store is unconfigured; every data route then
    # answers with a configuration error instead of touching the database.
    DATABASE_URL: str | None = None
    DB_POOL_SIZE: int = 2
    DB_POOL_TIMEOUT: int = 10
    DB_POOL_RECYCLE: int = 30
    DB_ECHO: bool = False

    OMDB_API_KEY: str | None = None
    OMDB_API_URL: str = "https://www.omdbapi.com/"
    OMDB_TIMEOUT_SECONDS: float = 10.0
    OMDB_HTTP_RETRIES: int = 0

    LOG_DIR: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            return [self.BACKEND_CORS_ORIGINS]
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT in ("local", "development")


settings = Settings()
