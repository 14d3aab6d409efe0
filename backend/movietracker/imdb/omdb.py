from typing import Any

import requests
from loguru import logger
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from movietracker.core.config import settings
from movietracker.exceptions.import_exceptions import (
    MetadataNotFoundError,
    MetadataProviderConfigError,
)


class OmdbClient:
    """
    Thin client for the OMDb title lookup.

    ``fetch_by_imdb_id`` either returns the decoded payload or raises one of
    the import errors; it never returns a payload that reports failure.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        session: requests.Session | None = None,
    ):
        # Unset arguments fall back to the settings in effect at construction
        self.api_key = api_key if api_key is not None else settings.OMDB_API_KEY
        self.base_url = base_url or settings.OMDB_API_URL
        self.timeout = timeout if timeout is not None else settings.OMDB_TIMEOUT_SECONDS
        if retries is None:
            retries = settings.OMDB_HTTP_RETRIES
        self.session = session or requests.Session()
        if retries:
            retry = Retry(
                total=retries,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
            )
            self.session.mount("https://", HTTPAdapter(max_retries=retry))
            self.session.mount("http://", HTTPAdapter(max_retries=retry))

    def close(self) -> None:
        self.session.close()

    def fetch_by_imdb_id(self, imdb_id: str) -> dict[str, Any]:
        if not self.api_key:
            logger.error("OMDB_API_KEY is not configured")
            raise MetadataProviderConfigError()

        try:
            response = self.session.get(
                self.base_url,
                params={"i": imdb_id, "apikey": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"OMDb unavailable while fetching {imdb_id}: {e}")
            raise MetadataNotFoundError(
                imdb_id, "metadata provider unavailable", provider_unavailable=True
            ) from e

        if response.status_code == 401:
            logger.error("OMDb rejected the API key (HTTP 401)")
            raise MetadataProviderConfigError()
        if not response.ok:
            logger.error(
                f"OMDb error for {imdb_id}: {response.status_code} {response.reason}"
            )
            raise MetadataNotFoundError(
                imdb_id,
                f"OMDb API error: {response.status_code} {response.reason}",
                provider_unavailable=response.status_code >= 500,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"OMDb returned a non-JSON body for {imdb_id}")
            raise MetadataNotFoundError(
                imdb_id, "invalid response from metadata provider",
                provider_unavailable=True,
            ) from e
        if not isinstance(data, dict):
            raise MetadataNotFoundError(imdb_id, "invalid response from metadata provider")

        if data.get("Response") == "False":
            error = str(data.get("Error") or "Movie not found in OMDb")
            if "api key" in error.lower():
                logger.error(f"OMDb API key problem: {error}")
                raise MetadataProviderConfigError()
            logger.info(f"OMDb has no title {imdb_id}: {error}")
            raise MetadataNotFoundError(imdb_id, error)

        return data
