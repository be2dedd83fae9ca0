"""Sources for the latest trend snapshot.

The snapshot is produced by an external batch job and stored as a single
row (``id = latest``) in a hosted Postgres table, or exported to a local
JSON/YAML file. Fetch failures never reach the scorers: they are logged
and turned into ``None``, which the demand scorer treats as "no trend data".
"""

import logging
import os
from abc import ABC, abstractmethod
from datetime import timedelta
from pathlib import Path
from typing import Any

import requests
import yaml

from domain_scoring.config.settings import TrendsConfig
from domain_scoring.trends.cache import TrendCache
from domain_scoring.trends.models import DEFAULT_STALE_AFTER, TrendEnrichment

logger = logging.getLogger(__name__)

SNAPSHOT_COLUMNS = "trending_keywords,hot_niches,market_signals,generated_at"
LATEST_ID = "latest"


class TrendSourceError(Exception):
    """Exception raised when a trend snapshot cannot be loaded."""

    def __init__(self, message: str, status_code: int | None = None, response: Any = None):
        self.message = message
        self.status_code = status_code
        self.response = response
        super().__init__(self.message)


class TrendSource(ABC):
    """Base class for trend snapshot sources."""

    def __init__(self, stale_after: timedelta = DEFAULT_STALE_AFTER):
        self.stale_after = stale_after

    @abstractmethod
    def fetch_row(self) -> dict[str, Any] | None:
        """Load the raw snapshot row, or None when there is none.

        Raises:
            TrendSourceError: If the backing store cannot be read
        """

    def fetch(self) -> TrendEnrichment | None:
        """Load and parse the latest snapshot.

        Raises:
            TrendSourceError: If the backing store cannot be read
            ValueError: If the row has no usable generated_at
        """
        row = self.fetch_row()
        if not row:
            return None
        return TrendEnrichment.from_row(row, stale_after=self.stale_after)


class SupabaseTrendSource(TrendSource):
    """Reads the snapshot row through a PostgREST endpoint.

    Usage:
        source = SupabaseTrendSource(
            url="https://project.supabase.co",
            api_key="anon-key",
        )
        enrichment = source.fetch()
    """

    REST_PATH = "/rest/v1/"

    def __init__(
        self,
        url: str,
        api_key: str,
        table: str = "trending_market_data",
        timeout: int = 10,
        stale_after: timedelta = DEFAULT_STALE_AFTER,
    ):
        """Initialize the source.

        Args:
            url: Project base URL
            api_key: API key sent as ``apikey`` and bearer token
            table: Table holding the snapshot row
            timeout: Request timeout in seconds
            stale_after: Age beyond which a snapshot is marked stale
        """
        super().__init__(stale_after)
        self._url = url.rstrip("/")
        self._api_key = api_key
        self._table = table
        self._timeout = timeout
        self._session = requests.Session()

    @property
    def endpoint(self) -> str:
        """Table endpoint URL."""
        return f"{self._url}{self.REST_PATH}{self._table}"

    def _get_headers(self) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    def fetch_row(self) -> dict[str, Any] | None:
        try:
            response = self._session.get(
                self.endpoint,
                params={"select": SNAPSHOT_COLUMNS, "id": f"eq.{LATEST_ID}"},
                headers=self._get_headers(),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            status = None
            if getattr(e, "response", None) is not None:
                status = getattr(e.response, "status_code", None)
            raise TrendSourceError(f"Failed to fetch trend snapshot: {e}", status_code=status) from e

        try:
            rows = response.json()
        except ValueError as e:
            raise TrendSourceError("Trend snapshot response is not JSON", response=response.text) from e

        if not isinstance(rows, list):
            raise TrendSourceError("Unexpected trend snapshot response", response=rows)
        return rows[0] if rows else None


class FileTrendSource(TrendSource):
    """Reads the snapshot from a JSON or YAML file."""

    def __init__(self, path: Path | str, stale_after: timedelta = DEFAULT_STALE_AFTER):
        super().__init__(stale_after)
        self.path = Path(path)

    def fetch_row(self) -> dict[str, Any] | None:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise TrendSourceError(f"Failed to read trend snapshot {self.path}: {e}") from e

        if data is None:
            return None
        if not isinstance(data, dict):
            raise TrendSourceError(f"{self.path} does not contain a trend snapshot", response=data)
        return data


def create_source_from_settings(config: TrendsConfig) -> TrendSource | None:
    """Factory function to create a trend source.

    Credentials fall back to the ``SUPABASE_URL`` and ``SUPABASE_ANON_KEY``
    environment variables.

    Args:
        config: Trend configuration

    Returns:
        Configured source, or None when trends are disabled or unconfigured
    """
    stale_after = timedelta(hours=config.stale_hours)

    if config.source == "file":
        if not config.file_path:
            return None
        return FileTrendSource(config.file_path, stale_after=stale_after)

    if config.source == "supabase":
        url = config.url or os.getenv("SUPABASE_URL")
        api_key = config.api_key or os.getenv("SUPABASE_ANON_KEY")
        if not (url and api_key):
            return None
        return SupabaseTrendSource(
            url=url,
            api_key=api_key,
            table=config.table,
            timeout=config.timeout_seconds,
            stale_after=stale_after,
        )

    return None


_default_cache = TrendCache()


def fetch_trend_enrichment(
    source: TrendSource | None,
    cache: TrendCache | None = None,
) -> TrendEnrichment | None:
    """Fetch the latest trend snapshot, degrading to None on failure.

    Args:
        source: Where to read the snapshot, None disables enrichment
        cache: Cache to use, defaults to a process-wide cache

    Returns:
        TrendEnrichment, or None if there is no usable snapshot
    """
    if source is None:
        return None
    cache = cache if cache is not None else _default_cache

    def load() -> TrendEnrichment | None:
        try:
            return source.fetch()
        except (TrendSourceError, ValueError) as e:
            logger.warning("Trend enrichment unavailable: %s", e)
            return None

    return cache.get_or_load(load)


def clear_trend_cache(cache: TrendCache | None = None) -> None:
    """Clear a trend cache, the process-wide one by default."""
    (cache if cache is not None else _default_cache).clear()
