"""AI trend enrichment for keyword demand scoring."""

from domain_scoring.trends.cache import TrendCache
from domain_scoring.trends.models import HotNiche, TrendEnrichment
from domain_scoring.trends.source import (
    FileTrendSource,
    SupabaseTrendSource,
    TrendSource,
    TrendSourceError,
    clear_trend_cache,
    create_source_from_settings,
    fetch_trend_enrichment,
)

__all__ = [
    "FileTrendSource",
    "HotNiche",
    "SupabaseTrendSource",
    "TrendCache",
    "TrendEnrichment",
    "TrendSource",
    "TrendSourceError",
    "clear_trend_cache",
    "create_source_from_settings",
    "fetch_trend_enrichment",
]
