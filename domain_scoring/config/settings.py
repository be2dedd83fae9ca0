"""Settings loader and configuration dataclass."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class TrendsConfig:
    """Trend enrichment configuration.

    Supports two sources:
    - supabase: latest snapshot row over PostgREST (requires SUPABASE_URL
      and SUPABASE_ANON_KEY unless set here)
    - file: a JSON or YAML snapshot on disk
    Any other value disables enrichment.
    """

    source: str = "none"
    url: str | None = None
    api_key: str | None = None  # Can also use env vars
    table: str = "trending_market_data"
    file_path: str | None = None
    ttl_seconds: int = 600
    stale_hours: int = 24
    timeout_seconds: int = 10


@dataclass
class ScoringConfig:
    """Display thresholds for scores."""

    good_score: int = 65
    excellent_score: int = 80
    bulk_limit: int = 500


@dataclass
class TrademarkConfig:
    """Trademark check configuration."""

    extra_brands: list[str] = field(default_factory=list)


@dataclass
class ValuationConfig:
    """Valuation configuration."""

    comps_path: str | None = None


@dataclass
class Settings:
    """Main settings container for domain scoring."""

    trends: TrendsConfig = field(default_factory=TrendsConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    trademark: TrademarkConfig = field(default_factory=TrademarkConfig)
    valuation: ValuationConfig = field(default_factory=ValuationConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        trends_data = data.get("trends") or {}
        scoring_data = data.get("scoring") or {}
        trademark_data = data.get("trademark") or {}
        valuation_data = data.get("valuation") or {}

        return cls(
            trends=TrendsConfig(**trends_data),
            scoring=ScoringConfig(**scoring_data),
            trademark=TrademarkConfig(
                extra_brands=[str(b).lower() for b in trademark_data.get("extra_brands") or []],
            ),
            valuation=ValuationConfig(**valuation_data),
        )


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML configuration file.

    Args:
        config_path: Path to configuration file. If None, uses default config.yaml

    Returns:
        Settings object with loaded configuration
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        return Settings()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Settings()

    return Settings.from_dict(data)
