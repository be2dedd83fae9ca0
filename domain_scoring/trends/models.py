"""Data models for externally supplied trend data."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

DEFAULT_STALE_AFTER = timedelta(hours=24)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class HotNiche:
    """A niche reported as hot by the trend feed.

    Attributes:
        niche: Niche name as reported, e.g. ``AI Tech``
        label: Display label
        heat: Heat from 0 to 100
        emerging_keywords: Newly trending words in the niche
    """

    niche: str
    label: str
    heat: float
    emerging_keywords: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HotNiche":
        """Create HotNiche from a feed entry.

        Raises:
            ValueError: If the entry is not a mapping or its heat is not a number
        """
        if not isinstance(data, dict):
            raise ValueError(f"Hot niche entry must be a mapping, got {type(data).__name__}")
        niche = str(data.get("niche", ""))
        try:
            heat = float(data.get("heat", 0))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Hot niche {niche!r} has non-numeric heat {data.get('heat')!r}") from e
        emerging = data.get("emerging_keywords") or ()
        if not isinstance(emerging, (list, tuple)):
            raise ValueError(f"Hot niche {niche!r} emerging_keywords must be a list")
        return cls(
            niche=niche,
            label=str(data.get("label") or niche),
            heat=heat,
            emerging_keywords=tuple(str(k) for k in emerging),
        )

    def matches(self, niche_key: str) -> bool:
        """Check if this entry describes the given niche key.

        The reported name matches when it equals the key once spaces and
        slashes become underscores. The label matches when it contains the
        key with underscores read as spaces.
        """
        slug = self.niche.lower().replace(" ", "_").replace("/", "_")
        return slug == niche_key or niche_key.replace("_", " ") in self.label.lower()


@dataclass
class TrendEnrichment:
    """Snapshot of AI-generated market trends.

    Attributes:
        keywords: Word -> heat multiplier (1.0-2.5)
        hot_niches: Niches with their heat
        market_signals: Free-text market observations
        generated_at: ISO-8601 time the snapshot was generated
        stale: True when the snapshot was older than 24h when fetched
    """

    keywords: dict[str, float] = field(default_factory=dict)
    hot_niches: list[HotNiche] = field(default_factory=list)
    market_signals: list[str] = field(default_factory=list)
    generated_at: str = ""
    stale: bool = False

    @classmethod
    def from_row(
        cls,
        row: dict[str, Any],
        now: datetime | None = None,
        stale_after: timedelta = DEFAULT_STALE_AFTER,
    ) -> "TrendEnrichment":
        """Create TrendEnrichment from a stored snapshot row.

        Args:
            row: Mapping with trending_keywords, hot_niches, market_signals
                and generated_at
            now: Reference time for staleness, defaults to the current time
            stale_after: Age beyond which the snapshot is stale

        Raises:
            ValueError: If generated_at is missing or not ISO-8601, or a
                section has the wrong shape
        """
        if not isinstance(row, dict):
            raise ValueError(f"Trend snapshot must be a mapping, got {type(row).__name__}")
        generated_at = row.get("generated_at")
        if not generated_at:
            raise ValueError("Trend snapshot has no generated_at timestamp")
        if isinstance(generated_at, datetime):
            generated = generated_at if generated_at.tzinfo else generated_at.replace(tzinfo=timezone.utc)
            generated_at = generated.isoformat()
        else:
            generated = parse_timestamp(str(generated_at))

        now = now or datetime.now(timezone.utc)
        raw_keywords = row.get("trending_keywords") or {}
        if not isinstance(raw_keywords, dict):
            raise ValueError("trending_keywords must map keywords to heat multipliers")
        try:
            keywords = {str(k).lower(): float(v) for k, v in raw_keywords.items()}
        except (TypeError, ValueError) as e:
            raise ValueError(f"trending_keywords has a non-numeric heat: {e}") from e

        hot_niches = row.get("hot_niches") or []
        market_signals = row.get("market_signals") or []
        if not isinstance(hot_niches, list):
            raise ValueError("hot_niches must be a list")
        if not isinstance(market_signals, list):
            raise ValueError("market_signals must be a list")

        return cls(
            keywords=keywords,
            hot_niches=[HotNiche.from_dict(n) for n in hot_niches],
            market_signals=[str(s) for s in market_signals],
            generated_at=str(generated_at),
            stale=now - generated > stale_after,
        )

    def heat(self, word: str) -> float:
        """AI heat multiplier of a word, 0.0 when unknown."""
        return self.keywords.get(word, 0.0)

    def find_niche(self, niche_key: str) -> HotNiche | None:
        """First hot niche matching a niche key."""
        for niche in self.hot_niches:
            if niche.matches(niche_key):
                return niche
        return None
