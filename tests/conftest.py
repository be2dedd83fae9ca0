from __future__ import annotations

from datetime import datetime, timezone

import pytest

from domain_scoring.trends import TrendEnrichment
from domain_scoring.trends.models import HotNiche
from domain_scoring.valuation import QuickValuationResult, format_band


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_enrichment():
    """Build a TrendEnrichment without going through a source."""

    def _make(
        keywords: dict[str, float] | None = None,
        hot_niches: list[HotNiche] | None = None,
        stale: bool = False,
    ) -> TrendEnrichment:
        return TrendEnrichment(
            keywords=keywords or {},
            hot_niches=hot_niches or [],
            market_signals=[],
            generated_at="2026-01-01T00:00:00+00:00",
            stale=stale,
        )

    return _make


@pytest.fixture
def snapshot_row() -> dict[str, object]:
    return {
        "trending_keywords": {"Agent": 2.4, "flow": 1.9},
        "hot_niches": [
            {"niche": "AI Tech", "label": "AI / Tech", "heat": 92, "emerging_keywords": ["agentic"]},
            {"niche": "crypto", "label": "Crypto / Web3", "heat": 25},
        ],
        "market_signals": ["AI agent domains up 40% week over week"],
        "generated_at": "2025-12-31T12:00:00Z",
    }


@pytest.fixture
def base_valuation() -> QuickValuationResult:
    return QuickValuationResult(
        band=format_band(1_000, 3_000),
        score=60,
        value_min=1_000,
        value_max=3_000,
    )


@pytest.fixture
def fake_clock():
    """Manually advanced monotonic clock."""

    class Clock:
        def __init__(self) -> None:
            self.now = 1_000.0

        def __call__(self) -> float:
            return self.now

        def advance(self, seconds: float) -> None:
            self.now += seconds

    return Clock()
