from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from domain_scoring.trends import TrendEnrichment
from domain_scoring.trends.models import HotNiche, parse_timestamp


def test_from_row_parses_snapshot(snapshot_row, fixed_now):
    enrichment = TrendEnrichment.from_row(snapshot_row, now=fixed_now)
    assert enrichment.keywords == {"agent": 2.4, "flow": 1.9}
    assert enrichment.heat("flow") == 1.9
    assert enrichment.heat("unknown") == 0.0
    assert [n.label for n in enrichment.hot_niches] == ["AI / Tech", "Crypto / Web3"]
    assert enrichment.hot_niches[0].emerging_keywords == ("agentic",)
    assert enrichment.market_signals == ["AI agent domains up 40% week over week"]
    assert not enrichment.stale


def test_from_row_marks_old_snapshots_stale(snapshot_row, fixed_now):
    later = fixed_now + timedelta(days=2)
    assert TrendEnrichment.from_row(snapshot_row, now=later).stale


def test_from_row_custom_stale_window(snapshot_row, fixed_now):
    enrichment = TrendEnrichment.from_row(snapshot_row, now=fixed_now, stale_after=timedelta(hours=6))
    assert enrichment.stale


def test_from_row_requires_timestamp(snapshot_row):
    del snapshot_row["generated_at"]
    with pytest.raises(ValueError):
        TrendEnrichment.from_row(snapshot_row)


def test_from_row_tolerates_missing_sections(fixed_now):
    enrichment = TrendEnrichment.from_row({"generated_at": "2025-12-31T23:00:00+00:00"}, now=fixed_now)
    assert enrichment.keywords == {}
    assert enrichment.hot_niches == []
    assert enrichment.market_signals == []


def test_find_niche(snapshot_row, fixed_now):
    enrichment = TrendEnrichment.from_row(snapshot_row, now=fixed_now)
    assert enrichment.find_niche("ai_tech").heat == 92
    assert enrichment.find_niche("crypto").heat == 25
    assert enrichment.find_niche("health") is None


def test_parse_timestamp_assumes_utc():
    parsed = parse_timestamp("2025-12-31T12:00:00")
    assert parsed == datetime(2025, 12, 31, 12, tzinfo=timezone.utc)
    assert parse_timestamp("2025-12-31T12:00:00Z") == parsed


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("trending_keywords", ["agent", "flow"]),
        ("trending_keywords", {"agent": "hot"}),
        ("hot_niches", [{"niche": "fintech", "heat": None}]),
        ("hot_niches", ["fintech"]),
        ("hot_niches", {"niche": "fintech"}),
        ("market_signals", "AI is hot"),
    ],
)
def test_from_row_rejects_malformed_sections(snapshot_row, fixed_now, field, value):
    snapshot_row[field] = value
    with pytest.raises(ValueError):
        TrendEnrichment.from_row(snapshot_row, now=fixed_now)


def test_from_row_rejects_non_mapping():
    with pytest.raises(ValueError):
        TrendEnrichment.from_row(["not", "a", "row"])


def test_hot_niche_accepts_numeric_strings():
    assert HotNiche.from_dict({"niche": "fintech", "heat": "75"}).heat == 75.0
