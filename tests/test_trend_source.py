from __future__ import annotations

import json
import logging

import pytest
import requests

from domain_scoring.config import TrendsConfig
from domain_scoring.trends import (
    FileTrendSource,
    SupabaseTrendSource,
    TrendCache,
    TrendSourceError,
    clear_trend_cache,
    create_source_from_settings,
    fetch_trend_enrichment,
)


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str = ""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def supabase_source():
    return SupabaseTrendSource(url="https://example.supabase.co/", api_key="anon-key")


def test_supabase_fetch_row(supabase_source, snapshot_row):
    session = FakeSession(FakeResponse([snapshot_row]))
    supabase_source._session = session

    assert supabase_source.fetch_row() == snapshot_row

    call = session.calls[0]
    assert call["url"] == "https://example.supabase.co/rest/v1/trending_market_data"
    assert call["params"]["id"] == "eq.latest"
    assert "generated_at" in call["params"]["select"]
    assert call["headers"]["apikey"] == "anon-key"
    assert call["headers"]["Authorization"] == "Bearer anon-key"


def test_supabase_fetch_parses_enrichment(supabase_source, snapshot_row):
    supabase_source._session = FakeSession(FakeResponse([snapshot_row]))
    enrichment = supabase_source.fetch()
    assert enrichment.heat("agent") == 2.4


def test_supabase_no_rows(supabase_source):
    supabase_source._session = FakeSession(FakeResponse([]))
    assert supabase_source.fetch() is None


def test_supabase_http_error(supabase_source):
    supabase_source._session = FakeSession(FakeResponse(status_code=503))
    with pytest.raises(TrendSourceError) as exc_info:
        supabase_source.fetch_row()
    assert exc_info.value.status_code == 503


def test_supabase_network_error(supabase_source):
    supabase_source._session = FakeSession(error=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(TrendSourceError):
        supabase_source.fetch_row()


def test_supabase_bad_payloads(supabase_source):
    supabase_source._session = FakeSession(FakeResponse(ValueError("no json"), text="<html>"))
    with pytest.raises(TrendSourceError):
        supabase_source.fetch_row()

    supabase_source._session = FakeSession(FakeResponse({"message": "oops"}))
    with pytest.raises(TrendSourceError):
        supabase_source.fetch_row()


def test_file_source_json(tmp_path, snapshot_row):
    path = tmp_path / "trends.json"
    path.write_text(json.dumps(snapshot_row), encoding="utf-8")
    enrichment = FileTrendSource(path).fetch()
    assert enrichment.keywords["flow"] == 1.9


def test_file_source_yaml(tmp_path):
    path = tmp_path / "trends.yaml"
    path.write_text(
        "generated_at: '2025-12-31T12:00:00Z'\ntrending_keywords:\n  agent: 2.2\n",
        encoding="utf-8",
    )
    assert FileTrendSource(path).fetch().heat("agent") == 2.2


def test_file_source_errors(tmp_path):
    with pytest.raises(TrendSourceError):
        FileTrendSource(tmp_path / "missing.json").fetch_row()

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(TrendSourceError):
        FileTrendSource(listing).fetch_row()

    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert FileTrendSource(empty).fetch() is None


def test_fetch_trend_enrichment_degrades_to_none(supabase_source, caplog):
    supabase_source._session = FakeSession(error=requests.exceptions.Timeout("slow"))
    with caplog.at_level(logging.WARNING, logger="domain_scoring.trends.source"):
        assert fetch_trend_enrichment(supabase_source, TrendCache()) is None
    assert "Trend enrichment unavailable" in caplog.text


def test_fetch_trend_enrichment_missing_timestamp(supabase_source, snapshot_row):
    del snapshot_row["generated_at"]
    supabase_source._session = FakeSession(FakeResponse([snapshot_row]))
    assert fetch_trend_enrichment(supabase_source, TrendCache()) is None


def test_fetch_trend_enrichment_uses_cache(supabase_source, snapshot_row):
    session = FakeSession(FakeResponse([snapshot_row]))
    supabase_source._session = session
    cache = TrendCache()

    first = fetch_trend_enrichment(supabase_source, cache)
    second = fetch_trend_enrichment(supabase_source, cache)
    assert first is second
    assert len(session.calls) == 1


def test_default_cache_can_be_cleared(supabase_source, snapshot_row):
    session = FakeSession(FakeResponse([snapshot_row]))
    supabase_source._session = session
    clear_trend_cache()

    fetch_trend_enrichment(supabase_source)
    clear_trend_cache()
    fetch_trend_enrichment(supabase_source)
    assert len(session.calls) == 2
    clear_trend_cache()


def test_no_source_means_no_enrichment():
    assert fetch_trend_enrichment(None) is None


def test_create_source_from_settings(tmp_path, monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)

    assert create_source_from_settings(TrendsConfig()) is None
    assert create_source_from_settings(TrendsConfig(source="supabase")) is None
    assert create_source_from_settings(TrendsConfig(source="file")) is None

    file_source = create_source_from_settings(TrendsConfig(source="file", file_path=str(tmp_path / "t.json")))
    assert isinstance(file_source, FileTrendSource)

    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "env-key")
    source = create_source_from_settings(TrendsConfig(source="supabase", table="snapshots", stale_hours=6))
    assert isinstance(source, SupabaseTrendSource)
    assert source.endpoint == "https://env.supabase.co/rest/v1/snapshots"
    assert source.stale_after.total_seconds() == 6 * 3600


@pytest.mark.parametrize(
    "snapshot",
    [
        "generated_at: '2025-12-31T12:00:00Z'\ntrending_keywords: [agent, flow]\n",
        "generated_at: '2025-12-31T12:00:00Z'\nhot_niches:\n  - {niche: fintech, heat: null}\n",
        "generated_at: '2025-12-31T12:00:00Z'\nhot_niches: [fintech]\n",
    ],
)
def test_malformed_snapshot_degrades_to_none(tmp_path, caplog, snapshot):
    path = tmp_path / "trends.yaml"
    path.write_text(snapshot, encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="domain_scoring.trends.source"):
        assert fetch_trend_enrichment(FileTrendSource(path), cache=TrendCache()) is None
    assert "Trend enrichment unavailable" in caplog.text
