from __future__ import annotations

from domain_scoring import analyze_domain
from domain_scoring.trademark import create_checker_from_settings


def test_analyze_domain_combines_scores():
    report = analyze_domain("  cloudbank.com ")
    assert report.domain == "cloudbank.com"
    assert 0 <= report.brandability.overall <= 100
    assert report.pronounceability.word_count == 2
    assert report.demand.niche.niche != "general"
    assert report.trademark.risk_level == "none"
    assert report.valuation.value_min >= 10_000


def test_analyze_domain_with_enrichment(make_enrichment):
    plain = analyze_domain("cashflow.com")
    enriched = analyze_domain("cashflow.com", make_enrichment({"flow": 2.1}))
    assert enriched.demand.score == plain.demand.score + 10
    assert enriched.demand.enriched
    assert enriched.brandability.overall == plain.brandability.overall


def test_analyze_domain_with_custom_checker():
    checker = create_checker_from_settings(["zentrova"])
    report = analyze_domain("zentrova.com", checker=checker)
    assert report.trademark.risk_level == "high"
    assert report.brandability.trademark_risk == "high"
    assert report.brandability.get_dimension("Trademark Safety").score == 5
    assert report.valuation.band == "$5 – $15"
    assert analyze_domain("zentrova.com").trademark.risk_level != "high"


def test_report_to_dict():
    data = analyze_domain("rocket.com").to_dict()
    assert data["domain"] == "rocket.com"
    assert set(data) == {"domain", "brandability", "pronounceability", "demand", "trademark", "valuation", "trend"}
    assert data["pronounceability"]["grade"] == "Excellent"


def test_crypto_ai_end_to_end():
    report = analyze_domain("crypto.ai")
    assert report.trademark.risk_level == "none"
    assert report.demand.niche.niche == "ai_tech"
    assert report.valuation.band == "$1,020 – $3,060"
    assert report.valuation.value_max <= report.valuation.value_min * 3
    assert 0 <= report.brandability.overall <= 100
    assert report.trend.niche.niche == "ai_tech"
    assert report.trend.score >= 30


def test_report_ignores_case_and_www():
    plain = analyze_domain("cloudbank.com").to_dict()
    shouted = analyze_domain("WWW.CloudBank.COM").to_dict()
    for key in ("pronounceability", "demand", "valuation", "trend"):
        assert shouted[key] == plain[key]
    assert shouted["brandability"]["overall"] == plain["brandability"]["overall"]
    assert shouted["trademark"]["risk_level"] == plain["trademark"]["risk_level"]


def test_trend_uses_segmented_words():
    report = analyze_domain("cloudbank.com")
    assert report.trend.score == 52
    assert report.trend.label == "⬆️ Rising"
