"""Domain scoring and valuation engine.

Turns a bare domain string into brandability, pronounceability, keyword
demand, trademark risk and dollar valuation signals.

Usage:
    from domain_scoring import analyze_domain

    report = analyze_domain("cloudbank.com")
    print(report.brandability.overall, report.valuation.band)
"""

from domain_scoring.domain import DomainName, parse_domain
from domain_scoring.report import DomainReport, analyze_domain
from domain_scoring.scoring import (
    compute_trend_boost,
    score_brandability,
    score_keyword_demand,
    score_pronounceability,
    split_into_words,
)
from domain_scoring.similarity import get_categories, semantic_similarity
from domain_scoring.trademark import check_trademark_risk
from domain_scoring.trends import TrendCache, TrendEnrichment, clear_trend_cache, fetch_trend_enrichment
from domain_scoring.valuation import anchor_with_comps, quick_valuation

__version__ = "0.1.0"

__all__ = [
    "DomainName",
    "DomainReport",
    "TrendCache",
    "TrendEnrichment",
    "analyze_domain",
    "anchor_with_comps",
    "check_trademark_risk",
    "clear_trend_cache",
    "compute_trend_boost",
    "fetch_trend_enrichment",
    "get_categories",
    "parse_domain",
    "quick_valuation",
    "score_brandability",
    "score_keyword_demand",
    "score_pronounceability",
    "semantic_similarity",
    "split_into_words",
]
