"""Combined analysis of a single domain."""

from dataclasses import dataclass
from typing import Any

from domain_scoring.domain import parse_domain
from domain_scoring.scoring import (
    BrandabilityResult,
    KeywordDemandResult,
    PronounceabilityResult,
    TrendScore,
    compute_trend_score,
    score_brandability,
    score_keyword_demand,
    score_pronounceability,
)
from domain_scoring.scoring.segmentation import meaningful_words, split_into_words
from domain_scoring.trademark import TrademarkResult, TrademarkRiskChecker, check_trademark_risk
from domain_scoring.trends import TrendEnrichment
from domain_scoring.valuation import QuickValuationResult, quick_valuation


@dataclass
class DomainReport:
    """All scores for one domain."""

    domain: str
    brandability: BrandabilityResult
    pronounceability: PronounceabilityResult
    demand: KeywordDemandResult
    trademark: TrademarkResult
    valuation: QuickValuationResult
    trend: TrendScore

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "domain": self.domain,
            "brandability": self.brandability.to_dict(),
            "pronounceability": {
                "score": self.pronounceability.score,
                "grade": self.pronounceability.grade,
                "word_count": self.pronounceability.word_count,
            },
            "demand": self.demand.to_dict(),
            "trademark": self.trademark.to_dict(),
            "valuation": self.valuation.to_dict(),
            "trend": {
                "score": self.trend.score,
                "label": self.trend.label,
                "niche": self.trend.niche.niche,
            },
        }


def analyze_domain(
    domain: str,
    enrichment: TrendEnrichment | None = None,
    checker: TrademarkRiskChecker | None = None,
) -> DomainReport:
    """Run every scorer on a domain.

    Args:
        domain: Domain with or without TLD
        enrichment: Optional trend snapshot for the demand score
        checker: Trademark checker used by every trademark-aware score,
            defaults to the built-in brand list

    Returns:
        DomainReport
    """
    domain = domain.strip()
    parsed = parse_domain(domain)
    pronounceability = score_pronounceability(domain)
    return DomainReport(
        domain=domain,
        brandability=score_brandability(domain, checker),
        pronounceability=pronounceability,
        demand=score_keyword_demand(domain, enrichment),
        trademark=checker.check(domain) if checker else check_trademark_risk(domain),
        valuation=quick_valuation(domain, pronounce_score=pronounceability.score, checker=checker),
        trend=compute_trend_score(meaningful_words(split_into_words(parsed.name)), parsed.tld),
    )
