"""Keyword demand scoring.

Scores a domain 1-100 from keyword heat, niche demand and TLD demand.
Optional AI trend data adjusts the heuristic score through a bounded boost.
"""

from domain_scoring.domain import parse_domain
from domain_scoring.lexicon import (
    FALLBACK_TLD_DEMAND,
    NICHE_CATEGORIES,
    NICHE_HEAT_POINTS,
    PENALTY_KEYWORDS,
    PREMIUM_KEYWORDS,
    TLD_DEMAND_POINTS,
    TLD_NICHE_SYNERGY,
    is_dictionary_word,
    trending_multiplier,
)
from domain_scoring.scoring.models import DemandGrade, KeywordDemandResult, NicheDetection, ScoreFactor
from domain_scoring.scoring.niche import detect_niche
from domain_scoring.scoring.segmentation import split_into_words
from domain_scoring.scoring.trend_boost import compute_trend_boost
from domain_scoring.trends.models import TrendEnrichment
from domain_scoring.util import clamp, round_half_up

MAX_TLD_POINTS = 15
TLD_SYNERGY_POINTS = 5

# Static heat multiplier -> heat score, scaled by 0.4 into points
HEAT_TIERS: tuple[tuple[float, int], ...] = (
    (2.2, 100),
    (2.0, 90),
    (1.8, 80),
    (1.6, 65),
    (1.5, 55),
    (1.4, 45),
    (1.3, 35),
)
BASE_HEAT_SCORE = 20

# Lower score bound -> (label, grade)
DEMAND_TIERS: tuple[tuple[int, str, DemandGrade], ...] = (
    (85, "🔥 Surging", "A"),
    (70, "📈 High Demand", "A"),
    (55, "⬆️ Growing", "B"),
    (40, "➡️ Moderate", "C"),
    (25, "↘️ Low", "D"),
    (0, "⬇️ Minimal", "F"),
)

PENALTY_NICHE = NicheDetection(niche="general", label="General", multiplier=1.0, confidence="Low")


def keyword_heat_score(multiplier: float) -> int:
    """Map a heat multiplier onto a 0-100 heat score."""
    for threshold, score in HEAT_TIERS:
        if multiplier >= threshold:
            return score
    return BASE_HEAT_SCORE


def has_penalty_keyword(name: str) -> bool:
    """Check if a cleaned name contains any penalty keyword."""
    return any(keyword in name for keyword in PENALTY_KEYWORDS)


def demand_tier(score: int) -> tuple[str, DemandGrade]:
    """Label and grade for a demand score."""
    for floor, label, grade in DEMAND_TIERS:
        if score >= floor:
            return label, grade
    return DEMAND_TIERS[-1][1], DEMAND_TIERS[-1][2]


def _penalty_result() -> KeywordDemandResult:
    return KeywordDemandResult(
        score=1,
        label="⛔ Toxic",
        grade="F",
        trending_keywords=[],
        niche=PENALTY_NICHE,
        factors=[ScoreFactor(
            "Penalty Content", -99, "Contains risky/blacklisted keywords, zero demand signal"
        )],
        enriched=False,
    )


def _keyword_factor(words: list[str], trending: list[str]) -> ScoreFactor:
    best_heat = max((trending_multiplier(w) for w in trending), default=0.0)
    if best_heat > 0:
        points = round_half_up(keyword_heat_score(best_heat) * 0.4)
        return ScoreFactor(
            "Keyword Heat", points,
            f"Best keyword multiplier: {best_heat:.1f}x, {', '.join(trending)}",
        )

    premium = [w for w in words if w in PREMIUM_KEYWORDS]
    if premium:
        return ScoreFactor("Premium Keywords", min(20, len(premium) * 8), f"Industry keywords: {', '.join(premium)}")
    return ScoreFactor("Keyword Heat", 0, "No trending or premium keywords detected")


def _combo_factor(trending: list[str]) -> ScoreFactor | None:
    if len(trending) >= 3:
        return ScoreFactor("Keyword Combo", 15, f"Triple trending combo: {' + '.join(trending)}")
    if len(trending) == 2:
        return ScoreFactor("Keyword Combo", 10, f"Dual trending combo: {' + '.join(trending)}")
    return None


def _niche_factor(niche: NicheDetection) -> ScoreFactor:
    if niche.niche == "general":
        return ScoreFactor("Niche Demand", 0, "No specific niche detected")
    category = NICHE_CATEGORIES.get(niche.niche)
    heat = category.heat if category else "stable"
    return ScoreFactor(
        "Niche Demand", NICHE_HEAT_POINTS[heat],
        f"{niche.label}, {heat} market ({niche.confidence} confidence)",
    )


def _tld_factor(tld: str, niche: NicheDetection) -> ScoreFactor:
    points = TLD_DEMAND_POINTS.get(tld, FALLBACK_TLD_DEMAND)
    if niche.niche in TLD_NICHE_SYNERGY.get(tld, ()):
        points = min(MAX_TLD_POINTS, points + TLD_SYNERGY_POINTS)
        return ScoreFactor(
            "TLD Demand", points, f".{tld} perfectly matches {niche.label} niche, premium TLD synergy"
        )
    level = "high" if points >= 10 else "moderate" if points >= 5 else "low"
    return ScoreFactor("TLD Demand", points, f".{tld}, {level} aftermarket demand")


def score_keyword_demand(domain: str, enrichment: TrendEnrichment | None = None) -> KeywordDemandResult:
    """Score aftermarket keyword demand for a domain.

    Factors are produced in a fixed order: keyword heat (or premium
    keywords), keyword combo, niche demand, TLD demand, dictionary word,
    then any trend boost factors. A penalty keyword anywhere in the name
    short-circuits to a score of 1.

    Args:
        domain: Domain with or without TLD
        enrichment: Optional AI trend snapshot

    Returns:
        KeywordDemandResult with score clamped to 1-100
    """
    parsed = parse_domain(domain)
    name = parsed.name
    tld = parsed.tld

    if has_penalty_keyword(name):
        return _penalty_result()

    words = [w for w in split_into_words(name) if len(w) >= 2]
    trending = [w for w in words if trending_multiplier(w)]
    niche = detect_niche(words, tld)

    factors = [_keyword_factor(words, trending)]
    combo = _combo_factor(trending)
    if combo is not None:
        factors.append(combo)
    factors.append(_niche_factor(niche))
    factors.append(_tld_factor(tld, niche))

    if is_dictionary_word(name):
        factors.append(ScoreFactor(
            "Dictionary Word", 10 if len(name) <= 6 else 7,
            f'"{name}" is a real English word, evergreen demand',
        ))

    raw_score = sum(f.points for f in factors)

    boost, boost_factors = compute_trend_boost(words, niche.niche, enrichment)
    if boost != 0:
        raw_score += boost
        factors.extend(boost_factors)

    score = int(clamp(raw_score, 1, 100))
    label, grade = demand_tier(score)
    return KeywordDemandResult(
        score=score,
        label=label,
        grade=grade,
        trending_keywords=trending,
        niche=niche,
        factors=factors,
        enriched=enrichment is not None and boost != 0,
    )
