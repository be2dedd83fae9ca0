"""Anchor quick valuations to comparable sales.

Relevance of a sale to the target domain is weighted as:
    TLD match          40%
    Length similarity  25%
    Keyword overlap    25%
    Recency            10%
End-user sales get a small extra weight.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

import yaml

from domain_scoring.domain import parse_domain
from domain_scoring.scoring.segmentation import meaningful_words, split_into_words
from domain_scoring.trends.models import parse_timestamp
from domain_scoring.util import clamp, round_half_up
from domain_scoring.valuation.models import (
    AnchoredValuation,
    ComparableSale,
    QuickValuationResult,
    format_band,
)

logger = logging.getLogger(__name__)

MIN_RELEVANCE = 0.3
MAX_COMPS = 15
MIN_COMPS = 3
ALGO_WEIGHT = 0.6
COMP_WEIGHT = 0.4
MIN_ADJUSTMENT = 0.5
MAX_ADJUSTMENT = 3.0
# Sales older than this no longer count as recent
RECENCY_YEARS = 6
END_USER_BONUS = 0.05
DAYS_PER_YEAR = 365.25


def extract_keywords(domain: str) -> list[str]:
    """Known words in the name part of a domain."""
    return meaningful_words(split_into_words(parse_domain(domain).name))


def score_relevance(
    sale: ComparableSale,
    tld: str,
    name_length: int,
    keywords: list[str],
    now: datetime,
) -> float:
    """How closely a sale resembles the target domain, roughly 0-1.05."""
    comp = parse_domain(sale.domain_name)
    comp_name = comp.name
    comp_tld = (sale.tld or sale.domain_name.rsplit(".", 1)[-1]).lower().lstrip(".")

    tld_score = 1.0 if comp_tld == tld.lower() else 0.0
    length_score = max(0.0, 1 - abs(len(comp_name) - name_length) / 10)

    keyword_score = 0.0
    if keywords:
        comp_keywords = extract_keywords(sale.domain_name)
        overlap = sum(1 for kw in keywords if kw in comp_keywords)
        keyword_score = overlap / len(keywords)
        if keyword_score == 0 and any(kw in comp_name or comp_name in kw for kw in keywords):
            keyword_score = 0.3

    recency_score = 0.5
    if sale.sale_date:
        try:
            age_days = (now - parse_timestamp(sale.sale_date)).total_seconds() / 86400
        except ValueError:
            logger.debug("Ignoring unparseable sale date %r for %s", sale.sale_date, sale.domain_name)
        else:
            recency_score = max(0.0, 1 - age_days / DAYS_PER_YEAR / RECENCY_YEARS)

    venue_bonus = END_USER_BONUS if (sale.venue or "").lower() == "end-user" else 0.0

    return tld_score * 0.4 + length_score * 0.25 + keyword_score * 0.25 + recency_score * 0.1 + venue_bonus


def weighted_median(prices_and_weights: list[tuple[float, float]]) -> float:
    """Price at which the cumulative relevance weight first reaches half."""
    total = sum(w for _, w in prices_and_weights)
    ordered = sorted(prices_and_weights, key=lambda pw: pw[0])
    cumulative = 0.0
    for price, weight in ordered:
        cumulative += weight / total
        if cumulative >= 0.5:
            return price
    return ordered[0][0]


def _unanchored(base: QuickValuationResult) -> AnchoredValuation:
    return AnchoredValuation(
        band=base.band,
        score=base.score,
        value_min=base.value_min,
        value_max=base.value_max,
    )


def anchor_with_comps(
    domain: str,
    base: QuickValuationResult,
    sales: Iterable[ComparableSale],
    now: datetime | None = None,
) -> AnchoredValuation:
    """Pull a valuation band toward comparable sales.

    The 15 most relevant sales with relevance of at least 0.3 are kept.
    With fewer than three the base valuation is returned unchanged.
    Otherwise the band midpoint is blended 60/40 with the
    relevance-weighted median sale price, the adjustment is kept within
    0.5x-3x, and the band is tightened to 3x (5x above $100,000).

    Args:
        domain: Domain being valued
        base: Quick valuation of the domain
        sales: Candidate comparable sales
        now: Reference time for recency, defaults to the current time

    Returns:
        AnchoredValuation, with comp_anchored False when not anchored
    """
    now = now or datetime.now(timezone.utc)
    parsed = parse_domain(domain)
    keywords = extract_keywords(domain)

    scored = [
        (sale, score_relevance(sale, parsed.tld, len(parsed.name), keywords, now))
        for sale in sales
    ]
    relevant = sorted(
        ((sale, relevance) for sale, relevance in scored if relevance >= MIN_RELEVANCE),
        key=lambda sr: sr[1],
        reverse=True,
    )[:MAX_COMPS]

    if len(relevant) < MIN_COMPS:
        logger.debug("Only %d relevant comps for %s, not anchoring", len(relevant), domain)
        return _unanchored(base)

    median = weighted_median([(sale.sale_price, relevance) for sale, relevance in relevant])

    algo_mid = (base.value_min + base.value_max) / 2
    if algo_mid <= 0:
        return _unanchored(base)
    adjustment = clamp((algo_mid * ALGO_WEIGHT + median * COMP_WEIGHT) / algo_mid, MIN_ADJUSTMENT, MAX_ADJUSTMENT)

    value_min = round_half_up(base.value_min * adjustment)
    value_max = round_half_up(base.value_max * adjustment)
    spread = 5 if value_min >= 100_000 else 3
    if value_max > value_min * spread:
        value_max = value_min * spread

    return AnchoredValuation(
        band=format_band(value_min, value_max),
        score=base.score,
        value_min=value_min,
        value_max=value_max,
        comp_anchored=True,
        comp_median=round_half_up(median),
        comp_count=len(relevant),
        anchor_adjustment=round_half_up(adjustment * 100) / 100,
    )


def load_comparable_sales(path: Path | str) -> list[ComparableSale]:
    """Load comparable sales from a YAML or JSON file.

    The file holds a list of records, or a mapping with a ``sales`` list.
    Each record needs ``domain_name`` and ``sale_price``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not contain a list of sales or a
            record is malformed
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("sales")
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a list of comparable sales")

    return [ComparableSale.from_dict(record) for record in data]
