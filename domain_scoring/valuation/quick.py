"""Quick heuristic valuation for bulk analysis.

Scores a domain on six capped point buckets plus an optional
pronounceability bonus, normalizes to 0-100 and maps the result onto a
fixed table of dollar tiers. Trending, synergy, niche and dictionary
adjustments then move the band.
"""

import re

from domain_scoring.domain import parse_domain
from domain_scoring.lexicon import (
    DICTIONARY_WORDS,
    FALLBACK_TLD_POINTS,
    PREMIUM_KEYWORDS,
    PREMIUM_TLDS,
    is_dictionary_word,
)
from domain_scoring.scoring.keyword_demand import has_penalty_keyword
from domain_scoring.scoring.niche import detect_niche
from domain_scoring.scoring.segmentation import is_fully_covered, meaningful_words, split_into_words
from domain_scoring.trademark import TrademarkRiskChecker, check_trademark_risk
from domain_scoring.util import round_half_up
from domain_scoring.valuation.models import QuickValuationResult, ValueTier, format_band
from domain_scoring.valuation.signals import get_semantic_synergy_bonus, get_trending_multiplier

# Sum of all bucket maxima, used to normalize to 0-100
MAX_RAW_SCORE = 115
TRADEMARK_HIGH_CAP = 15
TRADEMARK_MEDIUM_FACTOR = 0.6
MAX_BAND_SPREAD = 3

# Highest floor first, the last tier catches everything
VALUE_TIERS: tuple[ValueTier, ...] = (
    ValueTier(92, 75_000, 250_000),
    ValueTier(85, 25_000, 100_000),
    ValueTier(78, 8_000, 35_000),
    ValueTier(70, 2_500, 12_000),
    ValueTier(62, 800, 4_000),
    ValueTier(55, 200, 1_200),
    ValueTier(45, 50, 400),
    ValueTier(35, 15, 100),
    ValueTier(0, 5, 50),
)
LOWEST_TIER = VALUE_TIERS[-1]

# (max name length, floor min, floor max) for single dictionary words on .com
DICTIONARY_COM_FLOORS: tuple[tuple[int, int, int], ...] = (
    (3, 200_000, 500_000),
    (4, 100_000, 400_000),
    (5, 50_000, 250_000),
    (6, 25_000, 150_000),
    (8, 12_000, 50_000),
)
DICTIONARY_COM_FLOOR_LONG = (8_000, 30_000)

# Premium TLD points needed for the two-word floor outside .com
ALT_TLD_MIN_POINTS = 10
ALT_TLD_FACTORS: dict[str, float] = {"ai": 0.6, "io": 0.4}
ALT_TLD_DEFAULT_FACTOR = 0.3

_CONSONANT_RUN = re.compile(r"[bcdfghjklmnpqrstvwxz]{4,}")


def value_tier(score: int) -> ValueTier:
    """Dollar tier for a normalized score."""
    for tier in VALUE_TIERS:
        if score >= tier.floor:
            return tier
    return LOWEST_TIER


def _length_points(n: int) -> int:
    if n <= 2:
        return 20
    if n <= 6:
        return {3: 18, 4: 16, 5: 14, 6: 12}[n]
    if n <= 8:
        return 10
    if n <= 10:
        return 6
    if n <= 14:
        return 3
    return 1


class _WordProfile:
    """Word facts used by several buckets."""

    def __init__(self, name: str):
        parts = split_into_words(name)
        self.words = meaningful_words(parts)
        self.junk = sum(1 for p in parts if len(p) == 1)
        self.premium = [w for w in self.words if w in PREMIUM_KEYWORDS]
        self.is_dictionary = is_dictionary_word(name)
        self.all_meaningful = bool(self.words) and self.junk == 0 and is_fully_covered(name, self.words)


def _word_quality_points(name: str, p: _WordProfile) -> int:
    has_premium = bool(p.premium)
    if p.is_dictionary:
        return 25
    if p.all_meaningful and len(p.words) >= 2:
        return 22 if has_premium else 18
    if len(p.words) >= 2 and p.junk <= 1:
        return 18 if has_premium else 14
    if len(p.words) == 1 and p.junk == 0 and len(name) <= 8:
        return 16 if has_premium else 12
    if p.words:
        return 6 + min(4, len(p.premium) * 2)
    return 2


def _brandability_points(name: str, p: _WordProfile) -> int:
    vowels = sum(1 for c in name if c in "aeiouy")
    ratio = vowels / len(name) if name else 0.0
    pronounceable = 0.25 <= ratio <= 0.6 and not _CONSONANT_RUN.search(name)

    if p.is_dictionary and len(name) <= 8:
        return 15
    if pronounceable and p.words and p.junk <= 1 and len(name) <= 8:
        return 15
    if pronounceable and p.words:
        return 11
    if pronounceable:
        return 7
    return 3


def _character_mix_points(name: str, label: str) -> int:
    if re.fullmatch(r"[a-z]+", name):
        return 10
    if re.fullmatch(r"\d+", name) and len(name) <= 4:
        return 7
    if re.search(r"[-_]", label):
        return 2
    if re.search(r"\d", name):
        return 4
    return 5


def _trending_points(multiplier: float, trends: list[str], is_dictionary: bool) -> int:
    if len(trends) >= 2:
        return 15
    if len(trends) == 1:
        return min(15, round_half_up((multiplier - 1) * 15))
    if is_dictionary:
        return 8
    return 2


def _scale(value_min: int, value_max: int, factor: float) -> tuple[int, int]:
    return round_half_up(value_min * factor), round_half_up(value_max * factor)


def _dictionary_com_floor(n: int) -> tuple[int, int]:
    for max_length, floor_min, floor_max in DICTIONARY_COM_FLOORS:
        if n <= max_length:
            return floor_min, floor_max
    return DICTIONARY_COM_FLOOR_LONG


def _two_word_com_floor(p: _WordProfile, has_trending: bool) -> tuple[int, int]:
    both_dictionary = all(w in DICTIONARY_WORDS for w in p.words)
    has_premium = bool(p.premium)
    both_short = all(len(w) <= 6 for w in p.words)

    if both_dictionary and has_premium and has_trending:
        return 25_000, 100_000
    if both_dictionary and (has_premium or has_trending):
        return 15_000, 75_000
    if both_dictionary and both_short:
        return 10_000, 50_000
    if both_dictionary:
        return 8_000, 35_000
    if has_premium:
        return 5_000, 25_000
    return 2_000, 10_000


def _two_word_alt_tld_floor(p: _WordProfile, tld: str) -> tuple[int, int]:
    both_dictionary = all(w in DICTIONARY_WORDS for w in p.words)
    has_premium = bool(p.premium)
    factor = ALT_TLD_FACTORS.get(tld, ALT_TLD_DEFAULT_FACTOR)

    if both_dictionary and has_premium:
        base = (10_000, 50_000)
    elif both_dictionary:
        base = (5_000, 25_000)
    elif has_premium:
        base = (3_000, 15_000)
    else:
        base = (1_000, 5_000)
    return _scale(base[0], base[1], factor)


def quick_valuation(
    domain: str,
    pronounce_score: int | None = None,
    checker: TrademarkRiskChecker | None = None,
) -> QuickValuationResult:
    """Estimate a dollar band for a domain.

    Args:
        domain: Domain with or without TLD
        pronounce_score: Optional pronounceability score (0-100) adding
            up to 5 raw points
        checker: Trademark checker deciding the risk caps, defaults to the
            built-in brand list

    Returns:
        QuickValuationResult whose max is at most three times its min
    """
    parsed = parse_domain(domain)
    name = parsed.name
    tld = parsed.tld

    trademark = checker.check(domain) if checker else check_trademark_risk(domain)
    profile = _WordProfile(name)
    penalized = has_penalty_keyword(name)
    multiplier, trends = get_trending_multiplier(profile.words)

    score = _length_points(len(name))
    score += PREMIUM_TLDS.get(tld, FALLBACK_TLD_POINTS)
    score += 1 if penalized else _word_quality_points(name, profile)
    score += 1 if penalized else _brandability_points(name, profile)
    score += _character_mix_points(name, parsed.label)
    score += 0 if penalized else _trending_points(multiplier, trends, profile.is_dictionary)
    if pronounce_score is not None:
        score += round_half_up(pronounce_score * 0.05)

    if trademark.risk_level == "high":
        score = min(score, TRADEMARK_HIGH_CAP)
    elif trademark.risk_level == "medium":
        score = round_half_up(score * TRADEMARK_MEDIUM_FACTOR)

    normalized = min(100, round_half_up(score / MAX_RAW_SCORE * 100))

    blocked = penalized or trademark.risk_level == "high"
    tier = LOWEST_TIER if blocked else value_tier(normalized)
    value_min, value_max = tier.value_min, tier.value_max

    if not blocked:
        if multiplier > 1.0:
            value_min, value_max = _scale(value_min, value_max, multiplier)

        if len(profile.words) == 2:
            synergy, _ = get_semantic_synergy_bonus(profile.words)
            if synergy > 1.0:
                value_min, value_max = _scale(value_min, value_max, synergy)

        niche = detect_niche(profile.words, tld)
        if niche.multiplier > 1.0 and niche.confidence != "Low":
            value_min, value_max = _scale(value_min, value_max, 1 + (niche.multiplier - 1) * 0.5)

        floor: tuple[int, int] | None = None
        if profile.is_dictionary and tld == "com":
            floor = _dictionary_com_floor(len(name))
        elif not profile.is_dictionary and profile.all_meaningful and len(profile.words) == 2:
            if tld == "com":
                floor = _two_word_com_floor(profile, has_trending=bool(trends))
            elif PREMIUM_TLDS.get(tld, 0) >= ALT_TLD_MIN_POINTS:
                floor = _two_word_alt_tld_floor(profile, tld)
        if floor is not None:
            value_min = max(value_min, floor[0])
            value_max = max(value_max, floor[1])

    if value_max > value_min * MAX_BAND_SPREAD:
        value_max = value_min * MAX_BAND_SPREAD

    return QuickValuationResult(
        band=format_band(value_min, value_max),
        score=normalized,
        value_min=value_min,
        value_max=value_max,
    )
