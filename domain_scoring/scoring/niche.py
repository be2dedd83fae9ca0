"""Niche detection and trend scoring."""

from domain_scoring.lexicon import NICHE_CATEGORIES, TREND_TLD_NICHE_SYNERGY, trending_multiplier
from domain_scoring.scoring.models import Confidence, NicheDetection, TrendScore
from domain_scoring.util import clamp, round_half_up

GENERAL_NICHE = NicheDetection(
    niche="general",
    label="General / Brandable",
    multiplier=1.0,
    confidence="Low",
)

# TLD -> niche -> extra match weight
TLD_NICHE_BOOSTS: dict[str, dict[str, float]] = {
    "ai": {"ai_tech": 1.5},
    "io": {"saas": 0.5, "ai_tech": 0.5},
    "finance": {"fintech": 1.0},
    "bio": {"biotech": 1.5},
    "health": {"health": 1.0},
    "law": {"legal": 1.0},
    "insurance": {"insurance": 1.0},
    "auto": {"automotive": 1.0},
    "pet": {"pet": 1.0},
    "beauty": {"beauty": 1.0},
    "food": {"food": 1.0},
    "space": {"space": 1.0},
    "game": {"gaming": 1.0},
    "dev": {"saas": 0.5, "ai_tech": 0.5},
    "app": {"saas": 0.5, "ecommerce": 0.5},
}

# Trend score TLD bonuses
TREND_TLD_SYNERGY_BONUS = 15
TREND_COM_BONUS = 8
TREND_SOLID_TLD_BONUS = 5
TREND_SOLID_TLDS = frozenset({"co", "app", "dev", "net", "io"})


def _confidence(score: float) -> Confidence:
    if score >= 3:
        return "High"
    if score >= 1.5:
        return "Medium"
    return "Low"


def detect_niche(words: list[str], tld: str) -> NicheDetection:
    """Find the niche whose keywords best match the words.

    Each niche scores one point per matching word plus a TLD boost. The
    first niche to reach the highest score wins.

    Args:
        words: Segmented words of the name
        tld: TLD without the dot

    Returns:
        NicheDetection, the general niche when nothing scores
    """
    best_key = ""
    best_score = 0.0
    best_matches: tuple[str, ...] = ()
    boosts = TLD_NICHE_BOOSTS.get(tld, {})

    for key, niche in NICHE_CATEGORIES.items():
        matches = tuple(w for w in words if w in niche.keywords)
        score = len(matches) + boosts.get(key, 0.0)
        if score > best_score:
            best_key, best_score, best_matches = key, score, matches

    if not best_key:
        return GENERAL_NICHE

    niche = NICHE_CATEGORIES[best_key]
    return NicheDetection(
        niche=best_key,
        label=niche.label,
        multiplier=niche.multiplier,
        confidence=_confidence(best_score),
        matched_keywords=best_matches,
    )


def trend_label(score: int) -> str:
    if score >= 85:
        return "🔥 On Fire"
    if score >= 70:
        return "📈 Hot"
    if score >= 50:
        return "⬆️ Rising"
    if score >= 30:
        return "➡️ Stable"
    return "⬇️ Cool"


def compute_trend_score(words: list[str], tld: str, niche_override: str | None = None) -> TrendScore:
    """Score keyword heat and niche alignment, 0-100.

    Args:
        words: Segmented words of the name
        tld: TLD without the dot
        niche_override: Niche key to use instead of the detected one

    Returns:
        TrendScore with score, label and niche
    """
    niche = detect_niche(words, tld)
    if niche_override:
        category = NICHE_CATEGORIES.get(niche_override)
        niche = NicheDetection(
            niche=niche_override,
            label=category.label if category else "General",
            multiplier=category.multiplier if category else 1.0,
            confidence=niche.confidence,
            matched_keywords=niche.matched_keywords,
        )

    heats = [h for h in (trending_multiplier(w) for w in words) if h]
    score = 0
    if heats:
        score += min(50, round_half_up((max(heats) - 1.0) * 33))
    if len(heats) >= 2:
        score += 10

    if niche.confidence == "High":
        score += 25
    elif niche.confidence == "Medium":
        score += 15
    elif niche.matched_keywords:
        score += 8

    if niche.niche in TREND_TLD_NICHE_SYNERGY.get(tld, ()):
        score += TREND_TLD_SYNERGY_BONUS
    elif tld == "com":
        score += TREND_COM_BONUS
    elif tld in TREND_SOLID_TLDS:
        score += TREND_SOLID_TLD_BONUS

    score = int(clamp(score, 0, 100))
    return TrendScore(score=score, label=trend_label(score), niche=niche)
