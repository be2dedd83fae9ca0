"""Trend boost applied on top of the keyword demand score.

The heuristic demand score stays the primary signal. Trend data only
nudges it, by at most -10 or +15 points.
"""

from domain_scoring.lexicon import TRENDING_KEYWORDS
from domain_scoring.scoring.models import ScoreFactor
from domain_scoring.trends.models import TrendEnrichment
from domain_scoring.util import clamp, round_half_up

MIN_BOOST = -10
MAX_BOOST = 15

# Highest matching AI heat -> (points, wording)
AI_HEAT_TIERS: tuple[tuple[float, int, str], ...] = (
    (2.0, 8, "surging"),
    (1.5, 5, "growing"),
    (1.2, 2, "moderate"),
)
DISCOVERY_HEAT = 1.5
DISCOVERY_POINTS_PER_WORD = 2
MAX_DISCOVERY_POINTS = 5


def _niche_momentum(niche_key: str, enrichment: TrendEnrichment) -> ScoreFactor | None:
    if niche_key == "general":
        return None
    niche = enrichment.find_niche(niche_key)
    if niche is None:
        return None
    if niche.heat >= 80:
        return ScoreFactor("Niche Momentum", 4, f"{niche.label} niche at {niche.heat:g}/100 heat")
    if niche.heat >= 60:
        return ScoreFactor("Niche Momentum", 2, f"{niche.label} niche at {niche.heat:g}/100 heat")
    if niche.heat < 30:
        return ScoreFactor("Cooling Niche", -3, f"{niche.label} niche cooling ({niche.heat:g}/100)")
    return None


def compute_trend_boost(
    words: list[str],
    niche_key: str,
    enrichment: TrendEnrichment | None,
) -> tuple[int, list[ScoreFactor]]:
    """Compute a signed boost from AI trend data.

    Args:
        words: Meaningful words of the name
        niche_key: Detected niche key, ``general`` when none
        enrichment: Trend snapshot, or None when unavailable

    Returns:
        Tuple of (boost in [-10, 15], explanatory factors). Without
        enrichment the boost is 0 with no factors.
    """
    if enrichment is None:
        return 0, []

    factors: list[ScoreFactor] = []
    raw = 0

    best_heat = max((h for h in map(enrichment.heat, words) if h > 1.0), default=0.0)
    for threshold, points, wording in AI_HEAT_TIERS:
        if best_heat >= threshold:
            raw += points
            factors.append(ScoreFactor(
                "AI Trend Signal", points, f"AI detected {wording} demand ({best_heat:.1f}x heat)"
            ))
            break

    # Words the feed rates hot that the static table does not know yet
    discovered = [
        w for w in words
        if enrichment.heat(w) >= DISCOVERY_HEAT and w not in TRENDING_KEYWORDS
    ]
    if discovered:
        points = min(MAX_DISCOVERY_POINTS, len(discovered) * DISCOVERY_POINTS_PER_WORD)
        raw += points
        factors.append(ScoreFactor(
            "Emerging Trend", points, f"AI-discovered trending terms: {', '.join(discovered[:3])}"
        ))

    momentum = _niche_momentum(niche_key, enrichment)
    if momentum is not None:
        raw += momentum.points
        factors.append(momentum)

    if enrichment.stale and raw > 0:
        halved = round_half_up(raw / 2)
        factors.append(ScoreFactor("Stale Data", halved - raw, "Trend data >24h old, boost halved"))
        raw = halved

    return int(clamp(raw, MIN_BOOST, MAX_BOOST)), factors
