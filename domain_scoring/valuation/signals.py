"""Value multipliers derived from the words of a name."""

from domain_scoring.lexicon import NICHE_CATEGORIES, SEMANTIC_SYNERGY_PAIRS, trending_multiplier

SYNERGY_PAIR_BONUS = 1.4
SAME_NICHE_BONUS = 1.25
MULTI_TREND_FACTOR = 1.3


def get_semantic_synergy_bonus(words: list[str]) -> tuple[float, str]:
    """Bonus for two-word compounds whose words belong together.

    A curated pair such as ``cloud`` + ``bank`` earns 1.4. Two keywords
    of the same niche earn 1.25. Anything else, including names that are
    not exactly two words, gets 1.0.

    Returns:
        Tuple of (multiplier, reason, empty when no bonus)
    """
    if len(words) != 2:
        return 1.0, ""
    a, b = (w.lower() for w in words)

    if b in SEMANTIC_SYNERGY_PAIRS.get(a, ()) or a in SEMANTIC_SYNERGY_PAIRS.get(b, ()):
        return SYNERGY_PAIR_BONUS, f'"{a}" + "{b}" form a semantically coherent brand compound'

    for niche in NICHE_CATEGORIES.values():
        if a in niche.keywords and b in niche.keywords:
            return SAME_NICHE_BONUS, f'Both "{a}" and "{b}" are {niche.label} keywords, strong niche alignment'

    return 1.0, ""


def get_trending_multiplier(words: list[str]) -> tuple[float, list[str]]:
    """Highest static heat among the words.

    Two or more trending words multiply the heat by a further 1.3.

    Returns:
        Tuple of (multiplier, trending words). The multiplier is 1.0 when
        nothing trends.
    """
    multiplier = 1.0
    trends: list[str] = []
    for word in words:
        heat = trending_multiplier(word)
        if heat:
            multiplier = max(multiplier, heat)
            trends.append(word)
    if len(trends) >= 2:
        multiplier *= MULTI_TREND_FACTOR
    return multiplier, trends
