"""Read-only lexicon shared by all scorers.

Everything here is loaded once at import time and never mutated.
"""

from .brand_signals import (
    BRAND_CATEGORIES,
    COMPATIBLE_CATEGORIES,
    FILLER_WORDS,
    NEGATIVE_BRAND_WORDS,
    OFFENSIVE_WORDS,
    brand_category,
)
from .brands import BRAND_IN_WORD, KNOWN_BRANDS, LEET_MAP
from .categories import SEMANTIC_CATEGORIES
from .keywords import (
    FALLBACK_TLD_DEMAND,
    FALLBACK_TLD_POINTS,
    PREMIUM_TLDS,
    TLD_DEMAND_POINTS,
    TLD_NICHE_SYNERGY,
    TREND_TLD_NICHE_SYNERGY,
    TRENDING_KEYWORDS,
    trending_multiplier,
)
from .niches import NICHE_CATEGORIES, NICHE_HEAT_POINTS, Niche, NicheHeat
from .synergy import SEMANTIC_SYNERGY_PAIRS
from .words import (
    COMMON_WORDS,
    DICTIONARY_WORDS,
    KNOWN_WORDS,
    PENALTY_KEYWORDS,
    PREMIUM_KEYWORDS,
    PREMIUM_SHORT,
    SHORT_WORDS,
    is_dictionary_word,
    is_known_word,
)

__all__ = [
    # Words
    "COMMON_WORDS",
    "DICTIONARY_WORDS",
    "KNOWN_WORDS",
    "PENALTY_KEYWORDS",
    "PREMIUM_KEYWORDS",
    "PREMIUM_SHORT",
    "SHORT_WORDS",
    "is_dictionary_word",
    "is_known_word",
    # Keywords and TLDs
    "FALLBACK_TLD_DEMAND",
    "FALLBACK_TLD_POINTS",
    "PREMIUM_TLDS",
    "TLD_DEMAND_POINTS",
    "TLD_NICHE_SYNERGY",
    "TREND_TLD_NICHE_SYNERGY",
    "TRENDING_KEYWORDS",
    "trending_multiplier",
    # Niches
    "NICHE_CATEGORIES",
    "NICHE_HEAT_POINTS",
    "Niche",
    "NicheHeat",
    # Brand signals
    "BRAND_CATEGORIES",
    "COMPATIBLE_CATEGORIES",
    "FILLER_WORDS",
    "NEGATIVE_BRAND_WORDS",
    "OFFENSIVE_WORDS",
    "brand_category",
    # Trademarks
    "BRAND_IN_WORD",
    "KNOWN_BRANDS",
    "LEET_MAP",
    # Similarity
    "SEMANTIC_CATEGORIES",
    "SEMANTIC_SYNERGY_PAIRS",
]
