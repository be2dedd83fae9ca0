"""Dollar-band valuation of domains."""

from domain_scoring.valuation.anchor import anchor_with_comps, load_comparable_sales
from domain_scoring.valuation.models import (
    AnchoredValuation,
    ComparableSale,
    QuickValuationResult,
    ValueTier,
    format_band,
)
from domain_scoring.valuation.quick import VALUE_TIERS, quick_valuation, value_tier
from domain_scoring.valuation.signals import get_semantic_synergy_bonus, get_trending_multiplier

__all__ = [
    "AnchoredValuation",
    "ComparableSale",
    "QuickValuationResult",
    "ValueTier",
    "VALUE_TIERS",
    "anchor_with_comps",
    "format_band",
    "get_semantic_synergy_bonus",
    "get_trending_multiplier",
    "load_comparable_sales",
    "quick_valuation",
    "value_tier",
]
