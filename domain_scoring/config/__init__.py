"""Configuration loading."""

from .settings import (
    ScoringConfig,
    Settings,
    TrademarkConfig,
    TrendsConfig,
    ValuationConfig,
    load_settings,
)

__all__ = [
    "ScoringConfig",
    "Settings",
    "TrademarkConfig",
    "TrendsConfig",
    "ValuationConfig",
    "load_settings",
]
