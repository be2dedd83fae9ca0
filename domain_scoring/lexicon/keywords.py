"""Keyword heat and TLD demand tables."""

# =============================================================================
# TRENDING KEYWORDS - keyword -> heat multiplier (1.0 baseline, 2.5 max)
# =============================================================================

TRENDING_KEYWORDS: dict[str, float] = {
    # AI / Machine Learning
    "ai": 2.5, "gpt": 2.0, "neural": 1.8, "machine": 1.5, "deep": 1.5, "learn": 1.5,
    "robot": 1.6, "auto": 1.6, "smart": 1.5, "quantum": 2.0, "intel": 1.5,
    "agent": 2.2, "agentic": 2.0, "synthetic": 1.6, "cognitive": 1.5,
    # Fintech / Crypto / DeFi
    "pay": 1.8, "bank": 1.8, "cash": 1.6, "loan": 1.5, "credit": 1.6, "finance": 1.8,
    "trade": 1.6, "invest": 1.7, "wallet": 1.5, "token": 1.3, "defi": 1.4, "fintech": 1.8,
    "money": 1.7, "fund": 1.6, "wealth": 1.5, "capital": 1.6, "equity": 1.5, "profit": 1.4,
    # Health & Wellness
    "health": 1.7, "med": 1.5, "fit": 1.4, "care": 1.5, "dental": 1.4, "clinic": 1.4,
    "therapy": 1.3, "mental": 1.3, "wellness": 1.4, "organic": 1.3,
    # E-commerce
    "shop": 1.6, "store": 1.5, "buy": 1.5, "sell": 1.4, "deal": 1.3, "sale": 1.3,
    "market": 1.5, "retail": 1.4, "commerce": 1.5, "cart": 1.3, "order": 1.3,
    # SaaS / Cloud / Tech
    "cloud": 1.7, "tech": 1.6, "code": 1.4, "data": 1.6, "app": 1.4, "web": 1.3,
    "server": 1.3, "host": 1.3, "stack": 1.4, "saas": 1.6, "api": 1.5, "dev": 1.3,
    "cyber": 1.5, "digital": 1.4, "platform": 1.4, "software": 1.3, "system": 1.3,
    # Real Estate & Property
    "home": 1.6, "homes": 1.5, "house": 1.5, "land": 1.5, "estate": 1.6, "rent": 1.4, "property": 1.5,
    "build": 1.3, "room": 1.3, "space": 1.4, "real": 1.4,
    # Energy & Sustainability
    "solar": 1.6, "green": 1.4, "energy": 1.5, "power": 1.4, "electric": 1.4, "carbon": 1.3,
    "climate": 1.3, "eco": 1.3,
    # Travel & Lifestyle
    "travel": 1.5, "hotel": 1.5, "flight": 1.4, "trip": 1.3, "tour": 1.3, "cruise": 1.3,
    "food": 1.4, "chef": 1.3, "wine": 1.3, "luxury": 1.4, "life": 1.4,
    # Security
    "secure": 1.5, "guard": 1.3, "shield": 1.3, "vault": 1.4, "safe": 1.3, "protect": 1.3,
    "defense": 1.3, "lock": 1.3,
    # Gaming & Entertainment
    "game": 1.5, "play": 1.4, "stream": 1.4, "video": 1.3, "music": 1.3, "sport": 1.3,
    "bet": 1.7, "club": 1.4,
    # Jobs & Education
    "jobs": 1.5, "hire": 1.4, "work": 1.3, "career": 1.4, "talent": 1.3,
    "school": 1.3, "course": 1.3, "tutor": 1.3, "academy": 1.3,
    # Legal & Insurance
    "legal": 1.5, "law": 1.5, "lawyer": 1.5, "insure": 1.5, "claim": 1.3, "policy": 1.3,
    # Top recurring aftermarket keywords
    "group": 1.6, "solutions": 1.5, "services": 1.4, "hub": 1.5,
    "global": 1.4, "company": 1.4, "business": 1.4, "pro": 1.5,
    "car": 1.4, "my": 1.3, "best": 1.3, "go": 1.3, "new": 1.3,
    # 2026 hot keywords
    "claw": 1.4, "clean": 1.3, "beauty": 1.4, "fire": 1.3,
    # Biotech & life science
    "bio": 1.7, "gene": 1.6, "genome": 1.5, "dna": 1.5, "protein": 1.4, "vaccine": 1.4,
    "stem": 1.3, "therapeutic": 1.4, "clinical": 1.3, "antibody": 1.4,
    # Beauty & fashion
    "skin": 1.4, "glow": 1.4, "lash": 1.3, "serum": 1.3, "cosmetic": 1.3,
    "fashion": 1.4, "style": 1.3, "wear": 1.3, "boutique": 1.3,
    # Pet industry
    "pet": 1.5, "dog": 1.4, "cat": 1.3, "vet": 1.4, "paw": 1.3, "puppy": 1.3,
    # Insurance
    "insurance": 1.5, "coverage": 1.3, "premium": 1.3,
    # IoT / Smart home
    "iot": 1.5, "sensor": 1.4, "wearable": 1.4,
    # Space & aerospace
    "rocket": 1.5, "satellite": 1.4, "lunar": 1.3, "mars": 1.4, "aerospace": 1.3,
    # VR/AR/Metaverse
    "vr": 1.4, "ar": 1.3, "metaverse": 1.3, "virtual": 1.3, "immersive": 1.3, "spatial": 1.4,
    # Cannabis/CBD
    "cbd": 1.3, "cannabis": 1.3, "hemp": 1.3,
    # Content & creator economy
    "creator": 1.5, "influencer": 1.4, "podcast": 1.4, "content": 1.3, "newsletter": 1.3,
    # Additional trending compound terms
    "copilot": 1.6, "chatbot": 1.5, "genai": 1.6, "llm": 1.5,
    "ev": 1.5, "charging": 1.4, "fleet": 1.3,
    "remote": 1.3, "freelance": 1.3, "gig": 1.3,
}

# =============================================================================
# TLD TABLES
# =============================================================================

# Valuation points per TLD, unknown TLDs get FALLBACK_TLD_POINTS
PREMIUM_TLDS: dict[str, int] = {
    "com": 25, "net": 14, "org": 13, "io": 16, "ai": 18, "co": 14,
    "app": 12, "dev": 11, "me": 9, "xyz": 5, "info": 4, "biz": 3,
}
FALLBACK_TLD_POINTS = 3

# Keyword-demand points per TLD, unknown TLDs get FALLBACK_TLD_DEMAND
TLD_DEMAND_POINTS: dict[str, int] = {
    "com": 12, "ai": 15, "io": 10,
    "co": 7, "app": 7, "dev": 7,
    "net": 5, "org": 5,
}
FALLBACK_TLD_DEMAND = 2

# TLDs whose meaning lines up with a niche
TLD_NICHE_SYNERGY: dict[str, tuple[str, ...]] = {
    "ai": ("ai_tech",),
    "io": ("saas", "ai_tech"),
    "bio": ("biotech",),
    "health": ("health",),
    "law": ("legal",),
    "auto": ("automotive",),
    "dev": ("saas", "ai_tech"),
}

# Wider synergy map used by the trend score
TREND_TLD_NICHE_SYNERGY: dict[str, tuple[str, ...]] = {
    **TLD_NICHE_SYNERGY,
    "pet": ("pet",),
    "beauty": ("beauty",),
    "food": ("food",),
    "space": ("space",),
    "game": ("gaming",),
    "app": ("saas", "ecommerce"),
    "finance": ("fintech",),
}


def trending_multiplier(word: str) -> float:
    """Return the static heat multiplier for a word, 0.0 when not trending."""
    heat = TRENDING_KEYWORDS.get(word, 0.0)
    return heat if heat > 1.0 else 0.0
