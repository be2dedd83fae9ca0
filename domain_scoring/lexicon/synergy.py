"""Word pairs that form semantically coherent brand compounds."""

# Lookup is symmetric: a pair matches when either word lists the other
SEMANTIC_SYNERGY_PAIRS: dict[str, frozenset[str]] = {
    # Data/analytics combos
    "analysis": frozenset({
        "chain", "data", "deep", "risk", "market", "trend", "price", "trade", "stock",
        "fund", "credit", "web", "code", "cloud", "smart", "cyber", "bio", "gene", "health",
        "med", "legal", "cost", "sales", "growth", "profit", "revenue",
    }),
    "analytics": frozenset({
        "chain", "data", "deep", "risk", "market", "trend", "web", "cloud", "cyber", "bio",
        "health", "sales", "growth",
    }),
    # Growth/scale combos
    "growth": frozenset({
        "opus", "work", "trade", "health", "wealth", "capital", "revenue", "profit",
        "sales", "fund", "pay", "data", "cloud", "tech", "green", "solar", "energy", "bio",
        "market", "brand", "talent", "career", "home", "stock", "fast", "smart", "rapid",
        "true", "real",
    }),
    # Business/work combos
    "opus": frozenset({
        "growth", "trade", "work", "capital", "fund", "tech", "digital", "global",
        "ventures", "solutions", "group", "labs", "forge", "hub",
    }),
    # Chain/crypto combos
    "chain": frozenset({
        "analysis", "analytics", "link", "trade", "fund", "pay", "lock", "guard", "vault",
        "forge", "block", "data", "flow", "smart", "secure", "safe",
    }),
    # Tech combos
    "code": frozenset({
        "forge", "flow", "craft", "shift", "spark", "stack", "hub", "lab", "base",
    }),
    "cloud": frozenset({
        "forge", "shift", "stack", "gate", "path", "guard", "vault", "sync", "flow",
        "bridge",
    }),
    "data": frozenset({
        "flow", "forge", "vault", "bridge", "mesh", "sync", "stack", "pulse", "core", "hub",
        "lab", "lens", "wave",
    }),
    # Finance combos
    "pay": frozenset({
        "wall", "gate", "flow", "stack", "hub", "shift", "forge", "guard", "smart", "bolt",
    }),
    "trade": frozenset({
        "flow", "craft", "forge", "shift", "wind", "mark", "hub", "gate", "vault", "guard",
    }),
    "fund": frozenset({
        "flow", "forge", "gate", "rise", "stack", "vault", "shift",
    }),
    # Brand/business authority combos
    "smart": frozenset({
        "home", "pay", "trade", "flow", "grid", "lock", "guard", "hire", "path", "care",
        "health", "med", "learn",
    }),
    "deep": frozenset({
        "flow", "mind", "code", "sync", "forge", "learn", "vision", "trade", "link", "care",
        "health",
    }),
    # Healthcare combos
    "health": frozenset({
        "care", "hub", "flow", "sync", "path", "link", "guard", "pulse", "track", "tech",
        "wise", "bridge", "gate", "stack", "med", "net", "zone", "point", "force", "shift",
    }),
    "med": frozenset({
        "tech", "flow", "sync", "hub", "link", "gate", "point", "pulse", "vault", "guard",
        "forge", "stack", "bridge", "care", "track", "wise", "zone", "shift", "spark",
    }),
    "care": frozenset({
        "flow", "hub", "path", "point", "sync", "link", "pulse", "bridge", "tech", "forge",
        "stack", "shift", "guard", "zone", "wise", "track", "gate", "net",
    }),
    "clinic": frozenset({
        "flow", "hub", "sync", "path", "gate", "forge", "stack", "wise", "guard", "pulse",
    }),
    "pharma": frozenset({
        "flow", "hub", "sync", "gate", "forge", "stack", "pulse", "link", "bridge", "track",
    }),
    "bio": frozenset({
        "tech", "forge", "sync", "hub", "link", "flow", "pulse", "code", "gen", "labs",
        "spark", "stack",
    }),
    "gene": frozenset({
        "flow", "forge", "sync", "hub", "link", "code", "spark", "labs", "stack", "pulse",
        "track",
    }),
    "wellness": frozenset({
        "hub", "flow", "path", "sync", "gate", "forge", "track", "pulse", "point",
    }),
    # Real estate combos
    "home": frozenset({
        "find", "flow", "hub", "path", "base", "nest", "stack", "gate", "guard", "wise",
        "link", "point", "sync", "forge", "shift", "scout", "match", "snap", "zone",
    }),
    "house": frozenset({
        "find", "flow", "hub", "path", "stack", "gate", "wise", "link", "point", "scout",
        "match", "snap",
    }),
    "property": frozenset({
        "flow", "hub", "gate", "guard", "stack", "link", "wise", "pulse", "forge", "scout",
        "sync",
    }),
    "estate": frozenset({
        "flow", "hub", "gate", "forge", "link", "wise", "stack", "pulse", "scout", "sync",
    }),
    "realty": frozenset({
        "flow", "hub", "gate", "forge", "link", "wise", "stack", "pulse", "scout", "sync",
    }),
    "rent": frozenset({
        "flow", "hub", "path", "gate", "wise", "link", "scout", "match", "sync", "forge",
        "snap",
    }),
    "land": frozenset({
        "flow", "hub", "gate", "forge", "link", "wise", "stack", "scout", "mark", "bridge",
        "sync",
    }),
    "nest": frozenset({
        "flow", "hub", "path", "find", "gate", "wise", "link", "scout", "match", "sync",
    }),
    # Education combos
    "learn": frozenset({
        "path", "flow", "hub", "sync", "forge", "stack", "gate", "spark", "pulse", "link",
        "bridge", "wise", "shift", "craft", "lab", "zone", "quest", "track",
    }),
    "teach": frozenset({
        "flow", "hub", "sync", "path", "forge", "stack", "spark", "link", "wise", "craft",
        "lab", "pulse",
    }),
    "study": frozenset({
        "flow", "hub", "sync", "path", "forge", "stack", "spark", "link", "wise", "pulse",
        "zone", "gate",
    }),
    "course": frozenset({
        "flow", "hub", "sync", "path", "forge", "stack", "spark", "craft", "gate", "wise",
    }),
    "tutor": frozenset({
        "flow", "hub", "sync", "path", "forge", "link", "spark", "match", "wise", "gate",
    }),
    "skill": frozenset({
        "flow", "hub", "sync", "path", "forge", "stack", "spark", "shift", "craft", "pulse",
        "link", "bridge",
    }),
    "brain": frozenset({
        "flow", "forge", "sync", "hub", "spark", "pulse", "stack", "link", "wave", "storm",
        "shift",
    }),
    "mentor": frozenset({
        "flow", "hub", "sync", "path", "forge", "link", "spark", "match", "wise", "shift",
    }),
    "academy": frozenset({
        "flow", "hub", "sync", "forge", "stack", "spark", "gate", "pulse", "link",
    }),
    # Green/energy combos
    "green": frozenset({
        "flow", "hub", "forge", "shift", "pulse", "stack", "path", "gate", "link", "sync",
        "spark",
    }),
    "solar": frozenset({
        "flow", "hub", "forge", "shift", "pulse", "stack", "path", "gate", "link", "sync",
        "spark", "grid",
    }),
    "energy": frozenset({
        "flow", "hub", "forge", "shift", "pulse", "stack", "path", "gate", "link", "sync",
        "spark", "grid",
    }),
    # Travel/hospitality combos
    "travel": frozenset({
        "flow", "hub", "gate", "path", "forge", "link", "wise", "sync", "scout", "snap",
        "pulse",
    }),
    "trip": frozenset({
        "flow", "hub", "gate", "path", "forge", "wise", "sync", "scout", "snap", "match",
    }),
    "stay": frozenset({
        "flow", "hub", "gate", "path", "forge", "wise", "sync", "scout", "match", "nest",
    }),
    "book": frozenset({
        "flow", "hub", "gate", "path", "forge", "wise", "sync", "stack", "snap", "match",
    }),
    # Food/wellness combos
    "food": frozenset({
        "flow", "hub", "forge", "path", "link", "sync", "pulse", "stack", "wise", "snap",
    }),
    "meal": frozenset({
        "flow", "hub", "forge", "path", "sync", "prep", "stack", "wise", "match", "snap",
    }),
    "fit": frozenset({
        "flow", "hub", "forge", "path", "pulse", "sync", "stack", "track", "zone", "spark",
    }),
    # Legal combos
    "legal": frozenset({
        "flow", "hub", "forge", "gate", "stack", "link", "wise", "guard", "sync", "path",
        "vault", "shield",
    }),
    "law": frozenset({
        "flow", "hub", "forge", "gate", "stack", "link", "wise", "guard", "sync", "path",
    }),
    # Security/Cyber combos
    "cyber": frozenset({
        "flow", "hub", "forge", "gate", "stack", "link", "guard", "sync", "shield", "vault",
        "lock", "pulse", "watch", "wall",
    }),
    "secure": frozenset({
        "flow", "hub", "forge", "gate", "stack", "link", "guard", "sync", "vault", "lock",
        "path", "zone", "shift",
    }),
    "guard": frozenset({
        "flow", "hub", "forge", "gate", "stack", "link", "vault", "sync", "shield", "lock",
        "watch", "wall", "zone",
    }),
    "shield": frozenset({
        "flow", "hub", "forge", "gate", "stack", "link", "guard", "sync", "vault", "lock",
        "cyber", "wall",
    }),
    "vault": frozenset({
        "flow", "hub", "forge", "gate", "stack", "link", "guard", "sync", "lock", "safe",
        "key", "core",
    }),
    # AI/ML combos
    "neural": frozenset({
        "flow", "hub", "forge", "link", "sync", "pulse", "stack", "spark", "shift", "path",
        "labs", "code",
    }),
    "vector": frozenset({
        "flow", "hub", "forge", "sync", "shift", "stack", "pulse", "labs", "code", "spark",
    }),
    "logic": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "spark", "shift", "path", "core",
    }),
    "pixel": frozenset({
        "flow", "hub", "forge", "sync", "shift", "stack", "spark", "craft", "labs", "pulse",
    }),
    "quantum": frozenset({
        "flow", "hub", "forge", "sync", "shift", "stack", "spark", "labs", "leap", "pulse",
        "core",
    }),
    "vision": frozenset({
        "flow", "hub", "forge", "sync", "shift", "stack", "spark", "labs", "pulse", "craft",
        "ai",
    }),
    # SaaS/Startup combos
    "launch": frozenset({
        "flow", "hub", "pad", "forge", "stack", "path", "gate", "shift", "spark", "sync",
    }),
    "scale": frozenset({
        "flow", "hub", "forge", "stack", "shift", "path", "gate", "sync", "spark", "grid",
    }),
    "venture": frozenset({
        "flow", "hub", "forge", "stack", "shift", "path", "gate", "sync", "spark", "labs",
    }),
    "pivot": frozenset({
        "flow", "hub", "forge", "stack", "shift", "path", "sync", "spark",
    }),
    "sprint": frozenset({
        "flow", "hub", "forge", "stack", "shift", "path", "sync", "spark",
    }),
    "agile": frozenset({
        "flow", "hub", "forge", "stack", "shift", "path", "sync", "spark",
    }),
    # Logistics/Supply chain combos
    "ship": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "track", "pulse", "link", "fast",
        "wise", "guard",
    }),
    "cargo": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "track", "pulse", "link", "shift",
    }),
    "freight": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "track", "pulse", "link", "shift",
    }),
    "fleet": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "track", "pulse", "guard", "wise",
    }),
    "route": frozenset({
        "flow", "hub", "forge", "gate", "sync", "track", "pulse", "link", "wise", "shift",
        "match",
    }),
    "supply": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "chain", "link", "track", "pulse",
        "shift",
    }),
    # Marketing/Sales combos
    "brand": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "spark", "pulse", "shift", "craft",
        "wise", "boost",
    }),
    "lead": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "spark", "pulse", "shift", "gen",
        "match",
    }),
    "sales": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "spark", "pulse", "shift", "boost",
        "track",
    }),
    "market": frozenset({
        "flow", "hub", "forge", "gate", "stack", "sync", "spark", "pulse", "shift", "wise",
        "scout",
    }),
    "advert": frozenset({
        "flow", "hub", "forge", "sync", "spark", "pulse", "shift", "boost", "stack",
    }),
    "promo": frozenset({
        "flow", "hub", "forge", "sync", "spark", "pulse", "shift", "boost", "stack",
    }),
    # HR/Talent combos
    "hire": frozenset({
        "flow", "hub", "forge", "gate", "sync", "spark", "match", "pulse", "shift", "wise",
        "scout", "path",
    }),
    "talent": frozenset({
        "flow", "hub", "forge", "gate", "sync", "spark", "match", "pulse", "shift", "scout",
        "path", "stack",
    }),
    "recruit": frozenset({
        "flow", "hub", "forge", "gate", "sync", "match", "pulse", "shift", "wise", "scout",
    }),
    "career": frozenset({
        "flow", "hub", "forge", "gate", "sync", "spark", "path", "pulse", "shift", "wise",
        "scout", "match",
    }),
    "staff": frozenset({
        "flow", "hub", "forge", "gate", "sync", "match", "pulse", "shift", "wise", "stack",
    }),
    # Insurance combos
    "insure": frozenset({
        "flow", "hub", "forge", "gate", "sync", "guard", "pulse", "shift", "wise", "shield",
        "path", "stack",
    }),
    "risk": frozenset({
        "flow", "hub", "forge", "gate", "sync", "guard", "pulse", "shift", "wise", "shield",
        "stack", "watch",
    }),
    "cover": frozenset({
        "flow", "hub", "forge", "gate", "sync", "guard", "pulse", "shift", "wise", "shield",
        "stack",
    }),
    "claim": frozenset({
        "flow", "hub", "forge", "gate", "sync", "guard", "pulse", "shift", "wise", "stack",
        "track",
    }),
    # Auto/EV combos
    "auto": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "shift", "stack", "track", "wise",
        "guard", "spark",
    }),
    "drive": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "shift", "stack", "wise", "spark",
        "path",
    }),
    "motor": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "shift", "stack", "wise", "spark",
    }),
    "charge": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "shift", "stack", "point", "grid",
        "bolt",
    }),
    "volt": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "shift", "stack", "spark", "grid",
    }),
    # Gaming/Entertainment combos
    "game": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "shift", "craft",
        "zone", "quest",
    }),
    "play": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "shift", "craft",
        "zone",
    }),
    "quest": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "path", "craft",
    }),
    "arena": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "shift",
    }),
    "stream": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "shift", "cast",
        "wave",
    }),
    # Social/Community combos
    "social": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "shift", "link",
        "mesh", "hive",
    }),
    "connect": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "shift", "link",
        "mesh",
    }),
    "tribe": frozenset({
        "flow", "hub", "forge", "sync", "pulse", "spark", "shift", "link", "hive",
    }),
    "crowd": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "shift", "fund",
        "source",
    }),
    "chat": frozenset({
        "flow", "hub", "forge", "gate", "sync", "pulse", "stack", "spark", "shift", "bolt",
    }),
    "hive": frozenset({
        "flow", "hub", "forge", "sync", "pulse", "stack", "spark", "shift", "mind", "link",
    }),
    # Pet/Vet combos
    "pet": frozenset({
        "flow", "hub", "forge", "sync", "pulse", "path", "care", "wise", "match", "guard",
        "nest",
    }),
    "vet": frozenset({
        "flow", "hub", "forge", "sync", "pulse", "path", "care", "wise", "guard", "stack",
    }),
    "paw": frozenset({
        "flow", "hub", "forge", "sync", "pulse", "path", "scout", "match", "wise",
    }),
    # Crypto/DeFi combos
    "token": frozenset({
        "flow", "hub", "forge", "gate", "sync", "swap", "vault", "stack", "mint", "chain",
        "lock", "guard", "shift", "pulse", "launch",
    }),
    "swap": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "chain", "pulse", "shift", "vault",
        "lock", "bolt", "link",
    }),
    "yield": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "vault", "farm", "pulse", "shift",
        "boost", "guard",
    }),
    "stake": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "vault", "pool", "pulse", "shift",
        "guard", "lock",
    }),
    "mint": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "vault", "pulse", "shift", "spark",
        "labs", "craft",
    }),
    "defi": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "vault", "pulse", "shift", "guard",
        "labs", "chain",
    }),
    "coin": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "vault", "pulse", "shift", "swap",
        "base", "track",
    }),
    "crypto": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "vault", "pulse", "shift", "guard",
        "labs", "swap",
    }),
    "wallet": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "vault", "guard", "lock", "shift",
        "link",
    }),
    "ledger": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "vault", "guard", "lock", "link",
    }),
    # Web3/Metaverse combos
    "meta": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "pulse", "shift", "verse", "labs",
        "link", "spark", "craft",
    }),
    "dao": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "pulse", "shift", "labs", "link",
        "fund", "vote",
    }),
    "nft": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "pulse", "shift", "labs", "mint",
        "vault", "drop",
    }),
    "dapp": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "pulse", "shift", "labs", "link",
        "craft",
    }),
    "web3": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "pulse", "shift", "labs", "link",
        "spark",
    }),
    "block": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "pulse", "shift", "chain", "mint",
        "craft", "labs",
    }),
    "hash": frozenset({
        "flow", "hub", "forge", "gate", "sync", "stack", "pulse", "shift", "labs", "link",
        "guard",
    }),
}
