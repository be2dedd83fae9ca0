"""Semantic categories for comparable-domain similarity.

Each category groups synonyms and closely related terms that a domain
investor treats as interchangeable when looking for comparable sales.
"""

SEMANTIC_CATEGORIES: dict[str, frozenset[str]] = {
    "automotive": frozenset({
        "auto", "car", "cars", "vehicle", "motor", "drive", "driver", "driving", "garage",
        "dealer", "tire", "engine", "fuel", "ev", "hybrid", "sedan", "suv", "truck",
        "fleet", "racing", "speed", "ride", "park", "parking", "mechanic", "collision",
        "repair",
    }),
    "finance": frozenset({
        "finance", "financial", "money", "cash", "bank", "banking", "loan", "loans",
        "credit", "debit", "pay", "payment", "payments", "invest", "investing",
        "investment", "fund", "funding", "wealth", "capital", "equity", "stock", "stocks",
        "bond", "bonds", "forex", "trading", "trade", "trader", "mortgage", "insurance",
        "insure", "policy", "premium", "annuity", "budget", "savings", "tax", "taxes",
        "accounting", "audit", "fintech", "wallet", "profit", "revenue", "income",
        "pension", "retire", "retirement",
    }),
    "realestate": frozenset({
        "home", "homes", "house", "houses", "housing", "property", "properties", "estate",
        "realty", "real", "land", "lot", "lots", "apartment", "condo", "rent", "rental",
        "lease", "tenant", "landlord", "mortgage", "broker", "listing", "listings", "room",
        "rooms", "building", "build", "builder", "construction",
    }),
    "health": frozenset({
        "health", "healthy", "medical", "med", "doctor", "doctors", "nurse", "hospital",
        "clinic", "care", "wellness", "therapy", "therapist", "dental", "dentist", "pharma",
        "pharmacy", "drug", "drugs", "vitamin", "supplement", "nutrition", "diet",
        "fitness", "fit", "gym", "yoga", "mental", "rehab", "recovery", "patient",
        "diagnosis", "treatment", "telehealth", "surgery", "surgeon",
    }),
    "tech": frozenset({
        "tech", "technology", "software", "app", "apps", "web", "digital", "data", "code",
        "coding", "cloud", "server", "host", "hosting", "cyber", "api", "dev", "developer",
        "saas", "platform", "system", "systems", "compute", "computing", "network", "ai",
        "machine", "automation", "algorithm", "database", "analytics", "bot", "robot",
        "robotics",
    }),
    "crypto": frozenset({
        "crypto", "bitcoin", "blockchain", "token", "tokens", "defi", "nft", "web3", "dao",
        "chain", "coin", "coins", "mining", "staking", "swap", "dex", "ledger", "hash",
        "wallet", "ethereum", "solana",
    }),
    "ecommerce": frozenset({
        "shop", "shopping", "store", "stores", "buy", "sell", "deal", "deals", "sale",
        "sales", "market", "marketplace", "retail", "merchant", "checkout", "cart", "order",
        "orders", "product", "products", "wholesale", "commerce", "ecommerce", "coupon",
        "discount", "price", "cheap", "bargain",
    }),
    "travel": frozenset({
        "travel", "trip", "trips", "tour", "tours", "tourism", "hotel", "hotels", "flight",
        "flights", "airline", "cruise", "vacation", "resort", "booking", "book",
        "destination", "adventure", "explore", "hostel", "passport", "getaway", "beach",
        "island",
    }),
    "education": frozenset({
        "learn", "learning", "teach", "teaching", "school", "schools", "university",
        "college", "course", "courses", "class", "classes", "tutor", "tutoring", "academy",
        "study", "student", "students", "education", "training", "degree", "diploma",
        "scholarship", "mentor", "exam",
    }),
    "food": frozenset({
        "food", "foods", "recipe", "recipes", "cook", "cooking", "chef", "restaurant",
        "restaurants", "eat", "eating", "meal", "meals", "kitchen", "bakery", "cafe",
        "coffee", "tea", "wine", "beer", "bar", "grill", "pizza", "burger", "sushi",
        "vegan", "organic", "grocery", "delivery", "catering", "menu",
    }),
    "gaming": frozenset({
        "game", "games", "gaming", "play", "player", "players", "esport", "esports",
        "casino", "bet", "betting", "gamble", "gambling", "arcade", "quest", "level",
        "guild", "arena", "stream", "streaming", "twitch", "gamer", "console", "loot",
        "pvp", "mmo",
    }),
    "legal": frozenset({
        "legal", "law", "lawyer", "lawyers", "attorney", "attorneys", "court", "litigation",
        "contract", "contracts", "counsel", "judge", "verdict", "arbitration", "compliance",
        "patent", "trademark", "copyright", "lawsuit", "legislation",
    }),
    "security": frozenset({
        "secure", "security", "guard", "shield", "vault", "safe", "safety", "protect",
        "protection", "defense", "lock", "cyber", "firewall", "encryption", "threat",
        "breach", "antivirus", "sentinel", "identity", "access",
    }),
    "energy": frozenset({
        "solar", "green", "energy", "power", "electric", "electricity", "carbon", "climate",
        "eco", "renewable", "hydrogen", "wind", "battery", "grid", "volt", "watt", "charge",
        "charging", "clean", "sustain", "sustainability", "biofuel",
    }),
    "beauty": frozenset({
        "beauty", "skin", "skincare", "hair", "makeup", "cosmetic", "cosmetics", "glow",
        "lash", "nail", "nails", "serum", "cream", "fashion", "style", "wear", "apparel",
        "boutique", "designer", "glamour",
    }),
    "pet": frozenset({
        "pet", "pets", "dog", "dogs", "cat", "cats", "puppy", "kitten", "vet", "veterinary",
        "paw", "animal", "animals", "breed", "grooming", "kennel", "shelter", "adoption",
    }),
    "jobs": frozenset({
        "job", "jobs", "hire", "hiring", "work", "career", "careers", "talent", "recruit",
        "recruiting", "recruitment", "staff", "staffing", "employer", "resume", "payroll",
        "workforce", "remote", "freelance",
    }),
    "biotech": frozenset({
        "bio", "biotech", "gene", "genes", "genetic", "genome", "dna", "rna", "protein",
        "cell", "stem", "enzyme", "antibody", "vaccine", "clinical", "molecular",
        "oncology", "therapeutic", "diagnostic", "lab", "laboratory", "research", "science",
    }),
    "media": frozenset({
        "media", "news", "blog", "content", "creator", "influencer", "podcast", "video",
        "film", "movie", "music", "audio", "sound", "radio", "broadcast", "publishing",
        "magazine", "journalism", "photographer", "photography", "streaming",
    }),
    "sports": frozenset({
        "sport", "sports", "athletic", "athletics", "gym", "fitness", "run", "running",
        "marathon", "yoga", "training", "coach", "coaching", "team", "league",
        "championship", "tournament", "basketball", "football", "soccer", "tennis", "golf",
        "swimming", "boxing", "martial",
    }),
}
