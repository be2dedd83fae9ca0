"""Word lists behind the brandability heuristics: offensive content,
filler words, negative connotations and the brand-category compatibility
map used to judge whether compound names hang together.
"""

# Substring scan, severity grows with word length
OFFENSIVE_WORDS: frozenset[str] = frozenset({
    "poo", "poop", "stain", "crap", "damn", "hell", "ass", "butt", "fart", "pee", "wee",
    "snot", "barf", "vomit", "puke", "shit", "fuck", "dick", "cock", "porn", "sex", "xxx",
    "bitch", "slut", "whore", "twat", "cunt", "boob", "tit", "nude", "naked", "kill",
    "murder", "hate", "racist", "spam", "scam", "fraud", "fake", "suck", "dumb", "stupid",
    "ugly", "loser", "creep", "stink", "smelly", "gross", "nasty", "sleazy", "trashy",
    "filthy", "dirty", "grope", "molest", "jerk", "idiot", "moron", "anus", "penis",
    "vagina",
})

# Grammatical connectors that signal a phrase rather than a brand
FILLER_WORDS: frozenset[str] = frozenset({
    "a", "an", "the", "this", "that", "these", "those", "i", "me", "my", "we", "our", "you",
    "your", "he", "she", "her", "his", "they", "them", "their", "it", "its", "on", "in",
    "at", "to", "for", "of", "by", "with", "from", "up", "off", "out", "into", "over",
    "under", "about", "between", "through", "and", "or", "but", "nor", "so", "yet", "is",
    "am", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does",
    "did", "can", "could", "will", "would", "shall", "should", "may", "might", "get", "got",
    "let", "just", "please", "not", "no", "yes", "very", "too", "also", "really", "here",
    "there",
})

# Valid words with weak or unpleasant brand connotations
NEGATIVE_BRAND_WORDS: frozenset[str] = frozenset({
    "lost", "lose", "dead", "death", "die", "dying", "kill", "grave", "tomb", "ghost",
    "doom", "curse", "decay", "rot", "ruin", "fail", "broke", "broken", "crash", "error",
    "bug", "fault", "flaw", "void", "null", "empty", "blank", "pain", "hurt", "sick", "ill",
    "disease", "toxic", "poison", "burn", "bleed", "wound", "scar", "cry", "tear", "grief",
    "sad", "misery", "agony", "cheap", "poor", "weak", "slow", "dull", "dark", "grim",
    "bleak", "cold", "harsh", "bitter", "sour", "stale", "flat", "limp", "lazy", "boring",
    "bland", "plain", "basic", "generic", "average", "mediocre", "fear", "scare", "dread",
    "panic", "risk", "threat", "danger", "hazard", "trap", "cage", "bind", "stuck", "war",
    "fight", "clash", "conflict", "enemy", "rival", "battle", "struggle", "chaos", "mess",
    "wreck",
})

# =============================================================================
# BRAND CATEGORIES - coherence of multi-word names
# =============================================================================

# A word maps to the first category that lists it
BRAND_CATEGORIES: dict[str, frozenset[str]] = {
    "tech": frozenset({
        "tech", "data", "code", "byte", "bit", "net", "web", "app", "dev", "hack", "cyber",
        "cloud", "stack", "pixel", "logic", "algo", "core", "node", "sync", "link", "wire",
        "grid", "chip", "nano", "meta", "digi", "info", "soft",
    }),
    "business": frozenset({
        "bank", "pay", "fund", "trade", "market", "sales", "deal", "pro", "corp", "hub",
        "base", "desk", "work", "office", "lead", "chief", "exec", "boss", "team", "crew",
        "group",
    }),
    "creative": frozenset({
        "art", "design", "craft", "studio", "brand", "create", "make", "build", "forge",
        "form", "shape", "dream", "vision", "spark", "glow", "shine", "bright", "vivid",
        "bold",
    }),
    "nature": frozenset({
        "sky", "sun", "moon", "star", "earth", "sea", "wave", "wind", "storm", "rain",
        "fire", "ice", "snow", "leaf", "tree", "root", "bloom", "spring", "river", "lake",
        "stone", "rock", "peak", "hill", "mountain", "forest", "ocean", "field",
    }),
    "motion": frozenset({
        "flow", "rush", "dash", "leap", "fly", "jet", "swift", "flash", "zoom", "ride",
        "run", "go", "move", "shift", "rise", "lift", "launch", "boost", "surge", "pulse",
        "drift", "glide", "soar",
    }),
    "quality": frozenset({
        "prime", "elite", "top", "best", "gold", "silver", "platinum", "royal", "noble",
        "grand", "ultra", "super", "mega", "apex", "alpha", "omega", "ace", "zen", "pure",
        "true", "clear", "bright", "fresh", "smart", "wise",
    }),
    "color": frozenset({
        "red", "blue", "green", "black", "white", "grey", "gray", "orange", "purple",
        "amber", "coral", "ivory", "crimson", "azure", "jade", "ruby", "emerald", "indigo",
        "violet", "teal",
    }),
    "abstract": frozenset({
        "flex", "vibe", "aura", "edge", "zone", "scope", "verse", "scape", "sphere",
        "orbit", "quest", "path", "way", "trail", "route", "gate", "door", "key", "lock",
        "bridge", "port", "loop", "arc", "axis",
    }),
    "food": frozenset({
        "pea", "peas", "toast", "bread", "cake", "pie", "bean", "corn", "rice", "meat",
        "fish", "egg", "milk", "cream", "sugar", "salt", "spice", "jam", "nut", "fruit",
        "apple", "berry", "lemon", "lime", "mint", "honey", "coffee", "tea",
    }),
    "body": frozenset({
        "head", "hand", "eye", "face", "arm", "leg", "foot", "back", "heart", "brain",
        "bone", "skin", "hair", "lip", "tooth",
    }),
}

COMPATIBLE_CATEGORIES: dict[str, frozenset[str]] = {
    "tech": frozenset({
        "tech", "business", "creative", "motion", "quality", "color", "abstract",
    }),
    "business": frozenset({
        "business", "tech", "quality", "motion", "abstract", "creative",
    }),
    "creative": frozenset({
        "creative", "tech", "nature", "quality", "color", "abstract", "motion",
    }),
    "nature": frozenset({
        "nature", "creative", "quality", "color", "motion", "abstract",
    }),
    "motion": frozenset({
        "motion", "tech", "business", "nature", "quality", "abstract", "creative",
    }),
    "quality": frozenset({
        "quality", "tech", "business", "creative", "nature", "motion", "color", "abstract",
    }),
    "color": frozenset({
        "color", "tech", "creative", "nature", "quality", "abstract", "motion",
    }),
    "abstract": frozenset({
        "abstract", "tech", "business", "creative", "nature", "motion", "quality", "color",
    }),
    "food": frozenset({
        "food", "quality",
    }),
    "body": frozenset({
        "body", "quality", "motion",
    }),
}


def brand_category(word: str) -> str | None:
    """Return the brand category of a word, or None when uncategorized."""
    for category, words in BRAND_CATEGORIES.items():
        if word in words:
            return category
    return None
