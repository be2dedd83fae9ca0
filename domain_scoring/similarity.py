"""Category-overlap similarity between keyword lists.

Used to find comparable domains. Words are mapped to semantic
categories and the category sets are compared, so ``cash`` and ``bank``
count as similar even though the words differ.
"""

from domain_scoring.lexicon import SEMANTIC_CATEGORIES


def get_categories(word: str) -> set[str]:
    """Categories a word belongs to, possibly none."""
    word = word.lower()
    return {category for category, members in SEMANTIC_CATEGORIES.items() if word in members}


def semantic_similarity(words_a: list[str], words_b: list[str]) -> float:
    """Jaccard similarity of the category sets of two keyword lists.

    Args:
        words_a: Keywords of the first domain
        words_b: Keywords of the second domain

    Returns:
        Similarity in [0, 1], 0.0 when either side has no categories
    """
    categories_a: set[str] = set()
    for word in words_a:
        categories_a |= get_categories(word)
    categories_b: set[str] = set()
    for word in words_b:
        categories_b |= get_categories(word)

    if not categories_a or not categories_b:
        return 0.0

    return len(categories_a & categories_b) / len(categories_a | categories_b)
