"""String similarity helpers for brand matching."""

from domain_scoring.lexicon import LEET_MAP


def normalize_leet(name: str) -> str:
    """Undo common digit and symbol substitutions (``g00gle`` -> ``google``)."""
    return "".join(LEET_MAP.get(c, c) for c in name)


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The minimum number of single-character edits (insertions, deletions,
    or substitutions) required to change one string into the other.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Edit distance (integer)
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def is_typo_variant(name: str, brand: str) -> bool:
    """Check if a name is a one-edit typo of a mid-length brand.

    Only brands of 4-10 characters are considered, and the name must be
    within one character of the brand's length.

    Args:
        name: Leet-normalized name
        brand: Brand to compare against

    Returns:
        True if the name sits exactly one edit away from the brand
    """
    if not 4 <= len(brand) <= 10:
        return False
    if abs(len(name) - len(brand)) > 1:
        return False
    return levenshtein_distance(name, brand) == 1
