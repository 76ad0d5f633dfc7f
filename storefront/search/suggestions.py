"""
Fuzzy search suggestions over product titles.

Each title is scored by how many single-character edits it takes to find the
query somewhere inside it, relative to the query length:

    score = min over substrings s of title: levenshtein(query, s) / len(query)

Where the match sits in the title does not matter. Titles scoring at or below
MATCH_THRESHOLD are suggested, best score first, ties in catalog order.

Examples (query "latte"):
    "Latte"    -> 0.0  (exact)
    "Late Fee" -> 0.2  (one missing "t")
    "Mocha"    -> 0.8  (not suggested)
"""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from storefront.data.models import Product
from storefront.utils.logger import get_logger

logger = get_logger("search.suggestions")

# Fraction of the query length allowed as edits
MATCH_THRESHOLD = 0.4

DEFAULT_LIMIT = 5


def substring_edit_distance(pattern: str, text: str) -> int:
    """
    Minimum Levenshtein distance between ``pattern`` and any substring of ``text``.

    Same row-by-row dynamic program as plain Levenshtein, except the match may
    start and end anywhere in ``text`` at no cost.
    """
    if not pattern:
        return 0
    if not text:
        return len(pattern)

    previous_row = [0] * (len(text) + 1)
    for i, p_char in enumerate(pattern):
        current_row = [i + 1]
        for j, t_char in enumerate(text):
            skip_pattern = previous_row[j + 1] + 1
            skip_text = current_row[j] + 1
            substitution = previous_row[j] + (p_char != t_char)
            current_row.append(min(skip_pattern, skip_text, substitution))
        previous_row = current_row

    return min(previous_row)


def match_score(query: str, title: str) -> float:
    """Normalized distance of ``query`` inside ``title`` (0.0 = contained verbatim)."""
    if not query:
        return 0.0
    return substring_edit_distance(query.lower(), title.lower()) / len(query)


@dataclass(frozen=True)
class SuggestionIndex:
    """
    Prepared title index for one catalog.

    Holds the titles in catalog order along with their lower-cased forms.
    The index is immutable; build a new one when the catalog changes.
    """
    titles: Tuple[str, ...]
    _normalized: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "titles", tuple(self.titles))
        object.__setattr__(self, "_normalized", tuple(title.lower() for title in self.titles))

    @classmethod
    def from_products(cls, products: Sequence[Product]) -> "SuggestionIndex":
        return cls(titles=[p.title for p in products])

    def search(self, query: str) -> List[Tuple[float, int]]:
        """
        Score every title against the query.

        Returns:
            (score, catalog_position) pairs for matching titles, best first
        """
        if not query:
            return []

        needle = query.lower()
        hits: List[Tuple[float, int]] = []
        for position, title in enumerate(self._normalized):
            score = substring_edit_distance(needle, title) / len(needle)
            if score <= MATCH_THRESHOLD:
                hits.append((score, position))

        hits.sort(key=lambda hit: hit[0])
        return hits

    def suggest(self, query: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        """Titles of the best ``limit`` matches."""
        if not query or limit <= 0:
            return []

        hits = self.search(query)
        logger.debug(f"Suggestions for {query!r}: {len(hits)} match(es), returning up to {limit}")
        return [self.titles[position] for _, position in hits[:limit]]


def suggest(products: Sequence[Product], query: str, limit: int = DEFAULT_LIMIT) -> List[str]:
    """
    Ranked title suggestions for a partial query.

    Builds a fresh index on every call. Duplicate titles are kept.
    """
    if not query:
        return []
    return SuggestionIndex.from_products(products).suggest(query, limit=limit)
