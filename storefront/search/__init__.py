"""
Product discovery for the storefront.

- filter_products: category narrowing + exact-over-substring title match
- suggest: fuzzy title suggestions
- highlight: matched/unmatched text segments
"""
from storefront.search.filtering import filter_products
from storefront.search.highlight import HighlightSegment, highlight
from storefront.search.suggestions import SuggestionIndex, suggest

__all__ = [
    "filter_products",
    "HighlightSegment",
    "highlight",
    "SuggestionIndex",
    "suggest",
]
