"""
Exact/substring product filtering.

Category narrowing runs first. A non-empty query then keeps the products whose
title equals the query (case-insensitive); only when there are none does it
fall back to titles containing the query.
"""
from typing import List, Optional, Sequence

from storefront.data.models import Product
from storefront.utils.logger import get_logger

logger = get_logger("search.filtering")


def filter_by_category(products: Sequence[Product], category_id: Optional[str]) -> List[Product]:
    """Keep products in the given category. No category id keeps everything."""
    if not category_id:
        return list(products)
    return [p for p in products if p.category is not None and p.category.id == category_id]


def filter_products(
    products: Sequence[Product],
    query: str,
    active_category_id: Optional[str] = None,
) -> List[Product]:
    """
    Narrow a catalog by category and title.

    Args:
        products: Catalog in display order
        query: Free-text query; empty string applies no text filter
        active_category_id: Optional category to restrict to

    Returns:
        New list preserving catalog order
    """
    filtered = filter_by_category(products, active_category_id)

    if not query:
        return filtered

    needle = query.lower()

    exact = [p for p in filtered if p.title.lower() == needle]
    if exact:
        logger.debug(f"Exact title match for {query!r}: {len(exact)} product(s)")
        return exact

    return [p for p in filtered if needle in p.title.lower()]
