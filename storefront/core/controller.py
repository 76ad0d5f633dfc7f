"""
Storefront controller.

Wires filtering, suggestions, highlighting and pricing to a catalog and the
configuration. Holds a suggestion index for the current catalog so repeated
keystrokes do not rebuild it.
"""
from typing import Any, List, Mapping, Optional, Sequence

from storefront.core.config import StorefrontConfig, get_config
from storefront.data.models import Product
from storefront.pricing.calculator import PriceBreakdown, compute_price, format_price
from storefront.search.filtering import filter_products
from storefront.search.highlight import HighlightSegment, highlight
from storefront.search.suggestions import SuggestionIndex
from storefront.utils.logger import get_logger

logger = get_logger("core.controller")


class StorefrontController:
    """
    Entry point for the presentation layer.

    Handles:
    - product grid filtering (category + exact/substring title match)
    - suggestion dropdown (fuzzy title ranking)
    - highlight segments for visible titles
    - line-item pricing
    """

    def __init__(self, products: Sequence[Product], config: Optional[StorefrontConfig] = None):
        """
        Initialize the controller.

        Args:
            products: Catalog in display order
            config: Configuration object. Uses default config if not provided.
        """
        self.config = config or get_config()
        self.set_catalog(products)

        logger.info(
            f"Storefront controller initialized: {len(self.products)} products, "
            f"suggestion_limit={self.config.suggestion_limit}"
        )

    def set_catalog(self, products: Sequence[Product]) -> None:
        """Replace the catalog and rebuild the suggestion index."""
        self.products: List[Product] = list(products)
        self._index = SuggestionIndex.from_products(self.products)

    def search(self, query: str, category_id: Optional[str] = None) -> List[Product]:
        """Products to show in the grid for a submitted query."""
        results = filter_products(self.products, query, category_id)
        logger.info(f"Search q={query!r} category={category_id!r}: {len(results)} result(s)")
        return results

    def suggest(self, query: str, limit: Optional[int] = None) -> List[str]:
        """Suggestion titles for a partial query."""
        if limit is None:
            limit = self.config.suggestion_limit
        return self._index.suggest(query, limit=limit)

    def highlight(self, text: str, query: str) -> List[HighlightSegment]:
        """Highlight segments for a visible title."""
        return highlight(text, query)

    def price(
        self,
        product: Product,
        selected_options: Optional[Mapping[str, Any]] = None,
        quantity: int = 1,
    ) -> PriceBreakdown:
        """Price a product configuration."""
        return compute_price(product.amount, selected_options, quantity)

    def format_price(self, amount: Optional[float]) -> str:
        """Format an amount in the configured currency."""
        return format_price(amount, currency=self.config.currency)


def create_controller(
    products: Optional[Sequence[Product]] = None,
    config: Optional[StorefrontConfig] = None,
) -> StorefrontController:
    """
    Create a controller, loading the configured catalog when no products are given.
    """
    config = config or get_config()
    if products is None:
        from storefront.data.catalog_store import load_catalog_file
        products = load_catalog_file(config.catalog_path, skip_invalid=config.skip_invalid_rows)
    return StorefrontController(products, config=config)
