"""
Storefront - product discovery and pricing core

Pure functions over an in-memory product catalog:
- Exact/substring filtering with category narrowing
- Fuzzy title suggestions
- Search-term highlighting
- Line-item pricing from base price and selected options
"""

from storefront.core.controller import StorefrontController, create_controller
from storefront.core.config import StorefrontConfig, get_config, set_config
from storefront.pricing.calculator import PriceBreakdown, compute_price
from storefront.search.filtering import filter_products
from storefront.search.highlight import HighlightSegment, highlight
from storefront.search.suggestions import suggest

__all__ = [
    'StorefrontController',
    'create_controller',
    'StorefrontConfig',
    'get_config',
    'set_config',
    'PriceBreakdown',
    'compute_price',
    'filter_products',
    'HighlightSegment',
    'highlight',
    'suggest',
]

__version__ = '0.1.0'
