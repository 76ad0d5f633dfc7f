"""
Line-item pricing, option selection and cart lines.
"""
from storefront.pricing.calculator import PriceBreakdown, compute_price, format_price
from storefront.pricing.cart import Cart, CartItem
from storefront.pricing.options import can_add_to_cart, find_option, has_required_options, select_option

__all__ = [
    "PriceBreakdown",
    "compute_price",
    "format_price",
    "Cart",
    "CartItem",
    "can_add_to_cart",
    "find_option",
    "has_required_options",
    "select_option",
]
