"""
Line-item price computation.

unit price = base price + sum of selected option prices
total price = unit price * quantity

Nothing is validated here; out-of-range numbers flow through the arithmetic.
"""
import math
from dataclasses import dataclass
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional


@dataclass(frozen=True)
class PriceBreakdown:
    """Unit and total price for one cart line."""
    unit_price: float
    total_price: float


def option_price(option: Any) -> float:
    """
    Price carried by a selected option record.

    Accepts a mapping with a "price" key or an object with a ``price``
    attribute. A record without a numeric price yields NaN.
    """
    if isinstance(option, Mapping):
        price = option.get("price")
    else:
        price = getattr(option, "price", None)

    if not isinstance(price, Real):
        return math.nan
    return price


def compute_price(
    base_price: float,
    selected_options: Optional[Mapping[str, Any]],
    quantity: int,
) -> PriceBreakdown:
    """
    Compute unit and total price for a product configuration.

    Args:
        base_price: Product base amount
        selected_options: Option key -> selected record exposing a price
        quantity: Number of units

    Returns:
        PriceBreakdown(unit_price, total_price)
    """
    options_total = sum((option_price(opt) for opt in (selected_options or {}).values()), 0)

    unit_price = base_price + options_total
    total_price = unit_price * quantity

    return PriceBreakdown(unit_price=unit_price, total_price=total_price)


def format_price(amount: Optional[float], currency: str = "$") -> str:
    """Format an amount for display with two decimals."""
    if amount is None:
        return "N/A"
    return f"{currency}{amount:.2f}"
