"""
Cart line items.

Lines for the same product with the same option selection are merged into one
line. Totals are always derived from the line's own unit price.
"""
import uuid
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from storefront.data.models import Product
from storefront.pricing.calculator import compute_price, option_price
from storefront.utils.logger import get_logger

logger = get_logger("pricing.cart")


class CartItem(BaseModel):
    """One configured product in the cart."""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex, description="Line identifier")
    product_id: str
    title: str
    image: Optional[str] = None
    quantity: int = Field(default=1, description="Number of units")
    base_price: float
    options: Dict[str, Dict[str, Any]] = Field(default_factory=dict, description="Group key -> {label, price}")
    unit_price: float
    total_price: float

    @classmethod
    def from_product(
        cls,
        product: Product,
        selected: Optional[Mapping[str, Any]] = None,
        quantity: int = 1,
    ) -> "CartItem":
        """Build a priced line item from a product and its selected options."""
        options = {
            key: {"label": _option_label(opt), "price": option_price(opt)}
            for key, opt in (selected or {}).items()
        }
        pricing = compute_price(product.amount, options, quantity)

        return cls(
            product_id=product.id,
            title=product.title,
            image=product.image,
            quantity=quantity,
            base_price=product.amount,
            options=options,
            unit_price=pricing.unit_price,
            total_price=pricing.total_price,
        )


def _option_label(option: Any) -> Optional[str]:
    if isinstance(option, Mapping):
        return option.get("label")
    return getattr(option, "label", None)


class Cart:
    """
    In-memory cart.

    Merging rules:
    - same product_id and equal options -> quantities are added
    - update_quantity() ignores quantities below 1
    """

    def __init__(self, items: Optional[List[CartItem]] = None):
        self._items: List[CartItem] = list(items or [])

    @property
    def items(self) -> List[CartItem]:
        return list(self._items)

    def _find(self, item_id: str) -> Optional[int]:
        for idx, item in enumerate(self._items):
            if item.id == item_id:
                return idx
        return None

    def add_item(self, item: CartItem) -> CartItem:
        """
        Add a line, merging it into an existing line for the same configuration.

        Returns:
            The line now holding the item.
        """
        for idx, existing in enumerate(self._items):
            if existing.product_id == item.product_id and existing.options == item.options:
                quantity = existing.quantity + item.quantity
                merged = existing.model_copy(update={
                    "quantity": quantity,
                    "total_price": existing.unit_price * quantity,
                })
                self._items[idx] = merged
                logger.debug(f"Merged line {existing.id}: quantity {existing.quantity} -> {quantity}")
                return merged

        self._items.append(item)
        logger.debug(f"Added line {item.id} for product {item.product_id}")
        return item

    def remove_item(self, item_id: str) -> None:
        self._items = [item for item in self._items if item.id != item_id]

    def update_quantity(self, item_id: str, quantity: int) -> Optional[CartItem]:
        """
        Set the quantity of a line and recompute its total.

        Quantities below 1 leave the cart unchanged. Returns the updated line,
        or None when nothing changed.
        """
        if quantity < 1:
            return None

        idx = self._find(item_id)
        if idx is None:
            return None

        item = self._items[idx]
        updated = item.model_copy(update={
            "quantity": quantity,
            "total_price": item.unit_price * quantity,
        })
        self._items[idx] = updated
        return updated

    def clear(self) -> None:
        self._items = []

    @property
    def subtotal(self) -> float:
        return sum(item.total_price for item in self._items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def __len__(self) -> int:
        return len(self._items)
