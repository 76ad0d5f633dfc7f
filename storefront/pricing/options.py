"""
Option selection for configurable products.

A selection maps an option group key to the chosen {label, price} record,
which is what compute_price() and CartItem consume.
"""
from typing import Any, Dict, Mapping, Optional

from storefront.data.models import Product, ProductOptionGroup, ProductOptionItem
from storefront.errors import OptionNotFoundError


def find_option(product: Product, group_key: str, label: str) -> ProductOptionItem:
    """
    Look up an option item by group key and label.

    Raises:
        OptionNotFoundError: If the group or the label does not exist.
    """
    for group in product.option_groups():
        if group.key != group_key:
            continue
        for option in group.options:
            if option.label == label:
                return option
        raise OptionNotFoundError(product.id, group_key, label)

    raise OptionNotFoundError(product.id, group_key)


def select_option(
    selected: Optional[Mapping[str, Any]],
    group: ProductOptionGroup,
    option: ProductOptionItem,
) -> Dict[str, Dict[str, Any]]:
    """
    Return a new selection with ``option`` chosen for ``group``.

    Any earlier choice for the same group is replaced. The input mapping is
    left untouched.
    """
    updated = dict(selected or {})
    updated[group.key] = {"label": option.label, "price": option.price}
    return updated


def has_required_options(product: Product, selected: Optional[Mapping[str, Any]]) -> bool:
    """True when every required option group has a selection."""
    selected = selected or {}
    return all(
        not group.required or bool(selected.get(group.key))
        for group in product.option_groups()
    )


def can_add_to_cart(product: Product, selected: Optional[Mapping[str, Any]]) -> bool:
    """True when the product is in stock and every required group has a selection."""
    return product.in_stock and has_required_options(product, selected)
