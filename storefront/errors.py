"""
Exceptions raised by the storefront core.

The discovery and pricing operations are total over their inputs; these are
only raised at the edges (catalog parsing, option lookup).
"""
from typing import Optional


class StorefrontError(RuntimeError):
    """Base class for storefront errors."""


class CatalogError(StorefrontError):
    """Raised when catalog rows cannot be loaded or parsed."""


class OptionNotFoundError(StorefrontError):
    """Raised when a product has no option group or option with the given name."""

    def __init__(self, product_id: str, group_key: str, label: Optional[str] = None):
        self.product_id = product_id
        self.group_key = group_key
        self.label = label
        if label is None:
            message = f"Product {product_id!r} has no option group {group_key!r}"
        else:
            message = f"Product {product_id!r} has no option {label!r} in group {group_key!r}"
        super().__init__(message)
