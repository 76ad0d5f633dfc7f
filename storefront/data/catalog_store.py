"""
Catalog data access layer.

Turns product rows, shaped like the results of a hosted-table query
(``products`` joined with ``categories``), into Product models. Rows are read
from an in-memory list or from a JSON export on disk.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from storefront.data.models import Category, Product
from storefront.errors import CatalogError
from storefront.utils.logger import get_logger

logger = get_logger("data.catalog_store")


def _project_root() -> Path:
    """Return project root (parent of storefront package)."""
    return Path(__file__).resolve().parent.parent.parent


def _normalize_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize a raw product row before validation.

    Handles the shapes a table join produces:
    - ``categories`` instead of ``category`` for the joined relation
    - numeric ids
    - ``options`` given as a bare list of groups
    """
    normalized = dict(row)

    if "category" not in normalized and "categories" in normalized:
        normalized["category"] = normalized.pop("categories")

    if normalized.get("id") is not None:
        normalized["id"] = str(normalized["id"])

    category = normalized.get("category")
    if isinstance(category, dict) and category.get("id") is not None:
        normalized["category"] = {**category, "id": str(category["id"])}

    options = normalized.get("options")
    if isinstance(options, list):
        normalized["options"] = {"groups": options}

    return normalized


def parse_product(row: Dict[str, Any]) -> Product:
    """
    Parse one catalog row into a Product.

    Raises:
        CatalogError: If the row is not a mapping or fails validation.
    """
    if not isinstance(row, dict):
        raise CatalogError(f"Catalog row must be a mapping, got {type(row).__name__}")

    try:
        return Product.model_validate(_normalize_row(row))
    except ValidationError as e:
        raise CatalogError(f"Invalid product row {row.get('id')!r}: {e}") from e


def load_catalog(rows: Iterable[Dict[str, Any]], skip_invalid: bool = False) -> List[Product]:
    """
    Parse rows into an ordered product list.

    Args:
        rows: Product rows in catalog order
        skip_invalid: Log and drop invalid rows instead of raising

    Returns:
        Products in the same order as the rows
    """
    products: List[Product] = []
    skipped = 0

    for row in rows:
        try:
            products.append(parse_product(row))
        except CatalogError as e:
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning(f"Skipping catalog row: {e}")

    logger.info(f"Loaded {len(products)} products ({skipped} skipped)")
    return products


def load_catalog_file(path: Path | str, skip_invalid: bool = False) -> List[Product]:
    """
    Load a catalog from a JSON export.

    The file holds either a list of rows or an object with a "products" list.
    """
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        path = _project_root() / path

    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogError(f"Catalog file {path} is not valid UTF-8 JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("products")
    if not isinstance(data, list):
        raise CatalogError(f"Catalog file {path} must contain a list of products")

    logger.info(f"Reading catalog from {path}")
    return load_catalog(data, skip_invalid=skip_invalid)


@dataclass
class CatalogStore:
    """
    Lazily loaded, cached catalog backed by a JSON export.
    """
    path: Path | str
    skip_invalid: bool = False
    _products: Optional[List[Product]] = field(default=None, init=False, repr=False)

    def products(self) -> List[Product]:
        """Return all products in catalog order, loading on first access."""
        if self._products is None:
            self._products = load_catalog_file(self.path, skip_invalid=self.skip_invalid)
        return list(self._products)

    def reload(self) -> List[Product]:
        """Drop the cached catalog and read it again."""
        self._products = None
        return self.products()

    def categories(self) -> List[Category]:
        """Unique categories in first-seen order."""
        seen: Dict[str, Category] = {}
        for product in self.products():
            if product.category and product.category.id not in seen:
                seen[product.category.id] = product.category
        return list(seen.values())

    def get(self, product_id: str) -> Optional[Product]:
        """Return the product with the given id, or None."""
        for product in self.products():
            if product.id == product_id:
                return product
        return None
