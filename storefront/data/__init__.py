"""
Catalog records and loading.
"""
from storefront.data.models import Category, Product, ProductOptionGroup, ProductOptionItem, ProductOptions
from storefront.data.catalog_store import CatalogStore, load_catalog, load_catalog_file, parse_product

__all__ = [
    "Category",
    "Product",
    "ProductOptionGroup",
    "ProductOptionItem",
    "ProductOptions",
    "CatalogStore",
    "load_catalog",
    "load_catalog_file",
    "parse_product",
]
