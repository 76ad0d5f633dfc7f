"""
Shared fixtures for storefront tests.
"""
from pathlib import Path

import pytest

from storefront.core.config import StorefrontConfig
from storefront.data.models import (
    Category,
    Product,
    ProductOptionGroup,
    ProductOptionItem,
    ProductOptions,
)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SAMPLE_CATALOG = PROJECT_ROOT / "data" / "catalog.json"

COFFEE = Category(id="coffee", title="Coffee")
TEA = Category(id="tea", title="Tea")


def make_product(title: str, category: Category = None, amount: float = 1.0, **kwargs) -> Product:
    """Build a product with an id derived from the title."""
    product_id = kwargs.pop("id", title.lower().replace(" ", "-"))
    return Product(id=product_id, title=title, amount=amount, category=category, **kwargs)


def titles(products):
    return [p.title for p in products]


@pytest.fixture
def sample_catalog_path() -> Path:
    return SAMPLE_CATALOG


@pytest.fixture
def config() -> StorefrontConfig:
    return StorefrontConfig(suggestion_limit=5, currency="$", catalog_path=str(SAMPLE_CATALOG))


@pytest.fixture
def drinks():
    return [
        make_product("Tea", TEA, 3.0),
        make_product("Iced Tea", TEA, 3.5),
        make_product("Green Tea", TEA, 3.25),
        make_product("Latte", COFFEE, 4.5),
        make_product("Late Fee", None, 10.0),
        make_product("Mocha", COFFEE, 5.0),
    ]


@pytest.fixture
def latte() -> Product:
    return Product(
        id="p-latte",
        title="Latte",
        amount=4.5,
        category=COFFEE,
        options=ProductOptions(groups=[
            ProductOptionGroup(
                key="size",
                label="Size",
                required=True,
                options=[
                    ProductOptionItem(label="Small", price=0),
                    ProductOptionItem(label="Large", price=1.0),
                ],
            ),
            ProductOptionGroup(
                key="milk",
                label="Milk",
                required=False,
                options=[
                    ProductOptionItem(label="Whole", price=0),
                    ProductOptionItem(label="Oat", price=0.75),
                ],
            ),
        ]),
    )
