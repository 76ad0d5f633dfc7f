"""
Pydantic models for catalog records.

Products arrive from the data-fetch layer as rows; these models give them a
typed shape. The discovery and pricing functions only read them.
"""
from pydantic import BaseModel, Field
from typing import Literal, Optional, List


class Category(BaseModel):
    """Product category, referenced by id and title."""
    id: str = Field(description="Category identifier")
    title: str = Field(description="Display title")


class ProductOptionItem(BaseModel):
    """One choice inside an option group."""
    label: str = Field(description="Choice label shown to the customer")
    price: float = Field(default=0.0, description="Price added to the base amount when chosen")


class ProductOptionGroup(BaseModel):
    """A named group of choices, e.g. size or milk."""
    key: str = Field(description="Key used in selected-options mappings")
    label: str = Field(description="Group label")
    type: Literal["single", "multiple"] = Field(default="single", description="Selection mode")
    required: bool = Field(default=False, description="Whether a choice must be made before adding to cart")
    options: List[ProductOptionItem] = Field(default_factory=list)


class ProductOptions(BaseModel):
    """Option groups attached to a product."""
    groups: List[ProductOptionGroup] = Field(default_factory=list)


class Product(BaseModel):
    """A catalog product."""
    id: str
    title: str
    description: Optional[str] = None
    image: Optional[str] = Field(default=None, description="Image reference (URL or storage key)")
    amount: float = Field(description="Base price before options")
    in_stock: bool = True
    category: Optional[Category] = None
    options: Optional[ProductOptions] = None

    @property
    def category_id(self) -> Optional[str]:
        return self.category.id if self.category else None

    def option_groups(self) -> List[ProductOptionGroup]:
        """Option groups of the product, empty when it has none."""
        if self.options is None:
            return []
        return list(self.options.groups)
