"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog products.

==============================================================================
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from farmstore.utils.money import format_money


class Product(BaseModel):
    """
    Product model for catalog items.

    Instances are created by ``Catalog.add_product`` only. Every field except
    ``stock_quantity`` is frozen, and assignment is validated, so stock can
    never be set below zero.

    Attributes:
        internal_id: Catalog-assigned id, never reused
        item_code: Operator-assigned code, unique case-insensitively
        name: Display name
        category: Free-text category (e.g., "Feed", "Toys")
        unit_price: Price per unit
        taxable: Whether sales tax applies
        stock_quantity: Units on hand
    """

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )

    internal_id: int = Field(..., ge=1, frozen=True, description="Internal id")
    item_code: str = Field(..., min_length=1, frozen=True, description="Operator item code")
    name: str = Field(..., min_length=1, frozen=True, description="Product name")
    category: str = Field(default="", frozen=True, description="Category")
    unit_price: Decimal = Field(..., ge=0, frozen=True, description="Unit price")
    taxable: bool = Field(default=False, frozen=True, description="Sales tax applies")
    stock_quantity: int = Field(default=0, ge=0, description="Units on hand")

    def __str__(self) -> str:
        return (
            f"[{self.item_code}] {self.name} - "
            f"{format_money(self.unit_price)} ({self.stock_quantity} in stock)"
        )
